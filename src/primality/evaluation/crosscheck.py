"""Cross-validation of the AKS, Miller-Rabin and sieve-mask tests.

Runs every method over [1, max_n], records which integers each one calls
prime, and reports disagreements and timings. The sieve mask is the ground
truth wherever it covers the range.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from primality.algorithms.aks import AKSConfig, AKSEngine
from primality.algorithms.miller_rabin import MillerRabinConfig, MillerRabinEngine
from primality.core.errors import require_positive
from primality.core.sieve import SMALL_PRIME_LIMIT, prime_sieve_mask

logger = logging.getLogger(__name__)


@dataclass
class MethodResult:
    """Outcome of one primality method over the range.

    Attributes:
        name: Method name.
        primes: Integers the method reported prime.
        elapsed: Wall time in seconds.
    """
    name: str
    primes: list[int] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def count(self) -> int:
        return len(self.primes)

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'count': self.count,
            'elapsed': self.elapsed,
        }


@dataclass
class CrossCheckResult:
    """Comparison of all methods over [1, max_n].

    Attributes:
        max_n: Upper end of the range (inclusive).
        methods: Per-method results keyed by name.
        disagreements: Integers on which at least two methods differ.
    """
    max_n: int
    methods: dict[str, MethodResult] = field(default_factory=dict)
    disagreements: list[int] = field(default_factory=list)

    @property
    def agree(self) -> bool:
        return not self.disagreements

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'max_n': self.max_n,
            'agree': self.agree,
            'disagreements': self.disagreements,
            'methods': {name: m.to_dict() for name, m in self.methods.items()},
        }


def _run_method(name: str, test, max_n: int) -> MethodResult:
    start = time.perf_counter()
    primes = [n for n in range(1, max_n + 1) if test(n)]
    elapsed = time.perf_counter() - start
    logger.info(f"  {name:<13} {len(primes):>7} primes in {elapsed:.3f}s")
    return MethodResult(name=name, primes=primes, elapsed=elapsed)


def cross_validate(
    max_n: int,
    rounds: int = 25,
    seed: int | None = 42,
    aks_config: AKSConfig | None = None,
) -> CrossCheckResult:
    """Compare AKS, Miller-Rabin and (where it covers the range) the sieve.

    Args:
        max_n: Upper end of the range (inclusive).
        rounds: Miller-Rabin rounds.
        seed: Seed for Miller-Rabin base selection.
        aks_config: Optional AKS engine configuration.

    Returns:
        CrossCheckResult with per-method results and disagreements.
    """
    require_positive("max_n", max_n)
    logger.info(f"Cross-checking primality tests on [1, {max_n}]")

    aks = AKSEngine(aks_config)
    mr = MillerRabinEngine(MillerRabinConfig(rounds=rounds), random.Random(seed))

    result = CrossCheckResult(max_n=max_n)
    result.methods['aks'] = _run_method(
        'aks', lambda n: n >= 2 and aks.test(n).is_prime, max_n
    )
    result.methods['miller_rabin'] = _run_method('miller_rabin', mr.test, max_n)

    if max_n <= SMALL_PRIME_LIMIT:
        mask = prime_sieve_mask(max_n)
        result.methods['sieve'] = _run_method('sieve', lambda n: bool(mask[n]), max_n)

    verdicts = np.zeros((len(result.methods), max_n + 1), dtype=bool)
    for row, method in enumerate(result.methods.values()):
        verdicts[row, method.primes] = True
    differs = verdicts.any(axis=0) & ~verdicts.all(axis=0)
    result.disagreements = [int(n) for n in np.nonzero(differs)[0]]

    if result.disagreements:
        logger.warning(f"Methods disagree on {len(result.disagreements)} integers")

    return result
