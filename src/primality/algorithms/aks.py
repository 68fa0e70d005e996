"""Deterministic AKS primality test.

The test runs six steps in order, stopping at the first one that decides:

1. Base power check: n == a^b with a, b >= 2 is composite.
2. Order search: pick r with ord_r(n) > log2(n)^2.
3. GCD check: any 1 < gcd(i, n) < n for i <= r is composite.
4. Small-n shortcut: n <= r (and n below 5,690,034) is prime.
5. Witness loop: (x + a)^n == x^n + a in Z_n[x] / (x^r - 1) for
   a = 1 .. floor(sqrt(phi(r)) * log2 n); any mismatch is composite.
6. Otherwise prime.

Only exact integer arithmetic is used. A broken internal invariant raises
ArithmeticInvariantError rather than producing a verdict.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any

from primality.algorithms.order import find_order_modulus
from primality.core.errors import InvalidArgumentError, require_non_negative
from primality.core.number_theory import (
    ceil_log2,
    euler_totient,
    gcd,
    isqrt,
    perfect_power,
)
from primality.core.polynomial import (
    Polynomial,
    add,
    binomial_row,
    cyclotomic_modulus,
    div_rem,
    monomial,
    reduce_mod,
    scale_binomials,
)

logger = logging.getLogger(__name__)

SMALL_N_LIMIT = 5_690_034


class AKSVerdict(Enum):
    """Outcome of the AKS test."""
    PRIME = "PRIME"
    COMPOSITE = "COMPOSITE"


class AKSStep(Enum):
    """Pipeline step that produced the verdict."""
    BASE_POWER = "base_power"
    GCD = "gcd"
    SMALL_N = "small_n"
    WITNESS = "witness"
    ACCEPT = "accept"


@dataclass
class AKSConfig:
    """Configuration for the AKS engine.

    Attributes:
        small_n_limit: Largest n eligible for the n <= r shortcut.
        workers: Number of parallel workers for the witness loop; 1 runs
            sequentially.
        backend: "process" or "thread" pool when workers > 1.
        chunks_per_worker: Witness ranges handed to each worker; more chunks
            lets a failure cancel more pending work.
    """
    small_n_limit: int = SMALL_N_LIMIT
    workers: int = 1
    backend: str = "process"
    chunks_per_worker: int = 4

    def __post_init__(self):
        if self.workers < 1:
            raise InvalidArgumentError(f"workers must be >= 1, got {self.workers}")
        if self.chunks_per_worker < 1:
            raise InvalidArgumentError(
                f"chunks_per_worker must be >= 1, got {self.chunks_per_worker}"
            )
        if self.backend not in ("process", "thread"):
            raise InvalidArgumentError(
                f"backend must be 'process' or 'thread', got {self.backend!r}"
            )


@dataclass
class AKSReport:
    """Verdict plus the quantities computed on the way to it.

    Attributes:
        n: Tested integer.
        verdict: PRIME or COMPOSITE.
        step: Step that decided.
        r: Modulus from the order search (None if not reached).
        max_a: Witness bound (None if the loop was not reached).
        witness: Failing witness a, if step is WITNESS.
        power: (a, b) with n == a**b, if step is BASE_POWER.
        divisor: Non-trivial gcd found, if step is GCD.
    """
    n: int
    verdict: AKSVerdict
    step: AKSStep
    r: int | None = None
    max_a: int | None = None
    witness: int | None = None
    power: tuple[int, int] | None = None
    divisor: int | None = None

    @property
    def is_prime(self) -> bool:
        return self.verdict is AKSVerdict.PRIME

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        d = asdict(self)
        d['verdict'] = self.verdict.value
        d['step'] = self.step.value
        return d


def witness_bound(n: int, r: int) -> int:
    """floor(sqrt(phi(r)) * ceil(log2 n)), an integer cover of the AKS limit."""
    return isqrt(euler_totient(r) * ceil_log2(n) ** 2)


def congruence_holds(
    n: int,
    r: int,
    a: int,
    row: list[int] | None = None,
) -> bool:
    """Check (x + a)^n == x^n + a modulo (x^r - 1, n).

    Reducing the expansion mod n before dividing gives the same remainder
    mod n, since x^r - 1 is monic.

    Args:
        n: Integer under test.
        r: Ring modulus from the order search.
        a: Witness.
        row: Binomial row of n reduced mod n, reused across witnesses.
    """
    if row is None:
        row = binomial_row(n, n)
    divisor = cyclotomic_modulus(r)
    _, left = div_rem(scale_binomials(row, a, n), divisor)
    _, right = div_rem(add(monomial(n), Polynomial([a])), divisor)
    return reduce_mod(left, n) == reduce_mod(right, n)


def first_failing_witness(
    n: int,
    r: int,
    start: int,
    stop: int,
    row: list[int] | None = None,
) -> int | None:
    """Return the first a in [start, stop) failing the congruence, else None.

    `row` is the binomial row of n reduced mod n; pass it in to share one
    computation across many ranges.
    """
    if row is None:
        row = binomial_row(n, n)
    for a in range(start, stop):
        if not congruence_holds(n, r, a, row):
            return a
    return None


def _partition(max_a: int, parts: int) -> list[tuple[int, int]]:
    """Split [1, max_a] into at most `parts` contiguous half-open ranges."""
    size = max(1, -(-max_a // parts))
    return [(lo, min(lo + size, max_a + 1)) for lo in range(1, max_a + 1, size)]


class AKSEngine:
    """Runs the six-step AKS pipeline.

    Attributes:
        config: Engine configuration.
    """

    def __init__(self, config: AKSConfig | None = None):
        self.config = config or AKSConfig()

    def test(self, n: int) -> AKSReport:
        """Decide primality of n >= 2.

        Args:
            n: Integer to test.

        Returns:
            AKSReport describing the verdict and the deciding step.

        Raises:
            InvalidArgumentError: If n < 2.
            ArithmeticInvariantError: If an internal invariant breaks.
        """
        if n < 2:
            raise InvalidArgumentError(f"n must be >= 2, got {n}")

        power = perfect_power(n)
        if power is not None:
            logger.debug("n=%d is %d^%d", n, *power)
            return AKSReport(n, AKSVerdict.COMPOSITE, AKSStep.BASE_POWER, power=power)

        r = find_order_modulus(n).r

        for i in range(2, r + 1):
            d = gcd(i, n)
            if 1 < d < n:
                logger.debug("n=%d: gcd(%d, n) = %d", n, i, d)
                return AKSReport(n, AKSVerdict.COMPOSITE, AKSStep.GCD, r=r, divisor=d)

        if n <= self.config.small_n_limit and n <= r:
            return AKSReport(n, AKSVerdict.PRIME, AKSStep.SMALL_N, r=r)

        max_a = witness_bound(n, r)
        logger.debug("n=%d: r=%d, checking witnesses 1..%d", n, r, max_a)

        if self.config.workers > 1:
            witness = self._parallel_witness(n, r, max_a)
        else:
            witness = first_failing_witness(n, r, 1, max_a + 1)

        if witness is not None:
            logger.debug("n=%d: witness a=%d fails", n, witness)
            return AKSReport(
                n, AKSVerdict.COMPOSITE, AKSStep.WITNESS,
                r=r, max_a=max_a, witness=witness,
            )

        return AKSReport(n, AKSVerdict.PRIME, AKSStep.ACCEPT, r=r, max_a=max_a)

    def _parallel_witness(self, n: int, r: int, max_a: int) -> int | None:
        """Spread the witness range over a pool; first failure wins."""
        ranges = _partition(max_a, self.config.workers * self.config.chunks_per_worker)
        row = binomial_row(n, n)
        pool_cls = ProcessPoolExecutor if self.config.backend == "process" else ThreadPoolExecutor

        with pool_cls(max_workers=self.config.workers) as pool:
            futures = [
                pool.submit(first_failing_witness, n, r, lo, hi, row) for lo, hi in ranges
            ]
            for future in as_completed(futures):
                witness = future.result()
                if witness is not None:
                    for f in futures:
                        f.cancel()
                    return witness
        return None


def is_prime_aks(n: int, config: AKSConfig | None = None) -> bool:
    """Deterministic primality test.

    Args:
        n: Non-negative integer.
        config: Optional engine configuration.

    Returns:
        True if n is prime. Always False for n < 2.

    Raises:
        InvalidArgumentError: If n is negative.
    """
    require_non_negative("n", n)
    if n < 2:
        return False
    return AKSEngine(config).test(n).is_prime
