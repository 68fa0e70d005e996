"""Miller-Rabin probabilistic primality test.

Small inputs are answered exactly from the shared sieve mask. Larger inputs
run `rounds` strong-probable-prime checks with bases drawn from an injected
random source, so a fixed seed reproduces the same witness sequence. Forcing
base 2 on the final round makes the combined test deterministic for the
ranges where base 2 has no strong pseudoprimes among the sampled bases.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from primality.core.errors import require_non_negative, require_positive
from primality.core.number_theory import modpow, split_power_of_two
from primality.core.sieve import SMALL_PRIME_LIMIT, is_prime_by_mask

logger = logging.getLogger(__name__)


@dataclass
class MillerRabinConfig:
    """Configuration for Miller-Rabin.

    Attributes:
        rounds: Number of random bases to try.
        force_base_two: Use base 2 on the final round.
        mask_limit: Inputs up to this value are answered from the sieve mask.
    """
    rounds: int = 25
    force_base_two: bool = True
    mask_limit: int = SMALL_PRIME_LIMIT

    def __post_init__(self):
        require_positive("rounds", self.rounds)
        require_non_negative("mask_limit", self.mask_limit)
        self.mask_limit = min(self.mask_limit, SMALL_PRIME_LIMIT)


def is_strong_probable_prime(n: int, a: int, s: int, d: int) -> bool:
    """Strong probable-prime check of odd n to base a, with n - 1 == 2^s * d."""
    x = modpow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    # Either a^(n-1) != 1 or a nontrivial square root of 1 was passed over
    return False


class MillerRabinEngine:
    """Miller-Rabin test with stored defaults and random source.

    Attributes:
        config: Test configuration.
        rng: Source of random bases.
    """

    def __init__(
        self,
        config: MillerRabinConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or MillerRabinConfig()
        self.rng = rng if rng is not None else random.Random()

    def test(self, n: int) -> bool:
        """Return True if n is (probably) prime.

        Raises:
            InvalidArgumentError: If n is negative.
        """
        require_non_negative("n", n)
        if n < 2:
            return False
        if n < 4:
            return True
        if n % 2 == 0:
            return False
        if n <= self.config.mask_limit:
            return is_prime_by_mask(n)

        s, d = split_power_of_two(n - 1)
        rounds = self.config.rounds
        for i in range(rounds):
            if self.config.force_base_two and i == rounds - 1:
                a = 2
            else:
                a = self.rng.randrange(2, n - 1)
            if not is_strong_probable_prime(n, a, s, d):
                logger.debug("n=%d: base %d is a witness of compositeness", n, a)
                return False
        return True


def is_prime_miller_rabin(
    n: int,
    rounds: int = 25,
    force_base_two: bool = True,
    rng: random.Random | None = None,
) -> bool:
    """Probabilistic primality test.

    Args:
        n: Non-negative integer to test.
        rounds: Number of bases to try; must be positive.
        force_base_two: Use base 2 on the final round.
        rng: Random source for bases; a fresh unseeded one if None.

    Returns:
        False if n is certainly composite, True if n is a probable prime.

    Raises:
        InvalidArgumentError: If n < 0 or rounds < 1.
    """
    config = MillerRabinConfig(rounds=rounds, force_base_two=force_base_two)
    return MillerRabinEngine(config, rng).test(n)
