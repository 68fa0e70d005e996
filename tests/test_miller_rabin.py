"""Tests for the Miller-Rabin probabilistic test."""

import random

import pytest

from primality.algorithms.miller_rabin import (
    MillerRabinConfig,
    MillerRabinEngine,
    is_prime_miller_rabin,
    is_strong_probable_prime,
)
from primality.core.errors import InvalidArgumentError
from primality.core.number_theory import split_power_of_two
from primality.core.sieve import SMALL_PRIME_LIMIT, primes_in_range


class RecordingRandom(random.Random):
    """Random source that records every base it hands out."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.bases = []

    def randrange(self, start, stop=None, step=1):
        value = super().randrange(start, stop, step)
        self.bases.append(value)
        return value


class TestSmallInputs:
    """Tests for inputs answered without random bases."""

    def test_below_two_and_even(self):
        """Test trivial rejections."""
        assert not is_prime_miller_rabin(0)
        assert not is_prime_miller_rabin(1)
        assert is_prime_miller_rabin(2)
        assert is_prime_miller_rabin(3)
        assert not is_prime_miller_rabin(4)
        assert not is_prime_miller_rabin(2**80)

    def test_count_below_1000(self):
        """Test the number of primes up to 1000."""
        count = sum(1 for n in range(1, 1001) if is_prime_miller_rabin(n, 25, True))
        assert count == 168

    def test_mask_range_uses_no_randomness(self):
        """Test that n within the mask never draws a base."""
        rng = RecordingRandom(0)
        assert is_prime_miller_rabin(SMALL_PRIME_LIMIT - 1, rng=rng)  # 131071
        assert rng.bases == []

    def test_invalid_arguments(self):
        """Test argument validation."""
        with pytest.raises(InvalidArgumentError):
            is_prime_miller_rabin(-3)
        with pytest.raises(InvalidArgumentError):
            is_prime_miller_rabin(101, rounds=0)


class TestLargeInputs:
    """Tests for inputs beyond the sieve mask."""

    def test_mersenne_primes(self):
        """Test known Mersenne primes."""
        rng = random.Random(7)
        for p in (2**31 - 1, 2**61 - 1, 2**127 - 1):
            assert is_prime_miller_rabin(p, rng=rng)

    def test_composites(self):
        """Test composites past the mask, including Carmichael numbers."""
        rng = random.Random(7)
        for n in (2**61 + 1, 252601, 3215031751, (2**31 - 1) * (2**61 - 1)):
            assert not is_prime_miller_rabin(n, rng=rng)

    def test_matches_sieve_just_past_mask(self):
        """Test agreement with the sieve above 2^17."""
        rng = random.Random(11)
        lo = SMALL_PRIME_LIMIT + 1
        hi = SMALL_PRIME_LIMIT + 3000
        count = sum(1 for n in range(lo, hi + 1) if is_prime_miller_rabin(n, 10, True, rng))
        assert count == len(primes_in_range(lo, hi))


class TestBaseSelection:
    """Tests for base selection and the injected random source."""

    def test_base_two_forced_on_last_round(self):
        """Test that only rounds - 1 random bases are drawn."""
        rng = RecordingRandom(3)
        assert is_prime_miller_rabin(2**31 - 1, rounds=4, force_base_two=True, rng=rng)
        assert len(rng.bases) == 3

        rng = RecordingRandom(3)
        assert is_prime_miller_rabin(2**31 - 1, rounds=4, force_base_two=False, rng=rng)
        assert len(rng.bases) == 4

    def test_bases_in_range(self):
        """Test that bases lie in [2, n - 2]."""
        n = 2**31 - 1
        rng = RecordingRandom(5)
        is_prime_miller_rabin(n, rounds=50, force_base_two=False, rng=rng)
        assert all(2 <= a <= n - 2 for a in rng.bases)

    def test_seed_reproducible(self):
        """Test that equal seeds draw equal bases."""
        first, second = RecordingRandom(42), RecordingRandom(42)
        is_prime_miller_rabin(2**61 - 1, rounds=10, rng=first)
        is_prime_miller_rabin(2**61 - 1, rounds=10, rng=second)
        assert first.bases == second.bases

    def test_base_two_pseudoprime(self):
        """Test that a strong pseudoprime to base 2 fools a base-2-only run."""
        engine = MillerRabinEngine(MillerRabinConfig(rounds=1), random.Random(0))
        assert engine.test(3215031751)


class TestStrongProbablePrime:
    """Tests for the single-base check."""

    def test_pseudoprime_2047(self):
        """Test 2047 = 23 * 89 passes base 2 but fails base 3."""
        s, d = split_power_of_two(2046)
        assert is_strong_probable_prime(2047, 2, s, d)
        assert not is_strong_probable_prime(2047, 3, s, d)

    def test_prime(self):
        """Test every base passes for a prime."""
        s, d = split_power_of_two(100)
        assert all(is_strong_probable_prime(101, a, s, d) for a in range(2, 100))


class TestConfig:
    """Tests for MillerRabinConfig."""

    def test_defaults(self):
        """Test default configuration."""
        config = MillerRabinConfig()
        assert config.rounds == 25
        assert config.force_base_two is True
        assert config.mask_limit == SMALL_PRIME_LIMIT

    def test_mask_limit_capped(self):
        """Test that the mask limit cannot exceed the cached mask."""
        assert MillerRabinConfig(mask_limit=10**9).mask_limit == SMALL_PRIME_LIMIT

    def test_without_mask(self):
        """Test small inputs through the probabilistic path."""
        engine = MillerRabinEngine(MillerRabinConfig(mask_limit=0), random.Random(1))
        primes = [n for n in range(1, 200) if engine.test(n)]
        assert len(primes) == 46
