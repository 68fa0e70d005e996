"""Tests for prime sieve functionality."""

import numpy as np
import pytest

from primality.core.errors import InvalidArgumentError
from primality.core.sieve import (
    SMALL_PRIME_LIMIT,
    sieve_up_to,
    is_prime_by_mask,
    prime_sieve_mask,
    primes_in_range,
    small_prime_mask,
)


class TestSieveUpTo:
    """Tests for sieve_up_to function."""

    def test_primes_up_to_30(self):
        """Test primes up to 30."""
        primes = sieve_up_to(30)
        expected = np.array([2, 3, 5, 7, 11, 13, 17, 19, 23, 29])
        np.testing.assert_array_equal(primes, expected)

    def test_primes_up_to_100(self):
        """Test primes up to 100."""
        primes = sieve_up_to(100)
        assert len(primes) == 25  # There are 25 primes <= 100
        assert primes[0] == 2
        assert primes[-1] == 97

    def test_limit_is_inclusive(self):
        """Test that a prime limit is included."""
        assert sieve_up_to(29)[-1] == 29
        np.testing.assert_array_equal(sieve_up_to(2), np.array([2]))

    def test_small_limits_are_empty(self):
        """Test that limits below 2 yield no primes."""
        for limit in (-5, 0, 1):
            assert len(sieve_up_to(limit)) == 0

    def test_ascending_without_duplicates(self):
        """Test ordering of a larger sieve."""
        primes = sieve_up_to(10000)
        assert np.all(np.diff(primes) > 0)

    def test_returns_numpy_array(self):
        """Test that result is numpy array."""
        primes = sieve_up_to(50)
        assert isinstance(primes, np.ndarray)


class TestPrimeSieveMask:
    """Tests for prime_sieve_mask function."""

    def test_mask_up_to_20(self):
        """Test mask up to 20."""
        mask = prime_sieve_mask(20)
        assert len(mask) == 21
        assert mask[2] == True
        assert mask[3] == True
        assert mask[4] == False
        assert mask[19] == True
        assert mask[20] == False

    def test_mask_indexing(self):
        """Test that mask can be used for indexing."""
        mask = prime_sieve_mask(99)
        grid = np.arange(100)
        primes = grid[mask]
        assert len(primes) == 25

    def test_tiny_masks(self):
        """Test masks that contain no primes."""
        assert len(prime_sieve_mask(1)) == 2
        assert not prime_sieve_mask(1).any()
        assert len(prime_sieve_mask(-1)) == 0


class TestSmallPrimeMask:
    """Tests for the cached small-prime mask."""

    def test_built_once(self):
        """Test that the same array is returned on every call."""
        assert small_prime_mask() is small_prime_mask()

    def test_read_only(self):
        """Test that the cached mask cannot be mutated."""
        mask = small_prime_mask()
        with pytest.raises(ValueError):
            mask[4] = True

    def test_covers_limit(self):
        """Test mask size."""
        assert len(small_prime_mask()) == SMALL_PRIME_LIMIT + 1

    def test_lookup(self):
        """Test lookups against the mask."""
        assert is_prime_by_mask(2)
        assert is_prime_by_mask(131071)  # 2^17 - 1
        assert not is_prime_by_mask(0)
        assert not is_prime_by_mask(1)
        assert not is_prime_by_mask(SMALL_PRIME_LIMIT)

    def test_lookup_above_cached_range(self):
        """Test lookups past the cached mask fall back to a full sieve."""
        assert is_prime_by_mask(131101)
        assert not is_prime_by_mask(131103)  # 3 * 43701
        assert not is_prime_by_mask(SMALL_PRIME_LIMIT + 2)
        assert len(small_prime_mask()) == SMALL_PRIME_LIMIT + 1

    def test_lookup_negative(self):
        """Test that negative lookups raise."""
        with pytest.raises(InvalidArgumentError):
            is_prime_by_mask(-1)


class TestPrimesInRange:
    """Tests for primes_in_range function."""

    def test_range(self):
        """Test primes between 10 and 30."""
        np.testing.assert_array_equal(
            primes_in_range(10, 30), np.array([11, 13, 17, 19, 23, 29])
        )

    def test_inverted_range(self):
        """Test that start > stop raises."""
        with pytest.raises(InvalidArgumentError):
            primes_in_range(30, 10)
