"""Prime generation with a NumPy sieve of Eratosthenes.

Also owns the process-wide small-prime mask used for O(1) membership
lookups. The mask is built lazily on first use, exactly once, and is marked
read-only so no caller can mutate it afterwards.
"""

from __future__ import annotations

import logging
import threading

import numpy as np

from primality.core.errors import InvalidArgumentError, require_non_negative

logger = logging.getLogger(__name__)

SMALL_PRIME_LIMIT = 1 << 17

_mask_lock = threading.Lock()
_small_mask: np.ndarray | None = None


def _sieve_flags(limit: int) -> np.ndarray:
    """Boolean array of length limit + 1 where flags[i] is True iff i is prime."""
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False

    for i in range(2, int(np.sqrt(limit)) + 1):
        if is_prime[i]:
            is_prime[i*i::i] = False

    return is_prime


def sieve_up_to(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Ascending int64 array of primes; empty when limit < 2.
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    return np.nonzero(_sieve_flags(limit))[0].astype(np.int64)


def prime_sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Largest value covered by the mask (inclusive).

    Returns:
        Boolean array of length limit + 1 (empty for negative limit).
    """
    if limit < 0:
        return np.zeros(0, dtype=bool)
    if limit < 2:
        return np.zeros(limit + 1, dtype=bool)
    return _sieve_flags(limit)


def small_prime_mask() -> np.ndarray:
    """Return the shared read-only mask for [0, SMALL_PRIME_LIMIT]."""
    global _small_mask
    if _small_mask is None:
        with _mask_lock:
            if _small_mask is None:
                mask = prime_sieve_mask(SMALL_PRIME_LIMIT)
                mask.flags.writeable = False
                logger.debug("Built small prime mask up to %d", SMALL_PRIME_LIMIT)
                _small_mask = mask
    return _small_mask

def is_prime_by_mask(n: int) -> bool:
    """Primality lookup against a sieve mask.

    Values up to SMALL_PRIME_LIMIT are answered in O(1) from the cached
    mask. Larger odd values are answered by sieving up to n.

    Raises:
        InvalidArgumentError: If n is negative.
    """
    require_non_negative("n", n)
    if n <= SMALL_PRIME_LIMIT:
        return bool(small_prime_mask()[n])
    if n % 2 == 0:
        return False
    return bool(prime_sieve_mask(n)[n])


def primes_in_range(start: int, stop: int) -> np.ndarray:
    """Generate prime numbers in range [start, stop].

    Args:
        start: Lower bound (inclusive).
        stop: Upper bound (inclusive).

    Returns:
        Array of primes in the specified range.
    """
    if start > stop:
        raise InvalidArgumentError(f"start ({start}) must be <= stop ({stop})")

    all_primes = sieve_up_to(stop)
    return all_primes[all_primes >= start]
