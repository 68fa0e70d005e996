"""Integer-exact number theory primitives.

Every bound used by the primality tests is derived here from integer
arithmetic only (``int.bit_length``, binary-search roots, ``math.isqrt``), so
results never depend on floating-point rounding of ``log``/``pow``/``sqrt``.
"""

from __future__ import annotations

import math

from primality.core.errors import (
    InvalidArgumentError,
    require_non_negative,
    require_positive,
)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm.

    Args:
        a: Non-negative integer.
        b: Non-negative integer.

    Returns:
        gcd(a, b), with gcd(0, 0) == 0.

    Raises:
        InvalidArgumentError: If either argument is negative.
    """
    require_non_negative("a", a)
    require_non_negative("b", b)
    while b:
        a, b = b, a % b
    return a


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus by square-and-multiply.

    Args:
        base: Any integer; reduced into [0, modulus) first.
        exponent: Non-negative exponent.
        modulus: Positive modulus.

    Returns:
        Value in [0, modulus).

    Raises:
        InvalidArgumentError: If modulus <= 0 or exponent < 0.
    """
    if modulus <= 0:
        raise InvalidArgumentError(f"modulus must be >= 1, got {modulus}")
    require_non_negative("exponent", exponent)
    if modulus == 1:
        return 0

    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        exponent >>= 1
        base = base * base % modulus
    return result


def floor_log2(n: int) -> int:
    """Return floor(log2(n)) for n >= 1."""
    require_positive("n", n)
    return n.bit_length() - 1


def ceil_log2(n: int) -> int:
    """Return ceil(log2(n)) for n >= 1."""
    require_positive("n", n)
    return (n - 1).bit_length()


def isqrt(n: int) -> int:
    """Return floor(sqrt(n)) for n >= 0."""
    require_non_negative("n", n)
    return math.isqrt(n)


def integer_nth_root(n: int, k: int) -> int:
    """Return floor(n^(1/k)) by binary search over exact integer powers.

    Args:
        n: Non-negative radicand.
        k: Positive root index.

    Returns:
        Largest integer a with a**k <= n.
    """
    require_non_negative("n", n)
    require_positive("k", k)
    if n < 2 or k == 1:
        return n

    lo = 1
    # 2^ceil(bits/k) is always >= n^(1/k)
    hi = 1 << -(-n.bit_length() // k)
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if mid ** k <= n:
            lo = mid
        else:
            hi = mid - 1
    return lo


def perfect_power(n: int) -> tuple[int, int] | None:
    """Find a representation n == a**b with a >= 2 and b >= 2.

    Exponents are tried from 2 up to floor(log2(n)); larger exponents would
    need a base below 2.

    Returns:
        (a, b) for the smallest such exponent b, or None.
    """
    require_non_negative("n", n)
    if n < 4:
        return None

    for b in range(2, floor_log2(n) + 1):
        a = integer_nth_root(n, b)
        if a >= 2 and a ** b == n:
            return a, b
    return None


def euler_totient(m: int) -> int:
    """Euler's totient via trial-division factorization, O(sqrt(m)).

    Args:
        m: Positive integer.

    Returns:
        Count of integers in [1, m] coprime to m; euler_totient(1) == 1.
    """
    require_positive("m", m)

    result = m
    p = 2
    while p * p <= m:
        if m % p == 0:
            while m % p == 0:
                m //= p
            result -= result // p
        p += 1 if p == 2 else 2
    if m > 1:
        result -= result // m
    return result


def multiplicative_order(n: int, r: int, limit: int | None = None) -> int | None:
    """Smallest k >= 1 with n^k == 1 (mod r).

    Args:
        n: Base.
        r: Positive modulus.
        limit: Stop searching after this many powers. Defaults to r, which
            always suffices since the order divides phi(r) < r.

    Returns:
        The order, or None if gcd(n, r) != 1 or no k <= limit exists.
    """
    require_positive("r", r)
    if r == 1:
        return 1
    n %= r
    if gcd(n, r) != 1:
        return None

    if limit is None:
        limit = r
    x = 1
    for k in range(1, limit + 1):
        x = x * n % r
        if x == 1:
            return k
    return None


def split_power_of_two(n: int) -> tuple[int, int]:
    """Write n == 2^s * d with d odd.

    Args:
        n: Positive integer.

    Returns:
        Tuple (s, d).
    """
    require_positive("n", n)
    s = (n & -n).bit_length() - 1
    return s, n >> s
