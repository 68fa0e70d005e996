"""Exact integer polynomials for the AKS congruence test.

Polynomials are immutable and always canonical: coefficients are stored in
ascending powers of x with no trailing zero, and the zero polynomial is the
empty tuple with degree -1. Only the ring operations the AKS witness loop
needs are provided: binomial expansion of (x + a)^e, term-wise modular
reduction, long division by a monic divisor such as x^r - 1, and
addition/subtraction/multiplication for stating the division identity.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from primality.core.errors import (
    ArithmeticInvariantError,
    InvalidArgumentError,
    require_non_negative,
)


class Polynomial:
    """Univariate polynomial with int coefficients. coeffs[0] = constant term."""

    __slots__ = ("_coeffs",)

    def __init__(self, coefficients: Iterable[int] = ()):
        coeffs = []
        for c in coefficients:
            value = int(c)
            if value != c:
                raise InvalidArgumentError(f"coefficient must be an integer, got {c!r}")
            coeffs.append(value)
        while coeffs and coeffs[-1] == 0:
            coeffs.pop()
        self._coeffs = tuple(coeffs)

    @property
    def coefficients(self) -> tuple[int, ...]:
        return self._coeffs

    @property
    def degree(self) -> int:
        """Highest power with a non-zero coefficient, -1 for zero."""
        return len(self._coeffs) - 1

    @property
    def leading(self) -> int:
        return self._coeffs[-1] if self._coeffs else 0

    def is_zero(self) -> bool:
        return not self._coeffs

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._coeffs)

    def __getitem__(self, power: int) -> int:
        """Coefficient of x^power, 0 beyond the degree."""
        if 0 <= power < len(self._coeffs):
            return self._coeffs[power]
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coeffs)})"

    def __add__(self, other: Polynomial) -> Polynomial:
        return add(self, other)

    def __sub__(self, other: Polynomial) -> Polynomial:
        return subtract(self, other)

    def __mul__(self, other: Polynomial) -> Polynomial:
        return multiply(self, other)


ZERO = Polynomial()


def monomial(power: int, coefficient: int = 1) -> Polynomial:
    """Return coefficient * x^power."""
    require_non_negative("power", power)
    return Polynomial([0] * power + [coefficient])


def cyclotomic_modulus(r: int) -> Polynomial:
    """Return the monic divisor x^r - 1 used to truncate the AKS ring."""
    if r < 1:
        raise InvalidArgumentError(f"r must be >= 1, got {r}")
    return Polynomial([-1] + [0] * (r - 1) + [1])


def binomial_row(e: int, modulus: int | None = None) -> list[int]:
    """Binomial coefficients C(e, 0) .. C(e, e), optionally reduced mod modulus.

    Uses C(e, i+1) = C(e, i) * (e - i) / (i + 1); the running value stays
    exact so the division is always integral.
    """
    require_non_negative("e", e)
    row = []
    binomial = 1
    for i in range(e + 1):
        row.append(binomial % modulus if modulus is not None else binomial)
        binomial = binomial * (e - i) // (i + 1)
    return row


def scale_binomials(row: list[int], a: int, modulus: int | None = None) -> Polynomial:
    """Turn a binomial row for exponent e into (x + a)^e.

    The coefficient of x^i is multiplied by a^(e-i). With a == 0 the row is
    returned unscaled.
    """
    e = len(row) - 1
    if a == 0:
        return Polynomial(row)
    if modulus is None:
        return Polynomial(c * a ** (e - i) for i, c in enumerate(row))

    coeffs = [0] * len(row)
    apow = 1
    for i in range(e, -1, -1):
        coeffs[i] = row[i] * apow % modulus
        apow = apow * a % modulus
    return Polynomial(coeffs)


def expand(e: int, a: int, modulus: int | None = None) -> Polynomial:
    """Coefficients of (x + a)^e from the Pascal recurrence.

    Binomials are produced in a single linear pass rather than by repeated
    polynomial multiplication. When a != 0 the coefficient of x^i is scaled
    by a^(e-i). With a == 0 the unscaled binomial row is returned, e.g.
    expand(3, 0) -> [1, 3, 3, 1].

    Args:
        e: Non-negative exponent.
        a: Constant term of the binomial.
        modulus: If given, coefficients are reduced into [0, modulus); the
            result equals reduce_mod(expand(e, a), modulus).

    Returns:
        Canonical Polynomial of degree e (lower if reduction zeroes the top).
    """
    require_non_negative("e", e)
    if modulus is not None and modulus <= 0:
        raise InvalidArgumentError(f"modulus must be >= 1, got {modulus}")
    return scale_binomials(binomial_row(e, modulus), a, modulus)


def reduce_mod(p: Polynomial, m: int) -> Polynomial:
    """Reduce every coefficient of p into [0, m)."""
    if m <= 0:
        raise InvalidArgumentError(f"modulus must be >= 1, got {m}")
    return Polynomial(c % m for c in p)


def add(p: Polynomial, q: Polynomial) -> Polynomial:
    size = max(len(p), len(q))
    return Polynomial(p[i] + q[i] for i in range(size))


def subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Term-wise p - q, sized to the longer operand."""
    size = max(len(p), len(q))
    return Polynomial(p[i] - q[i] for i in range(size))


def scale(p: Polynomial, k: int) -> Polynomial:
    """Multiply every coefficient by the scalar k."""
    return Polynomial(c * k for c in p)


def multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Schoolbook product; only used to check the division identity."""
    if p.is_zero() or q.is_zero():
        return ZERO
    out = [0] * (len(p) + len(q) - 1)
    for i, pc in enumerate(p):
        if pc == 0:
            continue
        for j, qc in enumerate(q):
            out[i + j] += pc * qc
    return Polynomial(out)


def div_rem(numerator: Polynomial, denominator: Polynomial) -> tuple[Polynomial, Polynomial]:
    """Long division over the integers.

    Each quotient step divides by the denominator's leading coefficient and
    must be exact. Only non-zero denominator terms are visited, so dividing
    by a sparse monic polynomial like x^r - 1 is linear in the numerator's
    degree.

    Args:
        numerator: Dividend.
        denominator: Non-zero divisor.

    Returns:
        (quotient, remainder) with numerator == quotient * denominator +
        remainder and deg(remainder) < deg(denominator).

    Raises:
        ArithmeticInvariantError: If the denominator is zero or a quotient
            coefficient is not an integer.
    """
    if denominator.is_zero():
        raise ArithmeticInvariantError("polynomial division by zero")

    d_deg = denominator.degree
    if numerator.degree < d_deg:
        return ZERO, numerator

    lead = denominator.leading
    lower_terms = [
        (j, c) for j, c in enumerate(denominator.coefficients[:-1]) if c
    ]
    rem = list(numerator.coefficients)
    quot = [0] * (len(rem) - d_deg)

    for i in range(len(rem) - 1, d_deg - 1, -1):
        c = rem[i]
        if c == 0:
            continue
        q, leftover = divmod(c, lead)
        if leftover:
            raise ArithmeticInvariantError(
                f"non-exact division: coefficient {c} of x^{i} by leading {lead}"
            )
        shift = i - d_deg
        quot[shift] = q
        rem[i] = 0
        for j, dc in lower_terms:
            rem[shift + j] -= q * dc

    return Polynomial(quot), Polynomial(rem[:d_deg])
