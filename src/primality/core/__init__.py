"""Core arithmetic: number theory primitives, polynomials, and the sieve."""

from primality.core.errors import (
    PrimalityError,
    InvalidArgumentError,
    ArithmeticInvariantError,
)
from primality.core.number_theory import (
    gcd,
    modpow,
    euler_totient,
    floor_log2,
    ceil_log2,
    integer_nth_root,
    perfect_power,
    multiplicative_order,
)
from primality.core.polynomial import (
    Polynomial,
    expand,
    reduce_mod,
    div_rem,
    subtract,
)
from primality.core.sieve import (
    sieve_up_to,
    prime_sieve_mask,
    is_prime_by_mask,
)

__all__ = [
    # Errors
    "PrimalityError",
    "InvalidArgumentError",
    "ArithmeticInvariantError",
    # Number theory
    "gcd",
    "modpow",
    "euler_totient",
    "floor_log2",
    "ceil_log2",
    "integer_nth_root",
    "perfect_power",
    "multiplicative_order",
    # Polynomials
    "Polynomial",
    "expand",
    "reduce_mod",
    "div_rem",
    "subtract",
    # Sieve
    "sieve_up_to",
    "prime_sieve_mask",
    "is_prime_by_mask",
]
