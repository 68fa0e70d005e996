"""Exception types shared by the primality tests.

Two failure families are kept apart so callers can tell a bad request from a
broken implementation:

- ``InvalidArgumentError``: the caller passed something outside the domain of
  the operation (negative integer, non-positive modulus, zero rounds).
- ``ArithmeticInvariantError``: an internal consistency check failed. These
  indicate a defect, never a property of the integer being tested.

Composite / prime outcomes are ordinary return values, not exceptions.
"""

from __future__ import annotations


class PrimalityError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(PrimalityError, ValueError):
    """Raised when an argument lies outside an operation's domain."""


class ArithmeticInvariantError(PrimalityError, ArithmeticError):
    """Raised when an internal arithmetic invariant is violated."""


def require_non_negative(name: str, value: int) -> None:
    """Raise InvalidArgumentError unless value >= 0."""
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}")


def require_positive(name: str, value: int) -> None:
    """Raise InvalidArgumentError unless value >= 1."""
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {value}")
