"""Tools for comparing the primality tests against each other."""

from primality.evaluation.crosscheck import (
    CrossCheckResult,
    MethodResult,
    cross_validate,
)

__all__ = [
    "CrossCheckResult",
    "MethodResult",
    "cross_validate",
]
