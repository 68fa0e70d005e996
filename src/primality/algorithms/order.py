"""Search for the AKS modulus r.

AKS needs a modulus r, coprime to n, in which n has multiplicative order
greater than log2(n)^2. The threshold used here is ceil(log2 n)^2, which is
never smaller than the real-valued bound. The search stops at
max(3, ceil(log2 n)^5); a suitable r always exists below that bound, so
running past it is an implementation fault.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from primality.core.errors import ArithmeticInvariantError, InvalidArgumentError
from primality.core.number_theory import ceil_log2, gcd, multiplicative_order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderSearchResult:
    """Modulus chosen for the AKS ring.

    Attributes:
        r: Smallest admissible modulus.
        threshold: ord_r(n) is known to be strictly greater than this.
        bound: Upper limit the search was allowed to reach.
    """
    r: int
    threshold: int
    bound: int


def order_threshold(n: int) -> int:
    """Integer upper bound on log2(n)^2."""
    return ceil_log2(n) ** 2


def search_bound(n: int) -> int:
    return max(3, ceil_log2(n) ** 5)


def find_order_modulus(n: int) -> OrderSearchResult:
    """Find the smallest r >= 2 with gcd(n, r) == 1 and ord_r(n) > threshold.

    The order is computed directly as the smallest k with n^k == 1 (mod r),
    giving up on r once k passes the threshold.

    Args:
        n: Integer >= 2.

    Returns:
        OrderSearchResult for the chosen r.

    Raises:
        InvalidArgumentError: If n < 2.
        ArithmeticInvariantError: If no r exists within the search bound.
    """
    if n < 2:
        raise InvalidArgumentError(f"n must be >= 2, got {n}")

    threshold = order_threshold(n)
    bound = search_bound(n)

    for r in range(2, bound + 1):
        if gcd(n % r, r) != 1:
            continue
        if multiplicative_order(n, r, limit=threshold) is None:
            logger.debug("n=%d: r=%d has order > %d", n, r, threshold)
            return OrderSearchResult(r=r, threshold=threshold, bound=bound)

    raise ArithmeticInvariantError(
        f"no modulus r <= {bound} with ord_r({n}) > {threshold}"
    )
