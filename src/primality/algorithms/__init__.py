"""Primality tests: deterministic AKS and probabilistic Miller-Rabin."""

from primality.algorithms.order import OrderSearchResult, find_order_modulus
from primality.algorithms.aks import (
    AKSConfig,
    AKSEngine,
    AKSReport,
    AKSStep,
    AKSVerdict,
    is_prime_aks,
)
from primality.algorithms.miller_rabin import (
    MillerRabinConfig,
    MillerRabinEngine,
    is_prime_miller_rabin,
)

__all__ = [
    # Order search
    "OrderSearchResult",
    "find_order_modulus",
    # AKS
    "AKSConfig",
    "AKSEngine",
    "AKSReport",
    "AKSStep",
    "AKSVerdict",
    "is_prime_aks",
    # Miller-Rabin
    "MillerRabinConfig",
    "MillerRabinEngine",
    "is_prime_miller_rabin",
]
