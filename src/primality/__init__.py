"""primality - deterministic AKS and probabilistic Miller-Rabin primality tests."""

__version__ = "0.1.0"

from primality.algorithms.aks import is_prime_aks, AKSEngine, AKSConfig
from primality.algorithms.miller_rabin import is_prime_miller_rabin, MillerRabinEngine
from primality.core.sieve import sieve_up_to, is_prime_by_mask
from primality.core.errors import InvalidArgumentError, ArithmeticInvariantError

__all__ = [
    "is_prime_aks",
    "AKSEngine",
    "AKSConfig",
    "is_prime_miller_rabin",
    "MillerRabinEngine",
    "sieve_up_to",
    "is_prime_by_mask",
    "InvalidArgumentError",
    "ArithmeticInvariantError",
]
