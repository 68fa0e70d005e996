"""Quick start example for primality.

Run this script to exercise each primality test and check the installation.
"""

import random
import time


def main():
    print("Primality - Quick Start Demo")
    print("=" * 50)

    print("\n1. Sieve of Eratosthenes...")
    from primality.core.sieve import sieve_up_to

    start = time.perf_counter()
    primes = sieve_up_to(1_000_000)
    elapsed = time.perf_counter() - start
    print(f"   {len(primes):,} primes up to 1M in {elapsed:.3f}s")
    print(f"   First 10: {primes[:10].tolist()}")

    print("\n2. Deterministic AKS test...")
    from primality.algorithms.aks import AKSEngine

    engine = AKSEngine()
    for n in (31, 561, 997, 1024):
        start = time.perf_counter()
        report = engine.test(n)
        elapsed = time.perf_counter() - start
        print(f"   {n}: {report.verdict.value} via {report.step.value} "
              f"(r={report.r}) in {elapsed:.3f}s")

    print("\n3. Miller-Rabin test (seeded)...")
    from primality.algorithms.miller_rabin import is_prime_miller_rabin

    rng = random.Random(42)
    for n in (2**61 - 1, 2**61 + 1, 2**127 - 1):
        verdict = "probably prime" if is_prime_miller_rabin(n, rng=rng) else "composite"
        print(f"   {n}: {verdict}")

    print("\n4. Cross-checking all methods on [1, 1000]...")
    from primality.evaluation.crosscheck import cross_validate

    result = cross_validate(1000)
    print(f"   Agree: {result.agree}, primes found: {result.methods['aks'].count}")
    print(f"   Primes up to 1000 by sieve: {len(sieve_up_to(1000))}")

    print("\n" + "=" * 50)
    print("Quick start complete!")


if __name__ == "__main__":
    main()
