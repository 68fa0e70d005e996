"""Command-line interface for primality."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from primality.core.errors import PrimalityError, require_non_negative


def setup_logger(verbose: bool = False, log_path: Path | None = None) -> logging.Logger:
    """Set up the package logger for console and optional file output."""
    logger = logging.getLogger("primality")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def cmd_aks(args: argparse.Namespace) -> int:
    """Run the deterministic AKS test."""
    from primality.algorithms.aks import AKSConfig, AKSEngine

    engine = AKSEngine(AKSConfig(workers=args.workers))
    for n in args.numbers:
        require_non_negative("n", n)
        if n < 2:
            print(f"{n}: composite (n < 2)")
            continue
        report = engine.test(n)
        detail = f"step={report.step.value}"
        if report.r is not None:
            detail += f", r={report.r}"
        if report.witness is not None:
            detail += f", witness={report.witness}"
        if report.power is not None:
            detail += f", {report.power[0]}^{report.power[1]}"
        if report.divisor is not None:
            detail += f", divisor={report.divisor}"
        print(f"{n}: {report.verdict.value.lower()} ({detail})")
    return 0


def cmd_mr(args: argparse.Namespace) -> int:
    """Run the Miller-Rabin probabilistic test."""
    from primality.algorithms.miller_rabin import MillerRabinConfig, MillerRabinEngine

    config = MillerRabinConfig(rounds=args.rounds, force_base_two=not args.no_force_two)
    engine = MillerRabinEngine(config, random.Random(args.seed))
    for n in args.numbers:
        verdict = "probably prime" if engine.test(n) else "composite"
        print(f"{n}: {verdict}")
    return 0


def cmd_sieve(args: argparse.Namespace) -> int:
    """Print all primes up to a limit."""
    from primality.core.sieve import sieve_up_to

    primes = sieve_up_to(args.limit)
    if args.count:
        print(len(primes))
    else:
        print(" ".join(str(int(p)) for p in primes))
    return 0


def cmd_crosscheck(args: argparse.Namespace) -> int:
    """Compare AKS, Miller-Rabin and the sieve over a range."""
    from primality.algorithms.aks import AKSConfig
    from primality.evaluation.crosscheck import cross_validate

    result = cross_validate(
        args.max_n,
        rounds=args.rounds,
        seed=args.seed,
        aks_config=AKSConfig(workers=args.workers),
    )

    if result.agree:
        print(f"All methods agree on [1, {args.max_n}]")
    else:
        print(f"Disagreements: {result.disagreements[:20]}")

    if args.output:
        output = Path(args.output)
        with open(output, "w") as f:
            json.dump(result.to_dict(), f, indent=2)
        print(f"Saved to {output}")

    return 0 if result.agree else 1


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Deterministic (AKS) and probabilistic (Miller-Rabin) primality tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    parser.add_argument("--log-file", default=None, help="Append debug log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    aks_parser = subparsers.add_parser("aks", help="Deterministic AKS test")
    aks_parser.add_argument("numbers", type=int, nargs="+", help="Integers to test")
    aks_parser.add_argument("--workers", type=int, default=1, help="Parallel witness workers")

    mr_parser = subparsers.add_parser("mr", help="Miller-Rabin probabilistic test")
    mr_parser.add_argument("numbers", type=int, nargs="+", help="Integers to test")
    mr_parser.add_argument("--rounds", type=int, default=25, help="Number of rounds")
    mr_parser.add_argument("--seed", type=int, default=None, help="Random seed for bases")
    mr_parser.add_argument("--no-force-two", action="store_true",
                           help="Do not force base 2 on the final round")

    sieve_parser = subparsers.add_parser("sieve", help="List primes up to a limit")
    sieve_parser.add_argument("limit", type=int, help="Upper bound (inclusive)")
    sieve_parser.add_argument("--count", action="store_true", help="Print only the count")

    cc_parser = subparsers.add_parser("crosscheck", help="Compare all tests over [1, max_n]")
    cc_parser.add_argument("--max-n", type=int, default=1000, help="Upper bound (inclusive)")
    cc_parser.add_argument("--rounds", type=int, default=25, help="Miller-Rabin rounds")
    cc_parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    cc_parser.add_argument("--workers", type=int, default=1, help="Parallel witness workers")
    cc_parser.add_argument("--output", "-o", default=None, help="Write JSON report here")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 1

    setup_logger(args.verbose, Path(args.log_file) if args.log_file else None)

    commands = {
        "aks": cmd_aks,
        "mr": cmd_mr,
        "sieve": cmd_sieve,
        "crosscheck": cmd_crosscheck,
    }

    try:
        return commands[args.command](args)
    except PrimalityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
