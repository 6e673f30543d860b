#!/usr/bin/env python3
"""
Run the full benchmark of ILS variants against the nearest-neighbour baseline.

Usage:
    python -m experiments.run_evaluation
    python -m experiments.run_evaluation --seeds 3 --time 5 --hard
"""

import argparse
import logging

from .benchmark import best_variant_per_config, print_results, run_full_benchmark
from .configs import POLICY_CONFIGS


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark ILS variants on the standard configurations"
    )
    parser.add_argument(
        "--seeds", "-s",
        type=int,
        default=3,
        help="Seeds per configuration (default: 3)"
    )
    parser.add_argument(
        "--time", "-t",
        type=float,
        default=10.0,
        help="Time budget per run in seconds (default: 10)"
    )
    parser.add_argument(
        "--iterations", "-i",
        type=int,
        default=50,
        help="ILS iteration cap per run (default: 50)"
    )
    parser.add_argument(
        "--variant",
        action="append",
        choices=sorted(POLICY_CONFIGS),
        help="Variant to run (repeatable, default: all)"
    )
    parser.add_argument(
        "--hard",
        action="store_true",
        help="Include hard configurations"
    )
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    results = run_full_benchmark(
        n_seeds=args.seeds,
        include_hard=args.hard,
        variants=args.variant,
        max_iterations=args.iterations,
        time_budget_s=args.time,
    )
    print_results(results)

    print("\nBest variant per configuration:")
    for (n, d), name in best_variant_per_config(results).items():
        print(f"  n={n:4d} d={d:.1f}: {name}")


if __name__ == "__main__":
    main()
