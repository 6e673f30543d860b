#!/usr/bin/env python3
"""
Test solver scalability with increasing problem sizes.

Compares a single ILS run with a parallel multi-start under the same
per-run time budget.

Usage:
    python -m experiments.run_scalability_test
    python -m experiments.run_scalability_test --max-cities 500 --workers 4
"""

import argparse
import logging
import time

from visit_routing import ILSConfig, Problem, evaluate, solve, solve_parallel
from visit_routing.solvers.heuristics import nearest_neighbor_tour


def run_scalability_test(city_sizes: list, workers: int, time_budget: float, seed: int):
    """Run scalability test across different problem sizes."""

    results = []

    for n_cities in city_sizes:
        print(f"\nTesting n = {n_cities}...")

        t0 = time.perf_counter()
        problem = Problem(n_cities, density=1.0, seed=seed)
        matrix = problem.distance_matrix()
        t_create = time.perf_counter() - t0

        start = nearest_neighbor_tour(matrix)
        baseline = evaluate(start, matrix)
        config = ILSConfig(max_iterations=10**6, time_budget_s=time_budget, seed=seed)

        t0 = time.perf_counter()
        single = solve(start, matrix, config)
        t_single = time.perf_counter() - t0

        t0 = time.perf_counter()
        multi = solve_parallel(start, matrix, config, worker_count=workers)
        t_multi = time.perf_counter() - t0

        results.append({
            'n': n_cities,
            'baseline': baseline,
            'single': single.best_cost,
            'multi': multi.best_cost,
            'iterations': single.iterations,
            't_create': t_create,
            't_single': t_single,
            't_multi': t_multi,
        })

        print(f"  single {single.best_cost:.3f} ({t_single:.1f}s), "
              f"{workers} workers {multi.best_cost:.3f} ({t_multi:.1f}s)")

    return results


def print_results(results, workers):
    """Print results table."""
    print("\n" + "=" * 80)
    print(f"SCALABILITY TEST RESULTS ({workers} workers)")
    print("=" * 80)
    print(f"{'Cities':<10} {'Baseline':<12} {'Single':<12} {'Multi':<12} {'Iters':<10} {'Time (s)':<10}")
    print("-" * 80)

    for r in results:
        print(f"{r['n']:<10} {r['baseline']:<12.3f} {r['single']:<12.3f} {r['multi']:<12.3f} "
              f"{r['iterations']:<10} {r['t_single']:<10.1f}")

    print("=" * 80)


def main():
    parser = argparse.ArgumentParser(
        description="Test solver scalability with increasing problem sizes"
    )
    parser.add_argument(
        "--max-cities", "-m",
        type=int,
        default=200,
        help="Maximum number of cities (default: 200)"
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=2,
        help="Parallel workers (default: 2)"
    )
    parser.add_argument(
        "--time", "-t",
        type=float,
        default=10.0,
        help="Time budget per run in seconds (default: 10)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=42,
        help="Random seed (default: 42)"
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING)

    city_sizes = [n for n in (10, 20, 50, 100, 200, 500, 1000) if n <= args.max_cities]

    print("=" * 80)
    print("VISIT ROUTING ILS - SCALABILITY TEST")
    print("=" * 80)
    print(f"\nSettings:")
    print(f"  City sizes:  {city_sizes}")
    print(f"  Workers:     {args.workers}")
    print(f"  Time budget: {args.time}s per run")
    print(f"  Seed:        {args.seed}")

    results = run_scalability_test(city_sizes, args.workers, args.time, args.seed)

    print_results(results, args.workers)


if __name__ == "__main__":
    main()
