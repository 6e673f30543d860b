"""
Benchmarking framework for home-visit sequencing.

Runs each solver variant against a nearest-neighbour baseline and collects
cost and time statistics.
"""

import logging
import time
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

import numpy as np

from visit_routing import evaluate, solve
from visit_routing.solvers.heuristics import nearest_neighbor_tour
from .configs import BASE_CONFIGS, HARD_CONFIGS, POLICY_CONFIGS, InstanceConfig
from .instance_generator import build_problem

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """
    Result of a single benchmark run.

    Attributes:
        config: Instance configuration
        seed: Random seed used
        variant: Name of the solver variant
        baseline_cost: Cost of the nearest-neighbour tour
        strategy_cost: Cost of the ILS tour
        strategy_time: Time spent in ILS
        iterations: ILS iterations performed
    """

    config: Tuple[int, float]
    seed: int
    variant: str
    baseline_cost: float
    strategy_cost: float
    strategy_time: float = 0.0
    iterations: int = 0

    @property
    def improvement_pct(self) -> float:
        """Percentage improvement over baseline."""
        if self.baseline_cost <= 0:
            return 0.0
        return 100.0 * (self.baseline_cost - self.strategy_cost) / self.baseline_cost


@dataclass
class AggregatedResult:
    """
    Aggregated results for one configuration and variant across seeds.

    Attributes:
        config: Instance configuration
        variant: Name of the solver variant
        n_seeds: Number of seeds tested
        baseline_mean: Mean baseline cost
        strategy_mean: Mean ILS cost
        strategy_std: Std dev of ILS cost
        improvement_pct_mean: Mean improvement percentage
        strategy_time_mean: Mean ILS time
    """

    config: Tuple[int, float]
    variant: str
    n_seeds: int
    baseline_mean: float
    strategy_mean: float
    strategy_std: float
    improvement_pct_mean: float
    strategy_time_mean: float


def run_single_instance(
    num_cities: int,
    density: float,
    seed: int,
    variant: str = "eps-greedy",
    *,
    max_iterations: int = 50,
    time_budget_s: Optional[float] = 10.0,
) -> BenchmarkResult:
    """
    Run one solver variant on a single instance.

    Args:
        num_cities: Number of visit locations
        density: Road edge probability
        seed: Random seed (instance and search)
        variant: Key of POLICY_CONFIGS
        max_iterations: ILS iteration cap
        time_budget_s: ILS time budget

    Returns:
        BenchmarkResult with costs and times
    """
    problem = build_problem(num_cities, density, seed)
    matrix = problem.distance_matrix()

    baseline_tour = nearest_neighbor_tour(matrix)
    baseline_cost = evaluate(baseline_tour, matrix)

    config = replace(
        POLICY_CONFIGS[variant],
        max_iterations=max_iterations,
        time_budget_s=time_budget_s,
        seed=seed,
    )
    t0 = time.perf_counter()
    result = solve(baseline_tour, matrix, config)
    t1 = time.perf_counter()

    return BenchmarkResult(
        config=(num_cities, density),
        seed=seed,
        variant=variant,
        baseline_cost=baseline_cost,
        strategy_cost=result.best_cost,
        strategy_time=t1 - t0,
        iterations=result.iterations,
    )


def run_configuration(
    config: InstanceConfig,
    variant: str,
    n_seeds: int = 5,
    **kwargs,
) -> AggregatedResult:
    """
    Run one variant on a configuration across multiple seeds.

    Args:
        config: Instance configuration
        variant: Key of POLICY_CONFIGS
        n_seeds: Number of random seeds
        **kwargs: Forwarded to run_single_instance

    Returns:
        AggregatedResult with statistics
    """
    num_cities, density = config
    results: List[BenchmarkResult] = [
        run_single_instance(num_cities, density, seed, variant, **kwargs)
        for seed in range(n_seeds)
    ]

    baseline_costs = np.array([r.baseline_cost for r in results])
    strategy_costs = np.array([r.strategy_cost for r in results])
    strategy_times = np.array([r.strategy_time for r in results])

    return AggregatedResult(
        config=(num_cities, density),
        variant=variant,
        n_seeds=n_seeds,
        baseline_mean=float(np.mean(baseline_costs)),
        strategy_mean=float(np.mean(strategy_costs)),
        strategy_std=float(np.std(strategy_costs)),
        improvement_pct_mean=float(np.mean([r.improvement_pct for r in results])),
        strategy_time_mean=float(np.mean(strategy_times)),
    )


def run_full_benchmark(
    n_seeds: int = 5,
    include_hard: bool = False,
    variants: Optional[List[str]] = None,
    **kwargs,
) -> List[AggregatedResult]:
    """
    Run every variant on every configuration.

    Args:
        n_seeds: Number of seeds per configuration
        include_hard: Include hard configurations
        variants: Subset of POLICY_CONFIGS keys (all by default)
        **kwargs: Forwarded to run_single_instance

    Returns:
        List of AggregatedResult, one per (configuration, variant)
    """
    configs = list(BASE_CONFIGS) + (list(HARD_CONFIGS) if include_hard else [])
    names = variants if variants is not None else list(POLICY_CONFIGS)
    results: List[AggregatedResult] = []

    for config in configs:
        for name in names:
            logger.info(f"[BENCH] n={config.num_cities} d={config.density} variant={name}")
            results.append(run_configuration(config, name, n_seeds=n_seeds, **kwargs))

    return results


def best_variant_per_config(results: List[AggregatedResult]) -> Dict[Tuple[int, float], str]:
    """Name of the variant with the lowest mean cost for each configuration."""
    best: Dict[Tuple[int, float], AggregatedResult] = {}
    for r in results:
        if r.config not in best or r.strategy_mean < best[r.config].strategy_mean:
            best[r.config] = r
    return {config: r.variant for config, r in best.items()}


def print_results(results: List[AggregatedResult]) -> None:
    """
    Print benchmark results in a formatted table.

    Args:
        results: List of aggregated results
    """
    print("\n" + "=" * 90)
    print("BENCHMARK RESULTS")
    print("=" * 90)

    for r in results:
        n, d = r.config
        print(
            f"n={n:4d} d={d:.1f} {r.variant:>14s}: "
            f"baseline {r.baseline_mean:8.3f}  "
            f"ils {r.strategy_mean:8.3f}±{r.strategy_std:6.3f}  "
            f"improve={r.improvement_pct_mean:5.1f}%  "
            f"t={r.strategy_time_mean:.2f}s"
        )
