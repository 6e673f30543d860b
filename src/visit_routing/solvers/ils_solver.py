"""
Problem-level solver for home-visit sequencing.

Builds the distance matrix and a starting tour for a Problem instance and
runs Iterated Local Search, single-threaded or as a parallel multi-start.
"""

import random
from typing import Optional

from ..core.errors import ConfigurationError
from ..core.problem import Problem
from ..core.solution import RunResult
from .heuristics.constructive import build_initial_tour
from .ils.config import ILSConfig
from .ils.orchestrator import solve
from .parallel import solve_parallel


def solve_problem(
    problem: Problem,
    *,
    config: Optional[ILSConfig] = None,
    workers: int = 1,
    initial: str = "nearest",
    rng_seed: Optional[int] = None,
    use_processes: bool = True,
) -> RunResult:
    """
    Solve a home-visit sequencing problem.

    Args:
        problem: The problem instance
        config: ILS configuration (defaults to ILSConfig())
        workers: Number of independent runs; 1 runs in the calling thread
        initial: Starting tour kind ('identity', 'random' or 'nearest')
        rng_seed: Seed for the starting tour and, if config has none, the search
        use_processes: Use processes rather than threads when workers > 1

    Returns:
        RunResult of the best run
    """
    if config is None:
        config = ILSConfig()
    if workers < 1:
        raise ConfigurationError(f"workers must be at least 1, got {workers}")
    if config.seed is None and rng_seed is not None:
        config = config.with_seed(rng_seed)

    rng = random.Random(rng_seed)
    matrix = problem.distance_matrix()
    tour = build_initial_tour(initial, matrix, rng=rng)

    if workers == 1:
        return solve(tour, matrix, config)

    return solve_parallel(
        tour, matrix, config, worker_count=workers, use_processes=use_processes
    ).best


def get_tour_cost(problem: Problem, **kwargs) -> float:
    """
    Convenience function to get the optimized tour cost for a problem.

    Args:
        problem: The problem instance
        **kwargs: Forwarded to solve_problem

    Returns:
        Best tour cost found
    """
    return solve_problem(problem, **kwargs).best_cost
