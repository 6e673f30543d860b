"""
Iterated Local Search (ILS) orchestrator.

Alternates local search and double-bridge perturbation:

    home = best = candidate = initial tour
    repeat until the iteration cap or the time budget:
        local optimum <- local_search(candidate)
        best <- local optimum if strictly better
        home <- homebase policy(home, local optimum)
        candidate <- non-tabu double-bridge of home

All mutable state lives in a SearchState owned by one run, so independent
runs never interfere.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ...core.evaluator import Evaluator, is_improvement, validate_tour
from ...core.solution import RunResult, Tour
from ...distance.matrix import validate_distance_matrix
from ..heuristics.local_search import local_search
from ..heuristics.moves import double_bridge
from .config import ILSConfig
from .homebase import update_home
from .tabu import TabuHistory

logger = logging.getLogger(__name__)


@dataclass
class SearchState:
    """
    Mutable state of one ILS run.

    Attributes:
        home: Current perturbation origin
        candidate: Tour handed to the next local search
        best: Best tour found so far
        history: Tabu memory of recent candidates
        iterations: Outer iterations completed
        tabu_fallbacks: Perturbations accepted despite being tabu
        trace: Best cost after each iteration
    """

    home: Tour
    candidate: Tour
    best: Tour
    history: TabuHistory
    iterations: int = 0
    tabu_fallbacks: int = 0
    trace: List[float] = field(default_factory=list)

    @classmethod
    def start(
        cls, initial: List[int], evaluator: Evaluator, tabu_capacity: int
    ) -> "SearchState":
        """Initialize home, candidate and best from the starting tour."""
        home = Tour(order=list(initial))
        evaluator.tour_cost(home)
        state = cls(
            home=home,
            candidate=home.copy(),
            best=home.copy(),
            history=TabuHistory(tabu_capacity),
        )
        state.history.push(home.order)
        return state

    @property
    def best_cost(self) -> float:
        return self.best.cached_cost


def solve(
    initial_tour: Sequence[int],
    matrix,
    config: Optional[ILSConfig] = None,
) -> RunResult:
    """
    Run Iterated Local Search from a starting tour.

    Args:
        initial_tour: Permutation of 0..n-1
        matrix: (n, n) symmetric distance matrix with zero diagonal
        config: Run configuration (defaults to ILSConfig())

    Returns:
        RunResult with the best tour, its cost, iterations and elapsed time

    Raises:
        ConfigurationError: If the matrix or the tour is invalid
    """
    if config is None:
        config = ILSConfig()
    dist = validate_distance_matrix(matrix)
    initial = validate_tour(initial_tour, dist.shape[0])
    return run_ils(initial, dist, config)


def run_ils(
    initial: List[int],
    matrix: np.ndarray,
    config: ILSConfig,
    *,
    worker_id: int = 0,
) -> RunResult:
    """
    Run the ILS loop on inputs that are already validated.

    Args:
        initial: Starting permutation
        matrix: Validated distance matrix (read-only)
        config: Run configuration
        worker_id: Identifier reported in the result

    Returns:
        RunResult for this run
    """
    rng = random.Random(config.seed)
    evaluator = Evaluator(matrix)
    state = SearchState.start(initial, evaluator, config.tabu_capacity)

    start = time.perf_counter()
    logger.info(
        f"[ILS] worker {worker_id} start: n={len(initial)} cost={state.best_cost:.4f} "
        f"{config.move.value}/{config.acceptance.value}/{config.homebase.value} "
        f"seed={config.seed}"
    )

    while state.iterations < config.max_iterations:
        ls_budget = config.local_search_time_s
        if config.time_budget_s is not None:
            remaining = config.time_budget_s - (time.perf_counter() - start)
            if remaining <= 0:
                break
            ls_budget = min(ls_budget, remaining)

        _iterate(state, evaluator, config, rng, ls_budget)

    elapsed = time.perf_counter() - start
    logger.info(
        f"[ILS] worker {worker_id} done: best={state.best_cost:.4f} "
        f"after {state.iterations} iterations ({elapsed:.2f}s, "
        f"{state.tabu_fallbacks} tabu fallbacks)"
    )

    return RunResult(
        best_cost=state.best_cost,
        best_tour=tuple(state.best.order),
        iterations=state.iterations,
        elapsed_s=elapsed,
        seed=config.seed,
        worker_id=worker_id,
        tabu_fallbacks=state.tabu_fallbacks,
        trace=tuple(state.trace),
    )


def _iterate(
    state: SearchState,
    evaluator: Evaluator,
    config: ILSConfig,
    rng: random.Random,
    ls_budget: float,
) -> None:
    """One search-accept-perturb cycle."""
    cost, local = local_search(
        state.candidate.order,
        evaluator.matrix,
        move=config.move,
        acceptance=config.acceptance,
        time_budget_s=ls_budget,
        evaluator=evaluator,
    )

    if is_improvement(cost, state.best_cost):
        state.best = Tour(order=list(local), cached_cost=cost)
        logger.debug(f"[ILS] iteration {state.iterations}: new best {cost:.4f}")

    home, home_cost = update_home(
        config.homebase,
        state.home.order,
        state.home.cached_cost,
        local,
        cost,
        rng=rng,
        epsilon=config.epsilon,
    )
    state.home = Tour(order=home, cached_cost=home_cost)

    candidate, was_tabu = _perturb(state.home, state.history, rng, config.max_perturbation_attempts)
    if was_tabu:
        state.tabu_fallbacks += 1
        log = logger.warning if state.tabu_fallbacks == 1 else logger.debug
        log(
            f"[TABU] no non-tabu perturbation in {config.max_perturbation_attempts} "
            f"attempts at iteration {state.iterations}; accepting a tabu tour "
            f"(history {len(state.history)}/{state.history.capacity})"
        )

    state.candidate = Tour(order=candidate)
    state.history.push(candidate)
    state.iterations += 1
    state.trace.append(state.best_cost)


def _perturb(
    home: Tour, history: TabuHistory, rng: random.Random, max_attempts: int
) -> Tuple[List[int], bool]:
    """
    Draw double-bridge perturbations of home until one is not tabu.

    Returns:
        Tuple of (perturbed tour, whether the retry cap was exhausted)
    """
    candidate = home.order
    for _ in range(max_attempts):
        candidate = double_bridge(home.order, rng)
        assert sorted(candidate) == list(range(len(home))), "perturbation broke the permutation"
        if not history.contains(candidate):
            return candidate, False
    return candidate, True
