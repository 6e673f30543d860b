"""
Local search for tour improvement.

Drives a tour to a local optimum of the swap or 2-opt neighbourhood under a
wall-clock budget. Moves are scored with O(1) cost deltas, so a pass over
all position pairs costs O(n^2).
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np

from ...core.evaluator import Evaluator, improvement_tol, validate_tour
from .moves import MoveOperator, apply_move

logger = logging.getLogger(__name__)

DeltaFn = Callable[[List[int], int, int], float]


class Acceptance(Enum):
    """
    Move acceptance rule within a pass.

    FIRST_IMPROVEMENT: apply every improving move as soon as it is found
    STEEPEST_ASCENT: apply only the best improving move of each pass
    """

    FIRST_IMPROVEMENT = "first_improvement"
    STEEPEST_ASCENT = "steepest_ascent"


def local_search(
    tour: List[int],
    matrix: np.ndarray,
    *,
    move: MoveOperator = MoveOperator.TWO_OPT,
    acceptance: Acceptance = Acceptance.FIRST_IMPROVEMENT,
    time_budget_s: float = 1.0,
    max_passes: Optional[int] = None,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[float, List[int]]:
    """
    Improve a tour until no move in the neighbourhood helps.

    Passes repeat until a full pass finds no strictly improving move, the
    time budget runs out, or max_passes is reached. The budget is checked
    between rows of the pair scan, so it can be overshot by one row.

    Args:
        tour: Starting tour (not modified)
        matrix: Distance matrix
        move: Neighbourhood to search
        acceptance: First-improvement or steepest-ascent
        time_budget_s: Wall-clock budget in seconds
        max_passes: Optional cap on the number of passes
        evaluator: Evaluator bound to matrix (built if not given)

    Returns:
        Tuple of (cost, tour) for the final tour
    """
    if evaluator is None:
        evaluator = Evaluator(matrix)
    current = validate_tour(tour, evaluator.n)
    cost = evaluator.cost(current)
    n = len(current)

    if n < 4:
        return cost, current

    if move is MoveOperator.SWAP:
        delta_fn: DeltaFn = evaluator.swap_delta
    elif move is MoveOperator.TWO_OPT:
        delta_fn = evaluator.two_opt_delta
    else:
        raise ValueError(f"Unknown move operator: {move}")

    start = time.perf_counter()
    deadline = start + time_budget_s
    start_cost = cost
    passes = 0
    improved = True

    while improved:
        if max_passes is not None and passes >= max_passes:
            break
        if time.perf_counter() >= deadline:
            break

        tol = improvement_tol(evaluator.cost(current))
        if acceptance is Acceptance.FIRST_IMPROVEMENT:
            improved = _first_improvement_pass(current, move, delta_fn, deadline, tol)
        elif acceptance is Acceptance.STEEPEST_ASCENT:
            improved = _steepest_ascent_pass(current, move, delta_fn, deadline, tol)
        else:
            raise ValueError(f"Unknown acceptance rule: {acceptance}")
        passes += 1

    # Exact recomputation, deltas accumulate rounding error
    cost = evaluator.cost(current)
    logger.debug(
        f"[LS] {move.value}/{acceptance.value}: {start_cost:.4f} -> {cost:.4f} "
        f"in {passes} passes ({time.perf_counter() - start:.3f}s)"
    )
    return cost, current


def _first_improvement_pass(
    tour: List[int],
    move: MoveOperator,
    delta_fn: DeltaFn,
    deadline: float,
    tol: float,
) -> bool:
    """Apply every strictly improving move found during one scan."""
    n = len(tour)
    improved = False

    for i in range(n - 1):
        if time.perf_counter() >= deadline:
            break
        for j in range(i + 1, n):
            if delta_fn(tour, i, j) < -tol:
                apply_move(move, tour, i, j)
                improved = True

    return improved


def _steepest_ascent_pass(
    tour: List[int],
    move: MoveOperator,
    delta_fn: DeltaFn,
    deadline: float,
    tol: float,
) -> bool:
    """Apply the single best strictly improving move of one scan."""
    n = len(tour)
    best_delta = -tol
    best_pair: Optional[Tuple[int, int]] = None

    for i in range(n - 1):
        if time.perf_counter() >= deadline:
            break
        for j in range(i + 1, n):
            delta = delta_fn(tour, i, j)
            if delta < best_delta:
                best_delta = delta
                best_pair = (i, j)

    if best_pair is None:
        return False

    apply_move(move, tour, *best_pair)
    return True
