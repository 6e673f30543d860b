"""
Neighbourhood move operators for permutation tours.

Swap and segment reversal are the local search moves: both act in place and
are self-inverse. The double-bridge is the perturbation move: it returns a
new tour that no single swap or reversal can undo.
"""

import random
from enum import Enum
from typing import List, Sequence, Tuple


class MoveOperator(Enum):
    """
    Local search neighbourhood.

    SWAP: exchange the cities at two positions
    TWO_OPT: reverse the segment between two positions
    """

    SWAP = "swap"
    TWO_OPT = "two_opt"


def swap(tour: List[int], i: int, j: int) -> None:
    """Exchange the cities at positions i and j in place."""
    tour[i], tour[j] = tour[j], tour[i]


def reverse_segment(tour: List[int], i: int, j: int) -> None:
    """Reverse the closed range [i, j] in place."""
    if i > j:
        i, j = j, i
    tour[i : j + 1] = reversed(tour[i : j + 1])


def apply_move(move: MoveOperator, tour: List[int], i: int, j: int) -> None:
    """
    Apply a local search move in place.

    Args:
        move: Which neighbourhood to use
        tour: Tour to modify
        i: First position
        j: Second position
    """
    if move is MoveOperator.SWAP:
        swap(tour, i, j)
    elif move is MoveOperator.TWO_OPT:
        reverse_segment(tour, i, j)
    else:
        raise ValueError(f"Unknown move operator: {move}")


def double_bridge_at(tour: Sequence[int], cuts: Tuple[int, int, int]) -> List[int]:
    """
    Recombine a tour as A + D + C + B for the given cut points.

    With cuts (p1, p2, p3): A = tour[:p1], B = tour[p1:p2],
    C = tour[p2:p3], D = tour[p3:].

    Args:
        tour: Tour to perturb (not modified)
        cuts: Strictly increasing cut positions within 1..n

    Returns:
        New perturbed tour
    """
    p1, p2, p3 = cuts
    n = len(tour)
    if not 0 < p1 < p2 < p3 <= n:
        raise ValueError(f"cuts must satisfy 0 < p1 < p2 < p3 <= {n}, got {cuts}")

    tour = list(tour)
    return tour[:p1] + tour[p3:] + tour[p2:p3] + tour[p1:p2]


def double_bridge(tour: Sequence[int], rng: random.Random) -> List[int]:
    """
    Double-bridge (4-opt) perturbation with randomized segment lengths.

    Each of the three gaps between cuts is drawn uniformly from 1..n//3, so
    every cut advances by at least one position and the last cut never
    passes the end of the tour.

    Args:
        tour: Tour to perturb (not modified)
        rng: Random number generator

    Returns:
        New perturbed tour; an unchanged copy when n < 4
    """
    n = len(tour)
    if n < 4:
        return list(tour)

    max_gap = n // 3
    p1 = rng.randint(1, max_gap)
    p2 = p1 + rng.randint(1, max_gap)
    p3 = p2 + rng.randint(1, max_gap)
    return double_bridge_at(tour, (p1, p2, p3))
