"""
Constructive heuristics for initial tours.

Provides the starting permutations handed to Iterated Local Search:
identity order, a seeded random shuffle, or a nearest neighbour walk.
"""

import random
from typing import List, Optional

import numpy as np

from ...core.errors import ConfigurationError

INITIAL_TOUR_KINDS = ("identity", "random", "nearest")


def identity_tour(n: int) -> List[int]:
    """Visit cities in index order."""
    return list(range(n))


def random_tour(n: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Build a uniformly random permutation.

    Args:
        n: Number of cities
        rng: Random number generator

    Returns:
        Shuffled tour
    """
    if rng is None:
        rng = random.Random()
    tour = list(range(n))
    rng.shuffle(tour)
    return tour


def nearest_neighbor_tour(dist_matrix: np.ndarray, start_from: int = 0) -> List[int]:
    """
    Build initial tour using nearest neighbor heuristic.

    Args:
        dist_matrix: Distance matrix
        start_from: City the walk starts from

    Returns:
        Tour as list of city indices
    """
    n = dist_matrix.shape[0]
    unvisited = set(range(n))
    unvisited.discard(start_from)

    tour: List[int] = [start_from]
    current = start_from

    while unvisited:
        # Ties resolve to the lowest index for reproducibility
        next_node = min(unvisited, key=lambda v: (dist_matrix[current, v], v))
        tour.append(next_node)
        unvisited.discard(next_node)
        current = next_node

    return tour


def build_initial_tour(
    kind: str, dist_matrix: np.ndarray, rng: Optional[random.Random] = None
) -> List[int]:
    """
    Build a starting tour of the requested kind.

    Args:
        kind: 'identity', 'random' or 'nearest'
        dist_matrix: Distance matrix
        rng: Random number generator (used by 'random' and for the
            'nearest' start city)

    Returns:
        Tour as list of city indices
    """
    n = dist_matrix.shape[0]
    if kind == "identity":
        return identity_tour(n)
    if kind == "random":
        return random_tour(n, rng)
    if kind == "nearest":
        start = rng.randrange(n) if rng is not None else 0
        return nearest_neighbor_tour(dist_matrix, start_from=start)
    raise ConfigurationError(
        f"Unknown initial tour kind: {kind!r} (expected one of {INITIAL_TOUR_KINDS})"
    )
