"""
Tour evaluator for home-visit sequencing.

Provides the full O(n) cyclic tour cost and O(1) cost deltas for the
pairwise swap and segment reversal moves used by local search.
"""

from typing import Iterable, List, Optional

import numpy as np

from .errors import InvalidMatrixError, InvalidTourError
from .solution import Tour

# Fraction of the reference cost, independent of distance units
IMPROVEMENT_RTOL = 1e-12


def validate_tour(tour: Iterable[int], n: Optional[int] = None) -> List[int]:
    """
    Check that a tour is a permutation of 0..n-1.

    Args:
        tour: Sequence of city indices
        n: Expected number of cities (defaults to the tour length)

    Returns:
        The tour as a list of Python ints

    Raises:
        InvalidTourError: If the tour is too short, has the wrong length,
            holds non-integer entries, or repeats or omits a city
    """
    order = list(tour)
    if any(isinstance(c, bool) or not isinstance(c, (int, np.integer)) for c in order):
        raise InvalidTourError("tour entries must be integers")
    order = [int(c) for c in order]

    if len(order) < 2:
        raise InvalidTourError(f"tour needs at least 2 cities, got {len(order)}")
    if n is not None and len(order) != n:
        raise InvalidTourError(f"tour has {len(order)} cities, expected {n}")
    if sorted(order) != list(range(len(order))):
        raise InvalidTourError("tour must be a permutation of 0..n-1")

    return order


def improvement_tol(reference_cost: float) -> float:
    """Smallest decrease from reference_cost that counts as an improvement."""
    return IMPROVEMENT_RTOL * abs(reference_cost)


def is_improvement(new_cost: float, old_cost: float) -> bool:
    """Whether new_cost is strictly lower than old_cost beyond rounding noise."""
    return new_cost < old_cost - improvement_tol(old_cost)


def tour_length(tour: List[int], matrix: np.ndarray) -> float:
    """Cyclic tour length without input checks."""
    idx = np.asarray(tour, dtype=np.intp)
    return float(matrix[idx, np.roll(idx, -1)].sum())


def evaluate(tour: Iterable[int], matrix) -> float:
    """
    Compute the cost of a closed tour.

    Sums matrix[tour[i]][tour[i+1]] over consecutive positions plus the
    closing edge from the last city back to the first.

    Args:
        tour: Permutation of 0..n-1
        matrix: (n, n) distance matrix

    Returns:
        Total tour cost (lower is better)
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InvalidMatrixError(f"distance matrix must be square, got shape {matrix.shape}")
    order = validate_tour(tour, matrix.shape[0])
    return tour_length(order, matrix)


def swap_delta(tour: List[int], matrix: np.ndarray, i: int, j: int) -> float:
    """
    Cost change from exchanging the cities at positions i and j.

    Only the (up to four) edges touching positions i and j change, so the
    delta is evaluated in constant time. Adjacent positions, including the
    wrap-around pair (0, n-1), share an edge and are counted once.

    Args:
        tour: Current order
        matrix: Distance matrix
        i: First position
        j: Second position

    Returns:
        New cost minus old cost (negative = improvement)
    """
    if i == j:
        return 0.0
    n = len(tour)
    a, b = tour[i], tour[j]

    def city_after(p: int) -> int:
        if p == i:
            return b
        if p == j:
            return a
        return tour[p]

    delta = 0.0
    for p in {(i - 1) % n, i, (j - 1) % n, j}:
        q = (p + 1) % n
        delta += matrix[city_after(p), city_after(q)] - matrix[tour[p], tour[q]]
    return float(delta)


def two_opt_delta(tour: List[int], matrix: np.ndarray, i: int, j: int) -> float:
    """
    Cost change from reversing the closed segment [i, j].

    Args:
        tour: Current order
        matrix: Distance matrix
        i: Segment start position
        j: Segment end position

    Returns:
        New cost minus old cost (negative = improvement)
    """
    if i > j:
        i, j = j, i
    n = len(tour)
    # Reversing everything yields the same cycle
    if i == j or j - i >= n - 1:
        return 0.0

    a, b = tour[i - 1], tour[i]
    c, d = tour[j], tour[(j + 1) % n]
    return float(matrix[a, c] + matrix[b, d] - matrix[a, b] - matrix[c, d])


class Evaluator:
    """
    Evaluates tour costs against a fixed distance matrix.

    The matrix is assumed to be validated by the caller; the evaluator
    never modifies it.

    Attributes:
        matrix: (n, n) distance matrix
    """

    def __init__(self, matrix: np.ndarray):
        self.matrix = np.asarray(matrix, dtype=np.float64)

    @property
    def n(self) -> int:
        """Number of cities."""
        return self.matrix.shape[0]

    def cost(self, order: List[int]) -> float:
        """Cyclic tour length of a plain order."""
        return tour_length(order, self.matrix)

    def tour_cost(self, tour: Tour, use_cache: bool = True) -> float:
        """
        Compute the cost of a tour, reusing its memoized value if present.

        Args:
            tour: The tour to evaluate
            use_cache: Whether to use the cached cost if available

        Returns:
            Tour cost
        """
        if use_cache and tour.cached_cost is not None:
            return tour.cached_cost
        tour.cached_cost = self.cost(tour.order)
        return tour.cached_cost

    def swap_delta(self, order: List[int], i: int, j: int) -> float:
        return swap_delta(order, self.matrix, i, j)

    def two_opt_delta(self, order: List[int], i: int, j: int) -> float:
        return two_opt_delta(order, self.matrix, i, j)

    def __repr__(self) -> str:
        return f"Evaluator(n={self.n})"
