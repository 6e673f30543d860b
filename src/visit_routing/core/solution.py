"""
Solution representation for home-visit sequencing.

A tour is a cyclic permutation of the visit indices: the worker visits
order[0], order[1], ..., order[n-1] and returns to order[0]. Run results
are immutable snapshots handed from a search run to its caller.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class Tour:
    """
    A visiting order with a memoized cost.

    Attributes:
        order: City indices in visiting order, a permutation of 0..n-1
        cached_cost: Memoized tour cost (invalidated on modification)
    """

    order: List[int]
    cached_cost: Optional[float] = None

    def copy(self) -> "Tour":
        """Create an independent copy of this tour."""
        return Tour(order=list(self.order), cached_cost=self.cached_cost)

    def invalidate_cache(self) -> None:
        """Invalidate the cached cost after an in-place change."""
        self.cached_cost = None

    def is_permutation(self) -> bool:
        """Check that every index 0..n-1 appears exactly once."""
        return sorted(self.order) == list(range(len(self.order)))

    def __len__(self) -> int:
        return len(self.order)

    def __repr__(self) -> str:
        cost = "?" if self.cached_cost is None else f"{self.cached_cost:.3f}"
        return f"Tour({len(self.order)} visits, cost={cost})"


@dataclass(frozen=True)
class RunResult:
    """
    Outcome of one Iterated Local Search run.

    Attributes:
        best_cost: Cost of the best tour found
        best_tour: Best tour found, as a tuple of city indices
        iterations: Number of outer iterations performed
        elapsed_s: Wall-clock duration of the run in seconds
        seed: Seed of the run's random generator (None if unseeded)
        worker_id: Index of the worker that produced the run (0 for single runs)
        tabu_fallbacks: Times the perturbation had to accept a tabu tour
        trace: Best cost after each iteration
    """

    best_cost: float
    best_tour: Tuple[int, ...]
    iterations: int
    elapsed_s: float
    seed: Optional[int] = None
    worker_id: int = 0
    tabu_fallbacks: int = 0
    trace: Tuple[float, ...] = ()

    def __repr__(self) -> str:
        return (
            f"RunResult(cost={self.best_cost:.3f}, n={len(self.best_tour)}, "
            f"iterations={self.iterations}, elapsed={self.elapsed_s:.2f}s, "
            f"worker={self.worker_id})"
        )


@dataclass(frozen=True)
class ParallelResult:
    """
    Reduction of several independent runs.

    Attributes:
        best: Run with the lowest best_cost
        results: All completed runs, ordered by worker id
        completed: Number of workers that returned a result
        failed: Number of workers that raised
        errors: Mapping of failed worker id to its error message
    """

    best: RunResult
    results: Tuple[RunResult, ...]
    completed: int
    failed: int
    errors: Dict[int, str] = field(default_factory=dict)

    @property
    def best_cost(self) -> float:
        return self.best.best_cost

    @property
    def best_tour(self) -> Tuple[int, ...]:
        return self.best.best_tour

    def get_summary(self) -> str:
        """Get a summary string of all worker results."""
        lines = [f"{self.completed} completed, {self.failed} failed:"]
        for r in self.results:
            marker = " *" if r is self.best else ""
            lines.append(
                f"  Worker {r.worker_id}: cost={r.best_cost:.3f} "
                f"iterations={r.iterations}{marker}"
            )
        for worker_id, message in sorted(self.errors.items()):
            lines.append(f"  Worker {worker_id}: FAILED ({message})")
        return "\n".join(lines)
