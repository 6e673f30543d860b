"""Heuristic algorithms: constructive tours, moves and local search."""

from .constructive import (
    identity_tour,
    random_tour,
    nearest_neighbor_tour,
    build_initial_tour,
)
from .moves import MoveOperator, swap, reverse_segment, double_bridge, double_bridge_at
from .local_search import local_search, Acceptance

__all__ = [
    "identity_tour",
    "random_tour",
    "nearest_neighbor_tour",
    "build_initial_tour",
    "MoveOperator",
    "swap",
    "reverse_segment",
    "double_bridge",
    "double_bridge_at",
    "local_search",
    "Acceptance",
]
