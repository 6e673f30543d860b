"""Iterated Local Search: configuration, tabu memory, homebase policies."""

from .config import ILSConfig
from .homebase import HomebasePolicy, update_home
from .orchestrator import SearchState, run_ils, solve
from .tabu import TabuHistory

__all__ = [
    "ILSConfig",
    "HomebasePolicy",
    "update_home",
    "SearchState",
    "run_ils",
    "solve",
    "TabuHistory",
]
