"""
Visit Routing

Anytime Iterated Local Search for ordering the home visits of a mobile
worker, modelled as a symmetric Traveling Salesperson tour.
"""

from .core.errors import (
    VisitRoutingError,
    ConfigurationError,
    InvalidTourError,
    InvalidMatrixError,
    SolverError,
)
from .core.problem import Problem
from .core.solution import Tour, RunResult, ParallelResult
from .core.evaluator import Evaluator, evaluate
from .distance.matrix import euclidean_matrix, validate_distance_matrix
from .solvers.heuristics.local_search import Acceptance, local_search
from .solvers.heuristics.moves import MoveOperator
from .solvers.ils.config import ILSConfig
from .solvers.ils.homebase import HomebasePolicy
from .solvers.ils.orchestrator import solve
from .solvers.parallel import solve_parallel
from .solvers.ils_solver import solve_problem, get_tour_cost

__version__ = "1.0.0"

__all__ = [
    "VisitRoutingError",
    "ConfigurationError",
    "InvalidTourError",
    "InvalidMatrixError",
    "SolverError",
    "Problem",
    "Tour",
    "RunResult",
    "ParallelResult",
    "Evaluator",
    "evaluate",
    "euclidean_matrix",
    "validate_distance_matrix",
    "Acceptance",
    "local_search",
    "MoveOperator",
    "ILSConfig",
    "HomebasePolicy",
    "solve",
    "solve_parallel",
    "solve_problem",
    "get_tour_cost",
]
