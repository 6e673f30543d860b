"""Core components: Problem, Tour, RunResult, Evaluator, errors."""

from .errors import (
    VisitRoutingError,
    ConfigurationError,
    InvalidTourError,
    InvalidMatrixError,
    SolverError,
)
from .problem import Problem
from .solution import Tour, RunResult, ParallelResult
from .evaluator import Evaluator, evaluate, validate_tour

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
    "validate_tour",
]
