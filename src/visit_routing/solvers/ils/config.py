"""
Configuration for Iterated Local Search runs.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Type, TypeVar

from ...core.errors import ConfigurationError
from ..heuristics.local_search import Acceptance
from ..heuristics.moves import MoveOperator
from .homebase import HomebasePolicy

E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_cls: Type[E], value, name: str) -> E:
    """Accept an enum member, its value, or its name (case-insensitive)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_")
        for member in enum_cls:
            if key in (member.value, member.name.lower()):
                return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ConfigurationError(f"{name} must be one of [{choices}], got {value!r}")


@dataclass(frozen=True)
class ILSConfig:
    """
    Parameters for one Iterated Local Search run.

    Attributes:
        acceptance: Local search acceptance rule
        move: Local search neighbourhood
        homebase: Homebase update policy
        epsilon: Exploration probability for the epsilon-greedy policy
        tabu_capacity: Number of recent tours remembered (0 disables)
        local_search_time_s: Wall-clock budget of each local search call
        max_iterations: Maximum number of outer iterations
        time_budget_s: Optional wall-clock budget of the whole run
        max_perturbation_attempts: Draws allowed to find a non-tabu perturbation
        seed: Seed of the run's random generator (None = nondeterministic)
    """

    acceptance: Acceptance = Acceptance.FIRST_IMPROVEMENT
    move: MoveOperator = MoveOperator.TWO_OPT
    homebase: HomebasePolicy = HomebasePolicy.EPSILON_GREEDY
    epsilon: float = 0.2
    tabu_capacity: int = 50
    local_search_time_s: float = 1.0
    max_iterations: int = 100
    time_budget_s: Optional[float] = None
    max_perturbation_attempts: int = 100
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Coerce enum fields and validate numeric ranges."""
        object.__setattr__(
            self, "acceptance", _coerce_enum(Acceptance, self.acceptance, "acceptance")
        )
        object.__setattr__(self, "move", _coerce_enum(MoveOperator, self.move, "move"))
        object.__setattr__(
            self, "homebase", _coerce_enum(HomebasePolicy, self.homebase, "homebase")
        )

        if not 0.0 <= self.epsilon <= 1.0:
            raise ConfigurationError(f"epsilon must be in [0, 1], got {self.epsilon}")
        if self.tabu_capacity < 0:
            raise ConfigurationError(
                f"tabu_capacity must be non-negative, got {self.tabu_capacity}"
            )
        if not (self.local_search_time_s >= 0 and math.isfinite(self.local_search_time_s)):
            raise ConfigurationError(
                f"local_search_time_s must be a non-negative number, got {self.local_search_time_s}"
            )
        if self.max_iterations < 0:
            raise ConfigurationError(
                f"max_iterations must be non-negative, got {self.max_iterations}"
            )
        if self.time_budget_s is not None and not self.time_budget_s >= 0:
            raise ConfigurationError(
                f"time_budget_s must be non-negative, got {self.time_budget_s}"
            )
        if self.max_perturbation_attempts < 1:
            raise ConfigurationError(
                f"max_perturbation_attempts must be at least 1, got {self.max_perturbation_attempts}"
            )

    def with_seed(self, seed: Optional[int]) -> "ILSConfig":
        """Return a copy of this configuration with a different seed."""
        return replace(self, seed=seed)
