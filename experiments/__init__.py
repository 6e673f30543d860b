"""Experiment framework for home-visit sequencing."""

from .configs import (
    BASE_CONFIGS,
    HARD_CONFIGS,
    POLICY_CONFIGS,
    get_instance_configs,
    InstanceConfig,
)
from .instance_generator import build_problem
from .benchmark import (
    run_single_instance,
    run_configuration,
    run_full_benchmark,
    BenchmarkResult,
)

__all__ = [
    "BASE_CONFIGS",
    "HARD_CONFIGS",
    "POLICY_CONFIGS",
    "get_instance_configs",
    "InstanceConfig",
    "build_problem",
    "run_single_instance",
    "run_configuration",
    "run_full_benchmark",
    "BenchmarkResult",
]
