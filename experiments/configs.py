"""
Instance and solver configurations for experiments.

Defines standard configurations for benchmarking the ILS variants.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from visit_routing import Acceptance, HomebasePolicy, ILSConfig, MoveOperator


@dataclass(frozen=True)
class InstanceConfig:
    """
    Configuration for a problem instance.

    Attributes:
        num_cities: Number of visit locations
        density: Road edge probability
    """

    num_cities: int
    density: float

    def __iter__(self):
        """Allow unpacking as tuple."""
        return iter((self.num_cities, self.density))


# Base configurations for standard testing
BASE_CONFIGS: List[InstanceConfig] = [
    # Small instances
    InstanceConfig(20, 1.0),
    InstanceConfig(20, 0.3),
    InstanceConfig(50, 1.0),
    InstanceConfig(50, 0.3),
    # Medium instances
    InstanceConfig(100, 1.0),
    InstanceConfig(100, 0.2),
]

# Hard configurations for stress testing
HARD_CONFIGS: List[InstanceConfig] = [
    InstanceConfig(200, 1.0),
    InstanceConfig(200, 0.1),
    InstanceConfig(400, 1.0),
]

# Solver variants compared by the benchmark
POLICY_CONFIGS: Dict[str, ILSConfig] = {
    "explore": ILSConfig(homebase=HomebasePolicy.ALWAYS_ACCEPT),
    "greedy": ILSConfig(homebase=HomebasePolicy.GREEDY),
    "eps-greedy": ILSConfig(homebase=HomebasePolicy.EPSILON_GREEDY, epsilon=0.2),
    "swap-steepest": ILSConfig(
        move=MoveOperator.SWAP,
        acceptance=Acceptance.STEEPEST_ASCENT,
        homebase=HomebasePolicy.EPSILON_GREEDY,
    ),
}


def get_instance_configs(
    n_seeds: int = 10, include_hard: bool = False
) -> Iterator[Tuple[int, float, int]]:
    """
    Generate instance configurations with seeds.

    Args:
        n_seeds: Number of random seeds per configuration
        include_hard: Include hard (stress test) configurations

    Yields:
        Tuples of (num_cities, density, seed)
    """
    configs = list(BASE_CONFIGS) + (list(HARD_CONFIGS) if include_hard else [])

    for config in configs:
        for seed in range(n_seeds):
            yield (config.num_cities, config.density, seed)
