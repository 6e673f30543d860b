"""
Instance generation for experiments.

Provides functions to create problem instances for benchmarking.
"""

from visit_routing import Problem


def build_problem(num_cities: int, density: float, seed: int) -> Problem:
    """
    Build a problem instance from parameters.

    Args:
        num_cities: Number of visit locations
        density: Road edge probability
        seed: Random seed

    Returns:
        Configured Problem instance
    """
    return Problem(num_cities, density=density, seed=seed)
