"""Solver algorithms for home-visit sequencing."""

from .ils_solver import solve_problem, get_tour_cost
from .parallel import solve_parallel, default_worker_count

__all__ = ["solve_problem", "get_tour_cost", "solve_parallel", "default_worker_count"]
