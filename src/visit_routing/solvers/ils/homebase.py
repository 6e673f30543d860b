"""
Homebase update policies for Iterated Local Search.

A policy decides which tour becomes the origin of the next perturbation:
the newly found local optimum or the current homebase. Policies are
stateless; randomness comes only from the generator passed in.
"""

import random
from enum import Enum
from typing import List, Tuple

from ...core.evaluator import is_improvement

HomeChoice = Tuple[List[int], float]


class HomebasePolicy(Enum):
    """
    Homebase acceptance strategy.

    ALWAYS_ACCEPT: move to every new local optimum (exploration)
    GREEDY: move only to strictly better local optima (exploitation)
    EPSILON_GREEDY: greedy with probability 1 - epsilon, else always accept
    """

    ALWAYS_ACCEPT = "always_accept"
    GREEDY = "greedy"
    EPSILON_GREEDY = "epsilon_greedy"


def always_accept(
    home: List[int], home_cost: float, candidate: List[int], candidate_cost: float
) -> HomeChoice:
    """Unconditionally adopt the candidate."""
    return candidate, candidate_cost


def greedy(
    home: List[int], home_cost: float, candidate: List[int], candidate_cost: float
) -> HomeChoice:
    """Adopt the candidate only if it is strictly cheaper than home."""
    if is_improvement(candidate_cost, home_cost):
        return candidate, candidate_cost
    return home, home_cost


def epsilon_greedy(
    home: List[int],
    home_cost: float,
    candidate: List[int],
    candidate_cost: float,
    rng: random.Random,
    epsilon: float = 0.2,
) -> HomeChoice:
    """
    Mix exploitation and exploration with a single uniform draw.

    Args:
        home: Current homebase
        home_cost: Cost of home
        candidate: New local optimum
        candidate_cost: Cost of candidate
        rng: Random number generator
        epsilon: Probability of exploring

    Returns:
        Tuple of (new home, new home cost)
    """
    if rng.random() < 1.0 - epsilon:
        return greedy(home, home_cost, candidate, candidate_cost)
    return always_accept(home, home_cost, candidate, candidate_cost)


def update_home(
    policy: HomebasePolicy,
    home: List[int],
    home_cost: float,
    candidate: List[int],
    candidate_cost: float,
    *,
    rng: random.Random,
    epsilon: float = 0.2,
) -> HomeChoice:
    """
    Choose the next homebase according to a policy.

    Args:
        policy: Strategy to apply
        home: Current homebase
        home_cost: Cost of home
        candidate: New local optimum
        candidate_cost: Cost of candidate
        rng: Random number generator (used by EPSILON_GREEDY)
        epsilon: Exploration probability for EPSILON_GREEDY

    Returns:
        Tuple of (new home, new home cost)
    """
    if policy is HomebasePolicy.ALWAYS_ACCEPT:
        return always_accept(home, home_cost, candidate, candidate_cost)
    if policy is HomebasePolicy.GREEDY:
        return greedy(home, home_cost, candidate, candidate_cost)
    if policy is HomebasePolicy.EPSILON_GREEDY:
        return epsilon_greedy(home, home_cost, candidate, candidate_cost, rng, epsilon)
    raise ValueError(f"Unknown homebase policy: {policy}")
