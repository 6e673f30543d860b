"""Shared fixtures for the solver tests."""

import math

import numpy as np
import pytest

from visit_routing import euclidean_matrix


@pytest.fixture
def square_matrix():
    """Unit square: adjacent corners at distance 1, diagonals at sqrt(2)."""
    coords = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    matrix = euclidean_matrix(coords)
    assert matrix[0, 2] == pytest.approx(math.sqrt(2))
    return matrix


def random_matrix(n: int, seed: int = 0) -> np.ndarray:
    """Euclidean matrix for n random points in the unit square."""
    rng = np.random.default_rng(seed)
    return euclidean_matrix(rng.random((n, 2)))


@pytest.fixture
def matrix_12():
    return random_matrix(12, seed=7)


@pytest.fixture
def matrix_30():
    return random_matrix(30, seed=11)
