"""Tests for problem generation and distance matrices."""

import random

import networkx as nx
import numpy as np
import pytest

from visit_routing import (
    ConfigurationError,
    InvalidMatrixError,
    Problem,
    euclidean_matrix,
    validate_distance_matrix,
)
from visit_routing.distance import graph_distance_matrix
from visit_routing.solvers.heuristics import (
    build_initial_tour,
    nearest_neighbor_tour,
    random_tour,
)


def test_euclidean_matrix_is_symmetric_with_zero_diagonal():
    coords = np.random.default_rng(0).random((8, 2))
    m = euclidean_matrix(coords)
    assert m.shape == (8, 8)
    assert np.array_equal(m, m.T)
    assert np.all(np.diag(m) == 0)
    assert m[0, 1] == pytest.approx(np.linalg.norm(coords[0] - coords[1]))


def test_euclidean_matrix_rejects_bad_shape():
    with pytest.raises(InvalidMatrixError):
        euclidean_matrix(np.zeros((4, 3)))


def test_graph_distance_matrix_uses_shortest_paths():
    G = nx.Graph()
    G.add_edge(0, 1, dist=1.0)
    G.add_edge(1, 2, dist=1.0)
    G.add_edge(0, 2, dist=5.0)
    m = graph_distance_matrix(G)
    assert m[0, 2] == pytest.approx(2.0)
    assert m[2, 0] == pytest.approx(2.0)


def test_graph_distance_matrix_rejects_disconnected_graph():
    G = nx.Graph()
    G.add_nodes_from(range(3))
    G.add_edge(0, 1, dist=1.0)
    with pytest.raises(InvalidMatrixError):
        graph_distance_matrix(G)


@pytest.mark.parametrize(
    "matrix",
    [
        np.zeros((2, 3)),  # not square
        np.zeros((1, 1)),  # fewer than two cities
        np.array([[0.0, -1.0], [-1.0, 0.0]]),  # negative
        np.array([[0.0, 1.0], [2.0, 0.0]]),  # asymmetric
        np.array([[1.0, 1.0], [1.0, 0.0]]),  # non-zero diagonal
        np.array([[0.0, np.inf], [np.inf, 0.0]]),  # non-finite
        [["a", "b"], ["c", "d"]],  # not numeric
    ],
)
def test_validate_rejects_bad_matrices(matrix):
    with pytest.raises(InvalidMatrixError):
        validate_distance_matrix(matrix)


def test_validate_returns_read_only_copy():
    source = np.array([[0.0, 1.0], [1.0, 0.0]])
    m = validate_distance_matrix(source)
    assert not m.flags.writeable
    source[0, 1] = 9.0
    assert m[0, 1] == 1.0


def test_complete_problem_matches_euclidean_distances():
    p = Problem(12, density=1.0, seed=3)
    assert np.allclose(p.distance_matrix(), euclidean_matrix(p.coordinates))


def test_sparse_problem_distances_dominate_euclidean():
    p = Problem(20, density=0.2, seed=4)
    m = p.distance_matrix()
    assert np.all(m >= euclidean_matrix(p.coordinates) - 1e-9)
    assert np.allclose(m, m.T)
    assert not m.flags.writeable
    validate_distance_matrix(m)


def test_problem_is_seed_reproducible():
    a = Problem(10, density=0.5, seed=7)
    b = Problem(10, density=0.5, seed=7)
    assert np.array_equal(a.coordinates, b.coordinates)
    assert np.array_equal(a.distance_matrix(), b.distance_matrix())


@pytest.mark.parametrize("kwargs", [{"num_cities": 1}, {"num_cities": 5, "density": 0.0}])
def test_problem_rejects_bad_parameters(kwargs):
    num_cities = kwargs.pop("num_cities")
    with pytest.raises(ConfigurationError):
        Problem(num_cities, **kwargs)


def test_initial_tours_are_permutations():
    p = Problem(9, seed=2)
    m = p.distance_matrix()
    r = random.Random(0)
    assert sorted(random_tour(9, r)) == list(range(9))
    assert nearest_neighbor_tour(m, start_from=4)[0] == 4
    for kind in ("identity", "random", "nearest"):
        assert sorted(build_initial_tour(kind, m, r)) == list(range(9))
