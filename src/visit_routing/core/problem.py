"""
Problem definition for home-visit sequencing.

A problem instance is a set of visit locations in the unit square joined by
a road graph. A single worker leaves from one location, visits every other
location once and returns, so the instance reduces to a symmetric TSP over
the shortest-path distances of the graph.
"""

from itertools import combinations
from typing import Optional, Tuple

import numpy as np
import networkx as nx

from ..distance.matrix import graph_distance_matrix
from .errors import ConfigurationError


class Problem:
    """
    Represents a home-visit sequencing instance.

    The problem consists of a graph where:
    - Each node i is a visit location with a planar position
    - Each edge (u, v) is a road segment of length d(u, v)

    Travel cost between two visits is the shortest-path length between them,
    so the distance matrix is symmetric with a zero diagonal.

    Attributes:
        density: Probability of a road between two non-consecutive locations
        seed: Random seed used to place locations and roads
    """

    def __init__(
        self,
        num_cities: int,
        *,
        density: float = 1.0,
        seed: int = 42,
    ):
        """
        Initialize a problem instance.

        Args:
            num_cities: Number of visit locations
            density: Edge probability for random road generation
            seed: Random seed for reproducibility
        """
        self._validate_parameters(num_cities, density)

        rng = np.random.default_rng(seed)
        self._seed = seed
        self._density = density

        self._coords = rng.random(size=(num_cities, 2))

        self._graph = nx.Graph()
        self._add_nodes(self._coords)
        self._add_edges(self._coords, rng, density)
        self._matrix: Optional[np.ndarray] = None

        assert nx.is_connected(self._graph), "Generated graph must be connected"

    @staticmethod
    def _validate_parameters(num_cities: int, density: float) -> None:
        """Validate input parameters."""
        if num_cities < 2:
            raise ConfigurationError("num_cities must be at least 2")
        if not 0 < density <= 1:
            raise ConfigurationError("density must be in (0, 1]")

    def _add_nodes(self, coords: np.ndarray) -> None:
        """Add nodes with positions."""
        for i in range(len(coords)):
            self._graph.add_node(i, pos=(coords[i, 0], coords[i, 1]))

    def _add_edges(
        self, coords: np.ndarray, rng: np.random.Generator, density: float
    ) -> None:
        """Add road edges weighted by Euclidean length."""
        num_cities = len(coords)
        diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
        distances = np.sqrt(np.sum(np.square(diff), axis=-1))

        for c1, c2 in combinations(range(num_cities), 2):
            # Consecutive locations are always joined so the graph stays connected
            if rng.random() < density or c2 == c1 + 1:
                self._graph.add_edge(c1, c2, dist=float(distances[c1, c2]))

    @property
    def graph(self) -> nx.Graph:
        """Return a copy of the underlying graph."""
        return nx.Graph(self._graph)

    @property
    def num_cities(self) -> int:
        """Number of visit locations."""
        return self._graph.number_of_nodes()

    @property
    def coordinates(self) -> np.ndarray:
        """Copy of the (n, 2) location array."""
        return self._coords.copy()

    @property
    def density(self) -> float:
        return self._density

    def get_position(self, node: int) -> Tuple[float, float]:
        """Get (x, y) position of a node."""
        pos = self._graph.nodes[node]["pos"]
        return (pos[0], pos[1])

    def distance_matrix(self) -> np.ndarray:
        """
        Shortest-path distance matrix over the road graph.

        Computed once and cached; the returned array is read-only.
        """
        if self._matrix is None:
            matrix = graph_distance_matrix(self._graph, weight="dist")
            matrix.flags.writeable = False
            self._matrix = matrix
        return self._matrix

    def __repr__(self) -> str:
        return (
            f"Problem(n={self.num_cities}, density={self._density}, seed={self._seed})"
        )
