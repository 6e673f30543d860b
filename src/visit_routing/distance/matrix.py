"""
Distance matrix construction and validation.

Builds dense symmetric matrices either from planar coordinates or from
shortest paths on a weighted road graph, and checks that a matrix is fit
to be shared read-only by the search.
"""

import networkx as nx
import numpy as np

from ..core.errors import InvalidMatrixError

SYMMETRY_TOL = 1e-9


def euclidean_matrix(coords: np.ndarray) -> np.ndarray:
    """
    Build the Euclidean distance matrix for a set of points.

    Args:
        coords: Array of shape (n, 2) with point coordinates

    Returns:
        Symmetric (n, n) float64 matrix with zero diagonal
    """
    coords = np.asarray(coords, dtype=np.float64)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise InvalidMatrixError(f"coords must have shape (n, 2), got {coords.shape}")

    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    dist = np.sqrt(np.sum(np.square(diff), axis=-1))
    # Exact symmetry regardless of rounding in the subtraction
    return (dist + dist.T) / 2.0


def graph_distance_matrix(G: nx.Graph, weight: str = "dist") -> np.ndarray:
    """
    Build a complete distance matrix from shortest paths on a graph.

    Nodes must be labelled 0..n-1. Used when visits are connected by a
    sparse road network rather than straight lines.

    Args:
        G: Connected undirected graph
        weight: Edge attribute holding the edge length

    Returns:
        Symmetric (n, n) float64 matrix of shortest-path lengths
    """
    n = G.number_of_nodes()
    if sorted(G.nodes()) != list(range(n)):
        raise InvalidMatrixError("graph nodes must be labelled 0..n-1")
    if n > 0 and not nx.is_connected(G):
        raise InvalidMatrixError("graph must be connected")

    dist_matrix = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        lengths = nx.single_source_dijkstra_path_length(G, i, weight=weight)
        for j, d in lengths.items():
            dist_matrix[i, j] = d

    return (dist_matrix + dist_matrix.T) / 2.0


def validate_distance_matrix(matrix) -> np.ndarray:
    """
    Check that a matrix is a valid symmetric distance matrix.

    Args:
        matrix: Array-like of shape (n, n)

    Returns:
        A read-only float64 copy of the matrix

    Raises:
        InvalidMatrixError: If the matrix is not square, has fewer than two
            rows, holds non-finite or negative values, is asymmetric, or has
            a non-zero diagonal
    """
    try:
        arr = np.array(matrix, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidMatrixError(f"distance matrix is not numeric: {exc}") from exc

    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise InvalidMatrixError(f"distance matrix must be square, got shape {arr.shape}")
    n = arr.shape[0]
    if n < 2:
        raise InvalidMatrixError(f"distance matrix needs at least 2 cities, got {n}")
    if not np.all(np.isfinite(arr)):
        raise InvalidMatrixError("distance matrix contains non-finite values")
    if np.any(arr < 0):
        raise InvalidMatrixError("distance matrix contains negative distances")
    if not np.allclose(arr, arr.T, rtol=0.0, atol=SYMMETRY_TOL):
        i, j = np.unravel_index(np.argmax(np.abs(arr - arr.T)), arr.shape)
        raise InvalidMatrixError(
            f"distance matrix is asymmetric: m[{i}][{j}]={arr[i, j]} != m[{j}][{i}]={arr[j, i]}"
        )
    if np.any(np.abs(np.diag(arr)) > SYMMETRY_TOL):
        raise InvalidMatrixError("distance matrix must have a zero diagonal")

    arr.flags.writeable = False
    return arr
