"""Distance matrix construction and validation."""

from .matrix import euclidean_matrix, graph_distance_matrix, validate_distance_matrix

__all__ = ["euclidean_matrix", "graph_distance_matrix", "validate_distance_matrix"]
