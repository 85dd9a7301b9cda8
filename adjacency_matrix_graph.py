"""
Concrete undirected, weighted graph implementation for the toolkit.

Implements the Graph interface with a dense numpy adjacency matrix. Memory is
O(n^2), which suits the small and medium graphs the toolkit is meant for.
"""

from typing import Dict, Iterator, Mapping, Tuple

import numpy as np

from errors import InvalidSelection
from graph import MAX_WEIGHT, NO_EDGE, Graph


class AdjacencyMatrixGraph(Graph):
    """
    Undirected, weighted graph backed by a symmetric node x node weight matrix.
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError(f"node_count must be non-negative, got {node_count}")
        self._node_count = node_count
        self._weights = np.zeros((node_count, node_count), dtype=np.int64)

    @classmethod
    def from_matrix(cls, matrix) -> "AdjacencyMatrixGraph":
        """
        Build a graph from a square, symmetric, non-negative weight matrix.

        The matrix is copied; the diagonal is ignored and left at NO_EDGE.
        """
        try:
            weights = np.array(matrix, dtype=np.int64)
        except OverflowError:
            raise ValueError(f"Weight matrix has weights above {MAX_WEIGHT}.") from None
        if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
            raise ValueError(f"Weight matrix must be square, got shape {weights.shape}")
        if (weights < 0).any():
            raise ValueError("Weight matrix must not contain negative weights.")
        if (weights > MAX_WEIGHT).any():
            raise ValueError(f"Weight matrix has weights above {MAX_WEIGHT}.")
        if not np.array_equal(weights, weights.T):
            raise ValueError("Weight matrix must be symmetric.")

        graph = cls(weights.shape[0])
        np.fill_diagonal(weights, NO_EDGE)
        graph._weights = weights
        return graph

    # --- Mutation API (construction only, not part of Graph interface) -------

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """
        Add or overwrite the undirected edge u -- v.

        Both matrix cells are written so symmetry always holds. Setting a weight
        of NO_EDGE removes the edge.
        """
        self._check_node(u)
        self._check_node(v)
        if weight < 0:
            raise ValueError(f"Edge {u} -- {v} has negative weight {weight}")
        if weight > MAX_WEIGHT:
            raise ValueError(f"Edge {u} -- {v} has weight {weight}, above {MAX_WEIGHT}")
        self._weights[u, v] = weight
        self._weights[v, u] = weight

    # --- Graph interface -----------------------------------------------------

    @property
    def node_count(self) -> int:
        return self._node_count

    def weight(self, u: int, v: int) -> int:
        self._check_node(u)
        self._check_node(v)
        return int(self._weights[u, v])

    def neighbours(self, node: int) -> Mapping[int, int]:
        self._check_node(node)
        row = self._weights[node]
        return {int(v): int(row[v]) for v in np.flatnonzero(row)}

    # --- Helpers -------------------------------------------------------------

    def matrix(self) -> np.ndarray:
        """Return a copy of the weight matrix."""
        return self._weights.copy()

    def edge_count(self, node: int) -> int:
        """Number of edges incident to node (self-loops included)."""
        self._check_node(node)
        return int(np.count_nonzero(self._weights[node]))

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """Yield each undirected edge once as (u, v, weight) with u <= v."""
        rows, cols = np.nonzero(np.triu(self._weights))
        for u, v in zip(rows, cols):
            yield int(u), int(v), int(self._weights[u, v])

    def total_weight(self) -> int:
        return sum(w for _, _, w in self.edges())

    def degrees(self) -> Dict[int, int]:
        return {node: self.edge_count(node) for node in self.nodes()}

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._weights, self._weights.T))

    def copy(self) -> "AdjacencyMatrixGraph":
        graph = AdjacencyMatrixGraph(self._node_count)
        graph._weights = self._weights.copy()
        return graph

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self._node_count:
            raise InvalidSelection(
                f"Node {node} is out of range (0 - {self._node_count - 1})."
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrixGraph):
            return NotImplemented
        return bool(np.array_equal(self._weights, other._weights))

    def __repr__(self) -> str:
        return f"AdjacencyMatrixGraph(node_count={self._node_count}, edges={sum(1 for _ in self.edges())})"
