"""
Undirected, weighted graph abstraction for the toolkit.

Nodes are integer indices in [0, node_count).
Edges are undirected with positive integer weights; weight 0 means "no edge".
"""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

# Absence of an edge is encoded as weight zero, so edges of true weight zero
# cannot be represented.
NO_EDGE = 0

# Largest edge weight accepted. Sums of two weights, and shortest-path sums over
# any graph that fits in memory, stay well inside int64.
MAX_WEIGHT = 2**31 - 1


class Graph(ABC):
    """Undirected, weighted graph over integer node indices."""

    @property
    @abstractmethod
    def node_count(self) -> int:
        """Number of nodes, fixed at construction."""
        raise NotImplementedError

    @abstractmethod
    def weight(self, u: int, v: int) -> int:
        """
        Weight of edge u -- v, or NO_EDGE when the nodes are not adjacent.
        """
        raise NotImplementedError

    @abstractmethod
    def neighbours(self, node: int) -> Mapping[int, int]:
        """
        Adjacent nodes and edge weights for a given node, in ascending index order.

        Returns: dict[int, int]
        """
        raise NotImplementedError

    def nodes(self) -> Iterable[int]:
        """Return all node indices in ascending order."""
        return range(self.node_count)

    def has_edge(self, u: int, v: int) -> bool:
        return self.weight(u, v) != NO_EDGE
