"""
Algorithm interfaces for the graph toolkit.

Keeps graph algorithms separate from the engine facade and the CLI.
Result types are plain dataclasses shared by every implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import math

from adjacency_matrix_graph import AdjacencyMatrixGraph
from graph import Graph


@dataclass(frozen=True)
class SpanningTree:
    """
    Spanning tree rooted at node 0, encoded by parent pointers.

    parent[root] is None; every other entry names the node that attached it.
    """
    parent: Tuple[Optional[int], ...]
    weights: Tuple[int, ...]  # weight of the edge parent[v] -- v (0 for the root)

    @property
    def node_count(self) -> int:
        return len(self.parent)

    @property
    def total_weight(self) -> int:
        return sum(self.weights)

    def children(self, node: int) -> List[Tuple[int, int]]:
        """(child, weight) pairs attached below node, ascending by child."""
        return [(v, self.weights[v]) for v, p in enumerate(self.parent) if p == node]

    def edges(self) -> List[Tuple[int, int, int]]:
        """Tree edges as (parent, child, weight), ascending by child."""
        return [(p, v, self.weights[v]) for v, p in enumerate(self.parent) if p is not None]

    def as_graph(self) -> AdjacencyMatrixGraph:
        """Tree as an undirected graph."""
        tree = AdjacencyMatrixGraph(self.node_count)
        for u, v, w in self.edges():
            tree.add_edge(u, v, w)
        return tree


@dataclass(frozen=True)
class ShortestPathTree:
    """
    Single-source shortest-path result.

    distance[v] is math.inf when v is unreachable from source.
    previous[v] is None for the source and for unreachable nodes.
    """
    source: int
    distance: Tuple[float, ...]
    previous: Tuple[Optional[int], ...]

    def is_reachable(self, node: int) -> bool:
        return self.distance[node] != math.inf

    def path_to(self, node: int) -> List[int]:
        """
        Walk predecessors from node back to the source.

        Unreachable nodes have no predecessor, so their path is just [node].
        """
        path: List[int] = []
        at: Optional[int] = node
        while at is not None:
            path.append(at)
            at = self.previous[at]
        path.reverse()
        return path

    def format_path(self, node: int) -> str:
        return " -> ".join(str(v) for v in self.path_to(node))


@dataclass(frozen=True)
class Tour:
    """
    Closed tour: order starts and ends at the same node.
    """
    order: Tuple[int, ...]
    length: int

    def format(self) -> str:
        return f"{self.length}: " + " -> ".join(str(v) for v in self.order)


class ConnectivityEngine(ABC):
    """
    Interface for graph traversal and connectivity testing.
    """

    @abstractmethod
    def traversal_order(self, graph: Graph, start: int) -> List[int]:
        """
        Nodes reachable from start, in the order they are first visited.
        """
        raise NotImplementedError

    def is_connected(self, graph: Graph) -> bool:
        """
        True iff every node is reachable from node 0.

        An empty graph is vacuously connected.
        """
        if graph.node_count == 0:
            return True
        return len(self.traversal_order(graph, 0)) == graph.node_count


class SpanningTreeEngine(ABC):
    """
    Interface for minimum spanning tree construction.
    """

    @abstractmethod
    def minimum_spanning_tree(self, graph: Graph) -> SpanningTree:
        """
        Compute a minimum spanning tree of a connected graph, rooted at node 0.
        """
        raise NotImplementedError


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: int) -> List[float]:
        """
        Compute shortest-path costs from source to every node.

        Returns:
            List indexed by node; math.inf for unreachable nodes.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathTree:
        """
        Compute shortest-path costs plus the predecessor chain for each node.
        """
        raise NotImplementedError


class TourEngine(ABC):
    """
    Interface for closed-tour (travelling salesman) heuristics.
    """

    @abstractmethod
    def tour(self, graph: Graph, start: int = 0) -> Tour:
        """
        Build a closed tour visiting every node once and returning to start.
        """
        raise NotImplementedError


def tour_length(graph: Graph, order: Sequence[int]) -> int:
    """Sum of edge weights between consecutive nodes of order."""
    return sum(graph.weight(u, v) for u, v in zip(order, order[1:]))
