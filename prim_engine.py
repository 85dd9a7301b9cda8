"""
Prim-based SpanningTreeEngine implementation for the toolkit.

Dense O(V^2) variant: the next node is chosen by a linear scan, which suits the
adjacency-matrix representation.
"""

from typing import List, Optional
import math

from algorithms import SpanningTree, SpanningTreeEngine
from errors import GraphNotConnectedError
from graph import Graph


class SimplePrimEngine(SpanningTreeEngine):
    """
    Prim's algorithm rooted at node 0.

    Ties between equally cheap candidates go to the lowest node index.
    """

    def minimum_spanning_tree(self, graph: Graph) -> SpanningTree:
        n = graph.node_count
        visited = [False] * n
        min_edge: List[float] = [math.inf] * n
        parent: List[Optional[int]] = [None] * n
        if n:
            min_edge[0] = 0

        for _ in range(n):
            u = _closest_unvisited(min_edge, visited)
            if u is None:
                raise GraphNotConnectedError()
            visited[u] = True

            for v, w in graph.neighbours(u).items():
                if not visited[v] and w < min_edge[v]:
                    parent[v] = u
                    min_edge[v] = w

        weights = tuple(0 if p is None else int(min_edge[v]) for v, p in enumerate(parent))
        return SpanningTree(parent=tuple(parent), weights=weights)


def _closest_unvisited(min_edge: List[float], visited: List[bool]) -> Optional[int]:
    """Lowest-index unvisited node with the smallest finite key, if any."""
    best: Optional[int] = None
    best_key = math.inf
    for v, key in enumerate(min_edge):
        if not visited[v] and key < best_key:
            best = v
            best_key = key
    return best
