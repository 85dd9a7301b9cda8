"""
Heap-based ShortestPathEngine implementation for the toolkit.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from typing import List, Optional
import heapq
import math

from algorithms import ShortestPathEngine, ShortestPathTree
from errors import InvalidSelection
from graph import Graph


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap.

    Heap entries are (distance, node), so among equally distant candidates the
    lowest node index is settled first. Selection stops once no reachable
    unsettled node remains.

    Complexity:
        O(E log V) over the nodes reachable from the source.
    """

    def shortest_path_costs(self, graph: Graph, source: int) -> List[float]:
        """
        Compute only the cost list for all nodes from source.
        """
        return list(self.shortest_paths(graph, source).distance)

    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathTree:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        The predecessor of the source, and of every unreachable node, is None,
        which is where ShortestPathTree.path_to stops walking.
        """
        n = graph.node_count
        if not 0 <= source < n:
            raise InvalidSelection(f"Source node {source} is out of range (0 - {n - 1}).")

        dist: List[float] = [math.inf] * n
        prev: List[Optional[int]] = [None] * n
        settled = [False] * n
        dist[source] = 0
        pq = [(0, source)]  # priority queue of (distance, node)

        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if settled[u] or d_u != dist[u]:
                continue
            settled[u] = True

            for v, w in graph.neighbours(u).items():
                if settled[v]:
                    continue
                alt = d_u + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        return ShortestPathTree(source=source, distance=tuple(dist), previous=tuple(prev))
