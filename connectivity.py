"""
Depth-first ConnectivityEngine implementation for the toolkit.

Uses an explicit stack so traversal depth is not bounded by the interpreter's
recursion limit.
"""

from typing import Iterator, List

from algorithms import ConnectivityEngine
from errors import InvalidSelection
from graph import Graph


class DepthFirstConnectivityEngine(ConnectivityEngine):
    """
    Iterative depth-first search.

    Visit order matches the recursive formulation: a node is marked on entry
    and its neighbours are explored in ascending index order, descending into
    each unvisited one before moving to the next.
    """

    def traversal_order(self, graph: Graph, start: int) -> List[int]:
        n = graph.node_count
        if not 0 <= start < n:
            raise InvalidSelection(f"Start node {start} is out of range (0 - {n - 1}).")

        visited = [False] * n
        order: List[int] = [start]
        visited[start] = True

        # Each frame keeps its own position in the neighbour scan.
        stack: List[Iterator[int]] = [iter(graph.neighbours(start))]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    order.append(v)
                    stack.append(iter(graph.neighbours(v)))
                    break
            else:
                stack.pop()

        return order
