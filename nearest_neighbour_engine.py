"""
Nearest-neighbour TourEngine implementation for the toolkit.

Greedy heuristic for the travelling salesman problem: always move to the
closest unvisited node, then return to the start. On metric graphs the tour is
an approximation; nothing is guaranteed about its ratio to the optimum.
"""

from typing import List, Optional

from algorithms import Tour, TourEngine
from errors import InvalidSelection, TourDeadEndError
from graph import NO_EDGE, Graph


class NearestNeighbourTourEngine(TourEngine):
    """
    Nearest-neighbour tour.

    The next node is the unvisited neighbour with the strictly smallest
    positive edge weight; ties go to the lowest node index.
    """

    def tour(self, graph: Graph, start: int = 0) -> Tour:
        n = graph.node_count
        if n == 0:
            return Tour(order=(), length=0)
        if not 0 <= start < n:
            raise InvalidSelection(f"Start node {start} is out of range (0 - {n - 1}).")

        visited = [False] * n
        visited[start] = True
        order: List[int] = [start]
        length = 0
        current = start

        for _ in range(n - 1):
            nxt = nearest_unvisited_neighbour(graph, current, visited)
            if nxt is None:
                raise TourDeadEndError(current)
            length += graph.weight(current, nxt)
            visited[nxt] = True
            order.append(nxt)
            current = nxt

        if current != start:
            closing = graph.weight(current, start)
            if closing == NO_EDGE:
                raise TourDeadEndError(
                    current, f"Tour cannot return to node {start}: no edge from node {current}."
                )
            length += closing
        order.append(start)

        return Tour(order=tuple(order), length=length)


def nearest_unvisited_neighbour(graph: Graph, node: int, visited: List[bool]) -> Optional[int]:
    """
    Closest unvisited neighbour of node, or None when every neighbour is visited.
    """
    nearest: Optional[int] = None
    best = 0
    for v, w in graph.neighbours(node).items():
        if visited[v]:
            continue
        if nearest is None or w < best:
            nearest = v
            best = w
    return nearest
