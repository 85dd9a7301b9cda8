"""
Triangle-inequality check and metric closure.

Both operate on the dense weight matrix with numpy: the check evaluates one
source row at a time, the closure runs one vectorised relaxation per
intermediate node (Floyd-Warshall order).
"""

from enum import Enum
from typing import Optional, Tuple

import numpy as np

from adjacency_matrix_graph import AdjacencyMatrixGraph
from algorithms import ConnectivityEngine
from connectivity import DepthFirstConnectivityEngine
from errors import GraphNotConnectedError, WeightOverflowError
from graph import MAX_WEIGHT, NO_EDGE, Graph

# "No edge" marker the legacy metric check tests for: the largest accepted
# weight. Under NoEdgePolicy.LEGACY zero cells are compared as weights.
LEGACY_NO_EDGE = MAX_WEIGHT


class NoEdgePolicy(Enum):
    """
    Which matrix cells the metric check treats as missing edges.

    ZERO: cells equal to NO_EDGE, consistent with every other operation.
    LEGACY: cells equal to LEGACY_NO_EDGE. Only edges of exactly MAX_WEIGHT are
        skipped, so a missing edge takes part in the comparison as a weight-0 edge.
    """

    ZERO = "zero"
    LEGACY = "legacy"

    @property
    def sentinel(self) -> int:
        return NO_EDGE if self is NoEdgePolicy.ZERO else LEGACY_NO_EDGE


def weight_matrix(graph: Graph) -> np.ndarray:
    """Dense copy of graph's weights."""
    if isinstance(graph, AdjacencyMatrixGraph):
        return graph.matrix()
    n = graph.node_count
    weights = np.zeros((n, n), dtype=np.int64)
    for u in graph.nodes():
        for v, w in graph.neighbours(u).items():
            weights[u, v] = w
    return weights


def find_triangle_violation(
    graph: Graph, policy: NoEdgePolicy = NoEdgePolicy.ZERO
) -> Optional[Tuple[int, int, int]]:
    """
    First triple (i, j, k) in lexicographic order with w[i][k] > w[i][j] + w[j][k].

    Triples where any of the three cells is a missing edge under policy are
    skipped. Returns None when the triangle inequality holds everywhere.
    """
    weights = weight_matrix(graph)
    defined = weights != policy.sentinel

    for i in range(weights.shape[0]):
        # Rows index j, columns index k.
        direct = weights[i][np.newaxis, :]
        detour = weights[i][:, np.newaxis] + weights
        checked = defined[i][:, np.newaxis] & defined & defined[i][np.newaxis, :]
        hits = np.argwhere(checked & (direct > detour))
        if hits.size:
            j, k = hits[0]
            return i, int(j), int(k)
    return None


def is_metric(graph: Graph, policy: NoEdgePolicy = NoEdgePolicy.ZERO) -> bool:
    """
    True iff every defined triple satisfies the triangle inequality. O(n^3).
    """
    return find_triangle_violation(graph, policy) is None


def metric_closure(
    graph: Graph, connectivity: Optional[ConnectivityEngine] = None
) -> AdjacencyMatrixGraph:
    """
    All-pairs shortest-path closure of graph, as a new graph.

    w[i][j] becomes the length of the shortest path between i and j, so every
    pair in a connected graph ends up adjacent. Zero cells are missing edges.
    The diagonal is left at NO_EDGE and the input graph is not modified.

    Raises GraphNotConnectedError, without computing anything, when graph is
    not connected.
    """
    connectivity = connectivity or DepthFirstConnectivityEngine()
    if not connectivity.is_connected(graph):
        raise GraphNotConnectedError()

    weights = weight_matrix(graph)
    n = weights.shape[0]
    off_diagonal = ~np.eye(n, dtype=bool)

    for k in range(n):
        # Row and column k cannot change during pass k.
        via_k = weights[:, k][:, np.newaxis] + weights[k, :][np.newaxis, :]
        usable = (weights[:, k] != NO_EDGE)[:, np.newaxis] & (weights[k, :] != NO_EDGE)[np.newaxis, :]
        improve = usable & off_diagonal & ((weights == NO_EDGE) | (via_k < weights))
        weights[improve] = via_k[improve]

    longest = int(weights.max()) if n else 0
    if longest > MAX_WEIGHT:
        raise WeightOverflowError(longest, MAX_WEIGHT)
    return AdjacencyMatrixGraph.from_matrix(weights)
