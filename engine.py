"""
GraphEngine: one graph plus the algorithms that run over it.

Each engine owns its graph exclusively. Algorithms are injected as engine
interfaces (see algorithms.py) with the simple implementations as defaults, so
tests can build as many independent engines as they need.
"""

from typing import Optional, Tuple

from adjacency_matrix_graph import AdjacencyMatrixGraph
from algorithms import (
    ConnectivityEngine,
    ShortestPathEngine,
    ShortestPathTree,
    SpanningTree,
    SpanningTreeEngine,
    Tour,
    TourEngine,
)
from connectivity import DepthFirstConnectivityEngine
from dijkstra_engine import SimpleDijkstraEngine
from errors import EngineConsumedError, GraphNotConnectedError, GraphNotMetricError, InvalidSelection
from metric import NoEdgePolicy, find_triangle_violation, metric_closure
from nearest_neighbour_engine import NearestNeighbourTourEngine
from prim_engine import SimplePrimEngine


class GraphEngine:
    """
    Algorithms over a single undirected, weighted graph.

    make_metric consumes the engine: it returns a new engine over the closed
    graph, after which this one raises EngineConsumedError on every call.
    """

    def __init__(
        self,
        graph: AdjacencyMatrixGraph,
        connectivity: Optional[ConnectivityEngine] = None,
        spanning_tree: Optional[SpanningTreeEngine] = None,
        shortest_paths: Optional[ShortestPathEngine] = None,
        tour: Optional[TourEngine] = None,
        no_edge_policy: NoEdgePolicy = NoEdgePolicy.ZERO,
    ) -> None:
        self._graph: Optional[AdjacencyMatrixGraph] = graph
        self._connectivity = connectivity or DepthFirstConnectivityEngine()
        self._spanning_tree = spanning_tree or SimplePrimEngine()
        self._shortest_paths = shortest_paths or SimpleDijkstraEngine()
        self._tour = tour or NearestNeighbourTourEngine()
        self._no_edge_policy = no_edge_policy

    @property
    def graph(self) -> AdjacencyMatrixGraph:
        if self._graph is None:
            raise EngineConsumedError()
        return self._graph

    @property
    def node_count(self) -> int:
        return self.graph.node_count

    @property
    def consumed(self) -> bool:
        return self._graph is None

    # --- Connectivity --------------------------------------------------------

    def is_connected(self) -> bool:
        return self._connectivity.is_connected(self.graph)

    def _require_connected(self) -> None:
        if not self.is_connected():
            raise GraphNotConnectedError()

    # --- Spanning tree / shortest paths --------------------------------------

    def minimum_spanning_tree(self) -> SpanningTree:
        """
        Minimum spanning tree rooted at node 0.

        Raises GraphNotConnectedError instead of returning a partial tree.
        """
        self._require_connected()
        return self._spanning_tree.minimum_spanning_tree(self.graph)

    def find_shortest_paths(self, start: int) -> ShortestPathTree:
        """
        Shortest distances and paths from start to every node.

        Raises InvalidSelection when start is not a node of the graph.
        """
        if not 0 <= start < self.node_count:
            raise InvalidSelection(
                f"Node {start} is out of range (0 - {self.node_count - 1})."
            )
        return self._shortest_paths.shortest_paths(self.graph, start)

    # --- Metric --------------------------------------------------------------

    def triangle_violation(self) -> Optional[Tuple[int, int, int]]:
        return find_triangle_violation(self.graph, self._no_edge_policy)

    def is_metric(self) -> bool:
        return self.triangle_violation() is None

    def make_metric(self) -> "GraphEngine":
        """
        Replace every weight by the shortest-path distance between its endpoints.

        The original weights are gone afterwards: this engine is consumed and
        the returned engine (same algorithms, closed graph) takes its place.
        A disconnected graph raises GraphNotConnectedError, and a distance
        above MAX_WEIGHT raises WeightOverflowError; both leave this engine
        usable.
        """
        closed = metric_closure(self.graph, self._connectivity)
        successor = GraphEngine(
            closed,
            connectivity=self._connectivity,
            spanning_tree=self._spanning_tree,
            shortest_paths=self._shortest_paths,
            tour=self._tour,
            no_edge_policy=self._no_edge_policy,
        )
        self._graph = None
        return successor

    # --- Travelling salesman -------------------------------------------------

    def has_traveling_salesman_problem(self) -> bool:
        """True when the graph is connected and metric."""
        return self.is_connected() and self.is_metric()

    def approximate_tsp(self) -> Tour:
        """
        Nearest-neighbour tour from node 0.

        Only connectivity is required; on a non-metric graph the tour is still
        built but carries no approximation meaning.
        """
        self._require_connected()
        return self._tour.tour(self.graph, 0)

    def solve_tsp(self) -> Tour:
        """
        Nearest-neighbour tour, gated on has_traveling_salesman_problem.
        """
        self._require_connected()
        if not self.is_metric():
            raise GraphNotMetricError()
        return self._tour.tour(self.graph, 0)
