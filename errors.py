"""
Exception types raised by the graph toolkit.

Load errors (missing file, bad token stream) are fatal for the CLI.
Precondition violations are recoverable: the menu reports them and carries on.
"""


class GraphError(Exception):
    """Base class for every error raised by the toolkit."""


class GraphResourceNotFound(GraphError, FileNotFoundError):
    """Input graph file does not exist."""


class GraphFormatError(GraphError, ValueError):
    """Token stream is malformed or ends before the declared records do."""


class InvalidSelection(GraphError, ValueError):
    """Menu choice or node index outside the accepted range."""


class PreconditionViolation(GraphError):
    """Operation invoked on a graph that does not satisfy its precondition."""


class GraphNotConnectedError(PreconditionViolation):
    def __init__(self, message: str = "Graph is not connected.") -> None:
        super().__init__(message)


class GraphNotMetricError(PreconditionViolation):
    def __init__(self, message: str = "Graph is not metric.") -> None:
        super().__init__(message)


class EngineConsumedError(PreconditionViolation):
    """
    Engine was consumed by make_metric; use the engine it returned instead.
    """

    def __init__(self, message: str = "Graph engine was consumed by make_metric.") -> None:
        super().__init__(message)


class TourDeadEndError(PreconditionViolation):
    """
    Nearest-neighbour tour cannot continue from the current node.

    Raised on sparse graphs where the tour reaches a node with no unvisited
    neighbour, or where the last node has no edge back to the start.
    """

    def __init__(self, node: int, message: str | None = None) -> None:
        self.node = node
        super().__init__(message or f"Tour is stranded at node {node}: no unvisited neighbour reachable.")


class WeightOverflowError(PreconditionViolation):
    """
    A computed distance does not fit the accepted edge weight range.

    Raised by the metric closure when a shortest path between two nodes sums
    to more than MAX_WEIGHT.
    """

    def __init__(self, distance: int, limit: int) -> None:
        self.distance = distance
        super().__init__(f"Shortest-path distance {distance} exceeds the maximum edge weight {limit}.")
