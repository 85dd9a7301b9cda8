"""
Reading and writing graphs in the adjacency-list text format.

    <node_count>
    <edge_count_0> <target> <weight> ... <target> <weight>
    <edge_count_1> ...

Tokens are whitespace-delimited integers; line breaks carry no meaning. Each
edge is declared under one source node and mirrored by the graph.
"""

from pathlib import Path
from typing import Iterator, List

from adjacency_matrix_graph import AdjacencyMatrixGraph
from errors import GraphFormatError, GraphResourceNotFound
from graph import MAX_WEIGHT, Graph


class _TokenReader:
    """Sequential integer reader over a whitespace-split token list."""

    def __init__(self, text: str) -> None:
        self._tokens: List[str] = text.split()
        self._pos = 0

    def next_int(self, what: str) -> int:
        if self._pos >= len(self._tokens):
            raise GraphFormatError(
                f"Input ended after {len(self._tokens)} tokens while reading {what}."
            )
        token = self._tokens[self._pos]
        self._pos += 1
        try:
            return int(token)
        except ValueError:
            raise GraphFormatError(
                f"Token {self._pos} ({token!r}) is not an integer; expected {what}."
            ) from None


def parse_graph(text: str) -> AdjacencyMatrixGraph:
    """
    Build a graph from adjacency-list text.

    Duplicate edges overwrite earlier ones; self-referencing edges are kept.
    Tokens after the last node record are ignored.

    Raises:
        GraphFormatError: on a non-integer token, a premature end of input, a
            negative count or weight, a weight above MAX_WEIGHT, or a target
            outside [0, node_count).
    """
    reader = _TokenReader(text)
    node_count = reader.next_int("node count")
    if node_count < 0:
        raise GraphFormatError(f"Node count must be non-negative, got {node_count}.")

    graph = AdjacencyMatrixGraph(node_count)
    for source in range(node_count):
        edge_count = reader.next_int(f"edge count of node {source}")
        if edge_count < 0:
            raise GraphFormatError(f"Node {source} declares a negative edge count ({edge_count}).")
        for _ in range(edge_count):
            target = reader.next_int(f"edge target of node {source}")
            weight = reader.next_int(f"edge weight of node {source}")
            if not 0 <= target < node_count:
                raise GraphFormatError(
                    f"Node {source} has an edge to {target}, outside 0 - {node_count - 1}."
                )
            if weight < 0:
                raise GraphFormatError(f"Edge {source} -- {target} has negative weight {weight}.")
            if weight > MAX_WEIGHT:
                raise GraphFormatError(
                    f"Edge {source} -- {target} has weight {weight}, above the maximum {MAX_WEIGHT}."
                )
            graph.add_edge(source, target, weight)
    return graph


def load_graph(path: Path | str) -> AdjacencyMatrixGraph:
    """
    Read and parse a graph file. The file is closed before parsing starts.
    """
    path = Path(path)
    try:
        with path.open() as f:
            text = f.read()
    except FileNotFoundError:
        raise GraphResourceNotFound(f"Graph file not found: {path}") from None
    return parse_graph(text)


def iter_adjacency_lines(graph: Graph) -> Iterator[str]:
    """Yield the per-node record lines (without the node count header)."""
    for node in graph.nodes():
        pairs = graph.neighbours(node)
        fields = [str(len(pairs))]
        for target, weight in pairs.items():
            fields.extend((str(target), str(weight)))
        yield " ".join(fields)


def dumps_graph(graph: Graph) -> str:
    """
    Render graph in the adjacency-list format.

    Every edge appears under both of its endpoints, so the output loads back
    into the same graph.
    """
    lines = [str(graph.node_count), *iter_adjacency_lines(graph)]
    return "\n".join(lines) + "\n"


def write_graph(graph: Graph, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_graph(graph))
