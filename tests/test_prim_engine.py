"""
Unit tests for SimplePrimEngine.
"""

import pytest

from adjacency_matrix_graph import AdjacencyMatrixGraph
from connectivity import DepthFirstConnectivityEngine
from errors import GraphNotConnectedError
from formatting import format_spanning_tree
from graph_io import parse_graph
from prim_engine import SimplePrimEngine


def square_graph() -> AdjacencyMatrixGraph:
    g = AdjacencyMatrixGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 3)
    g.add_edge(0, 3, 10)
    return g


def test_mst_drops_heaviest_cycle_edge():
    tree = SimplePrimEngine().minimum_spanning_tree(square_graph())

    assert tree.parent == (None, 0, 1, 2)
    assert tree.edges() == [(0, 1, 1), (1, 2, 2), (2, 3, 3)]
    assert tree.total_weight == 6
    assert (0, 3, 10) not in tree.edges()


def test_mst_spans_and_is_acyclic():
    g = AdjacencyMatrixGraph(5)
    for u, v, w in [(0, 1, 4), (0, 2, 1), (1, 2, 2), (1, 3, 5), (2, 3, 8), (3, 4, 3), (2, 4, 9)]:
        g.add_edge(u, v, w)

    tree = SimplePrimEngine().minimum_spanning_tree(g)
    as_graph = tree.as_graph()

    # n - 1 edges and connected implies a spanning tree
    assert len(tree.edges()) == g.node_count - 1
    assert DepthFirstConnectivityEngine().is_connected(as_graph)
    assert tree.total_weight == 1 + 2 + 5 + 3


def test_ties_resolved_by_lowest_index():
    g = AdjacencyMatrixGraph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(1, 2, 1)

    tree = SimplePrimEngine().minimum_spanning_tree(g)

    assert tree.parent == (None, 0, 0)


def test_single_node_tree():
    tree = SimplePrimEngine().minimum_spanning_tree(AdjacencyMatrixGraph(1))

    assert tree.parent == (None,)
    assert tree.total_weight == 0


def test_disconnected_graph_raises():
    g = AdjacencyMatrixGraph(3)
    g.add_edge(0, 1, 1)

    with pytest.raises(GraphNotConnectedError):
        SimplePrimEngine().minimum_spanning_tree(g)


def test_formatted_tree_reloads_as_tree():
    tree = SimplePrimEngine().minimum_spanning_tree(square_graph())
    text = format_spanning_tree(tree)

    assert text == "4\n1 1 1\n1 2 2\n1 3 3\n0\n"
    assert parse_graph(text) == tree.as_graph()
