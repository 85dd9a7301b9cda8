"""
Console renderings of algorithm results.
"""

from typing import List

from algorithms import ShortestPathTree, SpanningTree

INFINITY_LABEL = "Infinity"


def format_spanning_tree(tree: SpanningTree) -> str:
    """
    Render a spanning tree in the adjacency-list input format.

    Each tree edge is listed once, under its parent node. Loading the text
    mirrors every edge, which yields the tree as an undirected graph.
    """
    lines: List[str] = [str(tree.node_count)]
    for node in range(tree.node_count):
        children = tree.children(node)
        fields = [str(len(children))]
        for child, weight in children:
            fields.extend((str(child), str(weight)))
        lines.append(" ".join(fields))
    return "\n".join(lines) + "\n"


def format_shortest_paths(paths: ShortestPathTree, infinity_label: str = INFINITY_LABEL) -> str:
    """
    One line per node: ``node: (distance)<TAB>path``.
    """
    lines: List[str] = []
    for node, dist in enumerate(paths.distance):
        shown = str(int(dist)) if paths.is_reachable(node) else infinity_label
        lines.append(f"{node}: ({shown})\t{paths.format_path(node)}")
    return "\n".join(lines) + "\n"
