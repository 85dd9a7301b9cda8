"""
Tests for the interactive menu, driven by scripted input.
"""

from pathlib import Path
from typing import Iterable, List

import pytest

from adjacency_matrix_graph import AdjacencyMatrixGraph
from config import ToolkitConfig
from engine import GraphEngine
from errors import InvalidSelection
from graph import MAX_WEIGHT
from graphs_cli import main, read_int, run_menu

GRAPHS = Path(__file__).resolve().parent.parent / "graphs"
QUIET = ToolkitConfig(verbose=False)


class Script:
    """Feeds canned answers to prompts and records everything written."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.lines.extend(text.splitlines())


def triangle_engine() -> GraphEngine:
    g = AdjacencyMatrixGraph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 2, 5)
    return GraphEngine(g)


def test_read_int_bounds():
    assert read_int(" 3 ", 1, 8, "choice") == 3
    with pytest.raises(InvalidSelection):
        read_int("9", 1, 8, "choice")
    with pytest.raises(InvalidSelection):
        read_int("two", 1, 8, "choice")


def test_connectivity_and_quit():
    script = Script(["1", "8"])

    run_menu(triangle_engine(), QUIET, script.read, script.write)

    assert "Graph is connected." in script.lines
    assert script.lines[-1] == "Exiting..."
    assert script.lines[:8] == [
        "1. Is Connected",
        "2. Minimum Spanning Tree",
        "3. Shortest Path",
        "4. Is Metric",
        "5. Make Metric",
        "6. Traveling Salesman Problem",
        "7. Approximate TSP",
        "8. Quit",
    ]


def test_invalid_choice_reprints_menu():
    script = Script(["0", "abc", "8"])

    run_menu(triangle_engine(), QUIET, script.read, script.write)

    assert script.lines.count("1. Is Connected") == 3
    assert any(line.startswith("Invalid choice 0") for line in script.lines)
    assert any(line.startswith("Invalid choice 'abc'") for line in script.lines)


def test_shortest_paths_prompt_and_validation():
    script = Script(["3", "0", "3", "7", "8"])

    run_menu(triangle_engine(), QUIET, script.read, script.write)

    assert "From which node would you like to find the shortest paths (0 - 2): " in script.prompts
    assert "2: (2)\t0 -> 1 -> 2" in script.lines
    assert any(line.startswith("Error: Invalid node 7") for line in script.lines)
    assert script.lines[-1] == "Exiting..."


def test_metric_closure_replaces_engine():
    script = Script(["4", "5", "4", "7", "8"])

    final = run_menu(triangle_engine(), QUIET, script.read, script.write)

    assert "Graph is not metric." in script.lines
    # closure dump in the input format, then the closed graph is metric
    assert script.lines[script.lines.index("3") + 1 : script.lines.index("3") + 4] == [
        "2 1 1 2 2",
        "2 0 1 2 1",
        "2 0 2 1 1",
    ]
    assert "The Graph is metric." in script.lines
    assert "TSP Approximate tour: 4: 0 -> 1 -> 2 -> 0" in script.lines
    assert final.graph.weight(0, 2) == 2


def test_precondition_errors_do_not_stop_loop():
    g = AdjacencyMatrixGraph(4)
    g.add_edge(0, 1, 4)
    g.add_edge(2, 3, 7)
    script = Script(["2", "5", "6", "7", "1", "8"])

    run_menu(GraphEngine(g), QUIET, script.read, script.write)

    assert script.lines.count("Error: Graph is not connected.") == 3
    assert "Error: Graph is not metric." in script.lines
    assert "Graph is not connected." in script.lines
    assert script.lines[-1] == "Exiting..."


def test_shortest_paths_on_empty_graph():
    script = Script(["3", "8"])

    run_menu(GraphEngine(AdjacencyMatrixGraph(0)), QUIET, script.read, script.write)

    assert "Error: Graph has no nodes." in script.lines
    assert not any(prompt.startswith("From which node") for prompt in script.prompts)
    assert script.lines[-1] == "Exiting..."


def test_closure_overflow_reported_and_engine_kept():
    g = AdjacencyMatrixGraph(3)
    g.add_edge(0, 1, MAX_WEIGHT)
    g.add_edge(1, 2, MAX_WEIGHT)
    script = Script(["5", "1", "8"])

    final = run_menu(GraphEngine(g), QUIET, script.read, script.write)

    assert any(line.startswith("Error: Shortest-path distance") for line in script.lines)
    assert "Graph is connected." in script.lines
    assert final.graph.weight(0, 2) == 0


def test_ungated_tour_on_non_metric_graph():
    script = Script(["6", "7", "8"])

    run_menu(triangle_engine(), QUIET, script.read, script.write)

    assert "7: 0 -> 1 -> 2 -> 0" in script.lines
    assert "Error: Graph is not metric." in script.lines


def test_spanning_tree_output():
    g = AdjacencyMatrixGraph(4)
    for u, v, w in [(0, 1, 1), (1, 2, 2), (2, 3, 3), (0, 3, 10)]:
        g.add_edge(u, v, w)
    script = Script(["2", "8"])

    run_menu(GraphEngine(g), ToolkitConfig(verbose=True), script.read, script.write)

    assert "[mst] total weight 6" in script.lines
    start = script.lines.index("4")
    assert script.lines[start : start + 5] == ["4", "1 1 1", "1 2 2", "1 3 3", "0"]


def test_end_of_input_exits():
    script = Script([])

    run_menu(triangle_engine(), QUIET, script.read, script.write)

    assert script.lines[-1] == "Exiting..."


def test_main_loads_file_from_prompt(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    script = Script([str(GRAPHS / "triangle.txt"), "1", "8"])

    status = main([], script.read, script.write)

    assert status == 0
    assert script.prompts[0] == "What's the name of your graph file?: "
    assert any(line.startswith("[load] read 3 nodes") for line in script.lines)
    assert "Graph is connected." in script.lines


def test_main_accepts_file_argument_and_config(tmp_path):
    config = tmp_path / "toolkit.yml"
    config.write_text("verbose: false\n")
    script = Script(["1", "8"])

    status = main([str(GRAPHS / "split.txt"), "--config", str(config)], script.read, script.write)

    assert status == 0
    assert "Graph is not connected." in script.lines
    assert not any(line.startswith("[load]") for line in script.lines)


def test_main_missing_file_is_fatal(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    script = Script(["1", "8"])

    status = main([str(tmp_path / "missing.txt")], script.read, script.write)

    assert status == 1
    assert script.lines == [f"Error: Graph file not found: {tmp_path / 'missing.txt'}"]


def test_main_malformed_file_is_fatal(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    bad = tmp_path / "bad.txt"
    bad.write_text("3\n1 1\n")

    status = main([str(bad)], Script([]).read, Script([]).write)

    assert status == 1


def test_main_uses_configured_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "graph_toolkit.yml").write_text(f"graph_file: {GRAPHS / 'square.txt'}\nverbose: false\n")
    script = Script(["", "2", "8"])

    status = main([], script.read, script.write)

    assert status == 0
    assert script.prompts[0].endswith("square.txt]: ")
    assert "1 3 3" in script.lines


def test_main_oversized_weight_is_fatal(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    big = tmp_path / "big.txt"
    big.write_text("3\n1 1 4611686018427387904\n2 0 4611686018427387904 2 4611686018427387904\n1 1 4611686018427387904\n")
    script = Script(["5", "8"])

    status = main([str(big)], script.read, script.write)

    assert status == 1
    assert len(script.lines) == 1
    assert script.lines[0].startswith("Error: Edge 0 -- 1 has weight 4611686018427387904")
