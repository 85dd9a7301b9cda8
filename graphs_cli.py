"""
Interactive menu over a graph loaded from an adjacency-list file.

Asks for a graph file (unless one is given on the command line), then loops on
a numbered menu until the user quits. Load failures end the program; errors
from individual operations are printed and the menu continues.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence
import argparse

from config import ToolkitConfig, load_config
from engine import GraphEngine
from errors import GraphError, InvalidSelection, PreconditionViolation
from formatting import format_shortest_paths, format_spanning_tree
from graph_io import dumps_graph, load_graph

MENU_OPTIONS: Sequence[str] = (
    "Is Connected",
    "Minimum Spanning Tree",
    "Shortest Path",
    "Is Metric",
    "Make Metric",
    "Traveling Salesman Problem",
    "Approximate TSP",
    "Quit",
)
QUIT_CHOICE = len(MENU_OPTIONS)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def read_int(text: str, low: int, high: int, what: str) -> int:
    """Parse text as an integer in [low, high] or raise InvalidSelection."""
    try:
        value = int(text.strip())
    except ValueError:
        raise InvalidSelection(f"Invalid {what} {text.strip()!r}: enter a number between {low} and {high}.") from None
    if not low <= value <= high:
        raise InvalidSelection(f"Invalid {what} {value}: enter a number between {low} and {high}.")
    return value


def print_menu(write: Writer) -> None:
    for number, label in enumerate(MENU_OPTIONS, start=1):
        write(f"{number}. {label}")


class MenuSession:
    """
    State of one interactive session: the current engine and the I/O callables.

    The engine is replaced when "Make Metric" consumes it.
    """

    def __init__(
        self,
        engine: GraphEngine,
        config: ToolkitConfig = ToolkitConfig(),
        read: Reader = input,
        write: Writer = print,
    ) -> None:
        self.engine = engine
        self.config = config
        self._read = read
        self._write = write

    def log(self, message: str) -> None:
        if self.config.verbose:
            self._write(message)

    def run(self) -> None:
        """Loop until the quit option is chosen or input runs out."""
        while True:
            print_menu(self._write)
            try:
                raw = self._read(f"Make your choice (1 - {QUIT_CHOICE}): ")
            except EOFError:
                self._write("Exiting...")
                return

            try:
                choice = read_int(raw, 1, QUIT_CHOICE, "choice")
            except InvalidSelection as exc:
                self._write(str(exc))
                continue

            if choice == QUIT_CHOICE:
                self._write("Exiting...")
                return

            try:
                self.dispatch(choice)
            except EOFError:
                self._write("Exiting...")
                return
            except (PreconditionViolation, InvalidSelection) as exc:
                self._write(f"Error: {exc}")

    def dispatch(self, choice: int) -> None:
        actions = {
            1: self.show_connectivity,
            2: self.show_spanning_tree,
            3: self.show_shortest_paths,
            4: self.show_metric,
            5: self.make_metric,
            6: self.show_approximate_tour,
            7: self.show_gated_tour,
        }
        actions[choice]()

    # --- Menu actions --------------------------------------------------------

    def show_connectivity(self) -> None:
        self._write("Graph is connected." if self.engine.is_connected() else "Graph is not connected.")

    def show_spanning_tree(self) -> None:
        tree = self.engine.minimum_spanning_tree()
        self.log(f"[mst] total weight {tree.total_weight}")
        self._write(format_spanning_tree(tree).rstrip("\n"))

    def show_shortest_paths(self) -> None:
        last = self.engine.node_count - 1
        if last < 0:
            raise InvalidSelection("Graph has no nodes.")
        raw = self._read(f"From which node would you like to find the shortest paths (0 - {last}): ")
        start = read_int(raw, 0, last, "node")
        paths = self.engine.find_shortest_paths(start)
        self._write(format_shortest_paths(paths, self.config.infinity_label).rstrip("\n"))

    def show_metric(self) -> None:
        violation = self.engine.triangle_violation()
        if violation is None:
            self._write("The Graph is metric.")
            return
        i, j, k = violation
        self.log(f"[metric] triangle inequality fails: w({i},{k}) > w({i},{j}) + w({j},{k})")
        self._write("Graph is not metric.")

    def make_metric(self) -> None:
        self.engine = self.engine.make_metric()
        self.log(f"[metric] closed graph over {self.engine.node_count} nodes")
        self._write(dumps_graph(self.engine.graph).rstrip("\n"))

    def show_approximate_tour(self) -> None:
        self._write(self.engine.approximate_tsp().format())

    def show_gated_tour(self) -> None:
        if not self.engine.has_traveling_salesman_problem():
            self._write("Error: Graph is not metric.")
            return
        self._write("TSP Approximate tour: " + self.engine.solve_tsp().format())


def run_menu(
    engine: GraphEngine,
    config: ToolkitConfig = ToolkitConfig(),
    read: Reader = input,
    write: Writer = print,
) -> GraphEngine:
    """
    Run the interactive menu; returns the engine current at exit.
    """
    session = MenuSession(engine, config, read, write)
    session.run()
    return session.engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyse a weighted undirected graph interactively.")
    parser.add_argument("graph_file", nargs="?", help="adjacency-list graph file (prompted for if omitted)")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    return parser


def main(
    argv: Optional[List[str]] = None,
    read: Reader = input,
    write: Writer = print,
) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as exc:
        write(f"Error: could not load configuration: {exc}")
        return 1

    graph_file = args.graph_file
    if graph_file is None:
        hint = f" [{cfg.graph_file}]" if cfg.graph_file else ""
        try:
            graph_file = read(f"What's the name of your graph file?{hint}: ").strip()
        except EOFError:
            return 1
        if not graph_file and cfg.graph_file:
            graph_file = str(cfg.graph_file)
        if not graph_file:
            write("Error: no graph file given.")
            return 1

    try:
        graph = load_graph(graph_file)
    except (GraphError, OSError) as exc:
        write(f"Error: {exc}")
        return 1
    if cfg.verbose:
        write(f"[load] read {graph.node_count} nodes from {graph_file}")

    run_menu(GraphEngine(graph, no_edge_policy=cfg.no_edge_policy), cfg, read, write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
