"""
Toolkit configuration.

Settings come from an optional YAML file; every key has a default, so a missing
file or an empty document yields the default configuration.

    no_edge_policy: zero        # or "legacy"
    infinity_label: Infinity
    graph_file: graphs/sample.txt
    verbose: true
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from metric import NoEdgePolicy

DEFAULT_CONFIG_PATH = Path("graph_toolkit.yml")


@dataclass(frozen=True)
class ToolkitConfig:
    """
    Attributes
    ----------
    no_edge_policy:
        Which cells the metric check treats as missing edges.
    infinity_label:
        Text printed for the distance of an unreachable node.
    graph_file:
        Default graph file offered when the CLI prompts for one.
    verbose:
        Print bracketed progress lines (``[load] ...``) alongside results.
    """

    no_edge_policy: NoEdgePolicy = NoEdgePolicy.ZERO
    infinity_label: str = "Infinity"
    graph_file: Path | None = None
    verbose: bool = True

    def validate(self) -> None:
        """Raise ValueError if the settings are unusable."""

        if not isinstance(self.no_edge_policy, NoEdgePolicy):
            raise ValueError(f"no_edge_policy must be a NoEdgePolicy, got {self.no_edge_policy!r}.")
        if not self.infinity_label.strip():
            raise ValueError("infinity_label must not be blank.")


def config_from_mapping(data: Mapping[str, Any] | None) -> ToolkitConfig:
    data = dict(data or {})
    unknown = set(data) - {"no_edge_policy", "infinity_label", "graph_file", "verbose"}
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}.")

    policy_name = str(data.get("no_edge_policy", NoEdgePolicy.ZERO.value)).lower()
    try:
        policy = NoEdgePolicy(policy_name)
    except ValueError:
        choices = ", ".join(p.value for p in NoEdgePolicy)
        raise ValueError(f"no_edge_policy must be one of: {choices} (got {policy_name!r}).") from None

    graph_file = data.get("graph_file")
    cfg = ToolkitConfig(
        no_edge_policy=policy,
        infinity_label=str(data.get("infinity_label", "Infinity")),
        graph_file=Path(graph_file) if graph_file else None,
        verbose=bool(data.get("verbose", True)),
    )
    cfg.validate()
    return cfg


def load_config(path: Path | None = None) -> ToolkitConfig:
    """
    Load configuration from path (default: graph_toolkit.yml in the working
    directory). A missing default file means defaults; a missing explicit path
    is an error.
    """
    import yaml  # type: ignore

    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return ToolkitConfig()

    try:
        data = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Configuration in {path} is not valid YAML: {exc}") from exc
    if data is not None and not isinstance(data, Mapping):
        raise ValueError(f"Configuration in {path} must be a mapping.")
    return config_from_mapping(data)
