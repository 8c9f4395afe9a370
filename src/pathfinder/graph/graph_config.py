from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple

import pandas as pd
import yaml

from pathfinder.errors import InvalidWeightError

from .domain_types import coerce_weight
from .weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)

EdgeTriple = Tuple[str, str, int]

CSV_COLUMNS = ("upstream", "downstream", "weight")


def _parse_edge_entry(raw: object, position: int) -> EdgeTriple:
    """
    Normalize one YAML edge entry into an ``(upstream, downstream, weight)`` triple.

    Args:
        raw: Either a mapping with ``from``/``to``/``weight`` keys or a 3-item list.
        position: Index of the entry, used in error messages.
    Returns:
        The parsed triple with string labels and an integer weight.
    """
    if isinstance(raw, Mapping):
        missing = [key for key in ("from", "to", "weight") if key not in raw]
        if missing:
            raise ValueError(f"Edge entry #{position} is missing {', '.join(missing)}")
        upstream, downstream, weight = raw["from"], raw["to"], raw["weight"]
    elif isinstance(raw, (list, tuple)):
        if len(raw) != 3:
            raise ValueError(
                f"Edge entry #{position} must be [from, to, weight], got {len(raw)} items"
            )
        upstream, downstream, weight = raw
    else:
        raise TypeError(f"Edge entry #{position} must be a mapping or a list")
    upstream_label = "" if upstream is None else str(upstream).strip()
    downstream_label = "" if downstream is None else str(downstream).strip()
    if not upstream_label or not downstream_label:
        raise ValueError(f"Edge entry #{position} has an empty endpoint label")
    label = f"#{position} ({upstream_label}->{downstream_label})"
    return upstream_label, downstream_label, coerce_weight(weight, label)


@dataclass
class GraphConfig:
    """Declarative description of a weighted graph, loadable from YAML or CSV."""

    edges: List[EdgeTriple] = field(default_factory=list)
    nodes: List[str] = field(default_factory=list)
    version: str | None = None
    undirected: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "GraphConfig":
        if not isinstance(data, Mapping):
            raise TypeError("Graph config must contain a mapping at the top level")
        raw_edges = data.get("edges") or []
        if not isinstance(raw_edges, list):
            raise TypeError("'edges' must be a list of edge entries")
        raw_nodes = data.get("nodes") or []
        if not isinstance(raw_nodes, list):
            raise TypeError("'nodes' must be a list of node labels")
        undirected = data.get("undirected", False)
        if not isinstance(undirected, bool):
            raise TypeError("'undirected' must be a boolean")
        version = data.get("version")
        return cls(
            edges=[_parse_edge_entry(raw, idx) for idx, raw in enumerate(raw_edges)],
            nodes=[str(label) for label in raw_nodes],
            version=str(version) if version is not None else None,
            undirected=undirected,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GraphConfig":
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Graph YAML not found at {config_path}")
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        return cls.from_mapping(data)

    @classmethod
    def from_csv(cls, path: str | Path) -> "GraphConfig":
        """Load an edge list CSV with ``upstream,downstream,weight`` columns."""
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        missing = [col for col in CSV_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"Edge CSV must include columns: {', '.join(missing)}")
        if df.empty:
            logger.warning("Edge CSV at %s is empty", path)
        weights = pd.to_numeric(df["weight"], errors="coerce")
        edges: List[EdgeTriple] = []
        for idx, (upstream, downstream, raw_weight, weight) in enumerate(
            zip(df["upstream"], df["downstream"], df["weight"], weights)
        ):
            if pd.isna(weight):
                raise InvalidWeightError(
                    f"Edge CSV row #{idx} ({upstream}->{downstream}) has non-numeric weight {raw_weight!r}"
                )
            edges.append(_parse_edge_entry([upstream, downstream, weight], idx))
        return cls(edges=edges)

    def to_yaml(self, path: str | Path) -> None:
        output: Dict[str, object] = {}
        if self.version is not None:
            output["version"] = self.version
        if self.undirected:
            output["undirected"] = True
        if self.nodes:
            output["nodes"] = list(self.nodes)
        output["edges"] = [
            {"from": upstream, "to": downstream, "weight": int(weight)}
            for upstream, downstream, weight in self.edges
        ]
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        with dest.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(output, handle, sort_keys=False)

    def directed_edges(self) -> List[EdgeTriple]:
        """Edges as declared, plus reverse edges when ``undirected`` is set."""
        if not self.undirected:
            return list(self.edges)
        seen = {(upstream, downstream) for upstream, downstream, _ in self.edges}
        mirrored = list(self.edges)
        for upstream, downstream, weight in self.edges:
            if (downstream, upstream) not in seen:
                mirrored.append((downstream, upstream, weight))
                seen.add((downstream, upstream))
        return mirrored

    def build_graph(self) -> WeightedGraph:
        graph = WeightedGraph.from_edge_list(self.directed_edges(), nodes=self.nodes)
        isolated = graph.isolated_nodes()
        if isolated:
            logger.warning(
                "Graph has %d isolated node(s): %s",
                len(isolated),
                ", ".join(node.label for node in isolated),
            )
        logger.debug("Built %r", graph)
        return graph


def load_graph(path: str | Path) -> WeightedGraph:
    """Build a graph from a ``.yaml``/``.yml`` or ``.csv`` file."""
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return GraphConfig.from_yaml(path).build_graph()
    if suffix == ".csv":
        return GraphConfig.from_csv(path).build_graph()
    raise ValueError(f"Unsupported graph file extension {suffix!r}; use .yaml or .csv")


def edges_from_pairs(pairs: Sequence[Tuple[str, str]], weights: Mapping[Tuple[str, str], int]) -> List[EdgeTriple]:
    """Join street-style neighbour pairs with their block weights."""
    edges: List[EdgeTriple] = []
    for upstream, downstream in pairs:
        if (upstream, downstream) not in weights:
            raise ValueError(f"No weight declared for {upstream}->{downstream}")
        edges.append((upstream, downstream, weights[(upstream, downstream)]))
    return edges


__all__ = ["GraphConfig", "edges_from_pairs", "load_graph"]
