"""Three-by-three street grid used as the reference routing scenario.

::

    a - 2 - b - 3 - c
    |       |       |
    1       2       1
    |       |       |
    d - 1 - e - 1 - f
    |               |
    2               4
    |               |
    g - 1 - h - 2 - i

Streets run east, avenues run south; every block is one directed edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .domain_types import Node
from .graph_config import GraphConfig, edges_from_pairs
from .weighted_graph import WeightedGraph

INTERSECTIONS = ("a", "b", "c", "d", "e", "f", "g", "h", "i")

NEXT_DOWN_THE_STREET: Tuple[Tuple[str, str], ...] = (
    ("a", "b"),
    ("b", "c"),
    ("d", "e"),
    ("e", "f"),
    ("g", "h"),
    ("h", "i"),
)

NEXT_ALONG_THE_AVENUE: Tuple[Tuple[str, str], ...] = (
    ("a", "d"),
    ("b", "e"),
    ("c", "f"),
    ("d", "g"),
    ("f", "i"),
)

BLOCK_LENGTHS: Dict[Tuple[str, str], int] = {
    ("a", "b"): 2,
    ("b", "c"): 3,
    ("c", "f"): 1,
    ("f", "i"): 4,
    ("b", "e"): 2,
    ("e", "f"): 1,
    ("a", "d"): 1,
    ("d", "g"): 2,
    ("g", "h"): 1,
    ("h", "i"): 2,
    ("d", "e"): 1,
}


@dataclass(frozen=True)
class ManhattanGrid:
    """The grid graph plus its intersections addressable by label."""

    graph: WeightedGraph
    intersections: Dict[str, Node]

    def __getitem__(self, label: str) -> Node:
        return self.intersections[label]


def grid_config() -> GraphConfig:
    # East neighbours before south neighbours, matching per-intersection visiting order.
    pairs = []
    for label in INTERSECTIONS:
        pairs.extend(pair for pair in NEXT_DOWN_THE_STREET if pair[0] == label)
        pairs.extend(pair for pair in NEXT_ALONG_THE_AVENUE if pair[0] == label)
    return GraphConfig(
        edges=edges_from_pairs(pairs, BLOCK_LENGTHS),
        nodes=list(INTERSECTIONS),
        version="manhattan-3x3",
    )


def build_manhattan_grid() -> ManhattanGrid:
    graph = grid_config().build_graph()
    return ManhattanGrid(
        graph=graph,
        intersections={node.label: node for node in graph.nodes},
    )


__all__ = ["BLOCK_LENGTHS", "INTERSECTIONS", "ManhattanGrid", "build_manhattan_grid", "grid_config"]
