"""Graph package exports."""

from .domain_types import Edge, Node, coerce_weight
from .graph_config import GraphConfig, load_graph
from .manhattan_grid import ManhattanGrid, build_manhattan_grid
from .weighted_graph import WeightedGraph

__all__ = [
    "Edge",
    "GraphConfig",
    "ManhattanGrid",
    "Node",
    "WeightedGraph",
    "build_manhattan_grid",
    "coerce_weight",
    "load_graph",
]
