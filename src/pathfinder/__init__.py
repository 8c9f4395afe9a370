"""Dijkstra shortest paths over small weighted directed graphs."""

from .errors import (
    DuplicateEdgeError,
    InvalidNodeError,
    InvalidWeightError,
    NegativeWeightError,
    PathfinderError,
    PredecessorCycleError,
    SolverStateError,
)
from .graph import Edge, GraphConfig, Node, WeightedGraph, build_manhattan_grid, load_graph
from .solver import (
    INFINITY,
    NoPath,
    ShortestPath,
    ShortestPathSolver,
    SolveResult,
    SolverConfig,
    shortest_path,
)

__all__ = [
    "DuplicateEdgeError",
    "Edge",
    "GraphConfig",
    "INFINITY",
    "InvalidNodeError",
    "InvalidWeightError",
    "NegativeWeightError",
    "NoPath",
    "Node",
    "PathfinderError",
    "PredecessorCycleError",
    "ShortestPath",
    "ShortestPathSolver",
    "SolveResult",
    "SolverConfig",
    "SolverStateError",
    "WeightedGraph",
    "build_manhattan_grid",
    "load_graph",
    "shortest_path",
]
