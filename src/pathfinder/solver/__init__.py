"""Solver package exports."""

from .distance_table import INFINITY, DistanceTable
from .frontier import Frontier, HeapFrontier, LinearFrontier, make_frontier
from .path_reconstructor import NoPath, ShortestPath, reconstruct_path
from .predecessor_table import PredecessorTable
from .shortest_path_solver import (
    RelaxationEvent,
    ShortestPathSolver,
    SolveResult,
    SolveRun,
    SolverState,
    shortest_path,
)
from .solver_config import SolverConfig

__all__ = [
    "DistanceTable",
    "Frontier",
    "HeapFrontier",
    "INFINITY",
    "LinearFrontier",
    "NoPath",
    "PredecessorTable",
    "RelaxationEvent",
    "ShortestPath",
    "ShortestPathSolver",
    "SolveResult",
    "SolveRun",
    "SolverConfig",
    "SolverState",
    "make_frontier",
    "reconstruct_path",
    "shortest_path",
]
