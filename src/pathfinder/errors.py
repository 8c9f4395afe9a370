"""Exception hierarchy raised by graph construction and the solver."""

from __future__ import annotations


class PathfinderError(Exception):
    """Base class for all pathfinder errors."""


class InvalidNodeError(PathfinderError, KeyError):
    """A node is not a member of the graph it is used with."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class NegativeWeightError(PathfinderError, ValueError):
    """An edge weight is below zero."""


class InvalidWeightError(PathfinderError, TypeError):
    """An edge weight is not a non-negative integer."""


class DuplicateEdgeError(PathfinderError, ValueError):
    """A second edge was declared for the same directed node pair."""


class PredecessorCycleError(PathfinderError, RuntimeError):
    """Walking a predecessor table revisited a node."""


class SolverStateError(PathfinderError, RuntimeError):
    """A solve run was driven past its terminal state or read too early."""


__all__ = [
    "DuplicateEdgeError",
    "InvalidNodeError",
    "InvalidWeightError",
    "NegativeWeightError",
    "PathfinderError",
    "PredecessorCycleError",
    "SolverStateError",
]
