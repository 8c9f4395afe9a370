"""Core dataclasses shared across the graph package."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from pathfinder.errors import InvalidWeightError, NegativeWeightError


@dataclass(frozen=True, eq=False)
class Node:
    """Graph vertex. Identity based: equal labels do not make equal nodes."""

    label: str

    def __repr__(self) -> str:
        return f"Node({self.label!r})"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.label


@dataclass(frozen=True)
class Edge:
    """Directed, weighted connection between two nodes."""

    upstream: Node
    downstream: Node
    weight: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", coerce_weight(self.weight, self))

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.upstream.label}->{self.downstream.label} ({self.weight})"


def coerce_weight(value: object, context: object = None) -> int:
    """
    Normalize an edge weight to a non-negative ``int``.

    Args:
        value: Raw weight. Integral floats (``2.0``) and numpy integers are accepted.
        context: Optional edge description used in error messages.
    Returns:
        The weight as a plain ``int``.
    """
    where = f" for edge {context}" if context is not None else ""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidWeightError(f"Edge weight{where} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        weight = int(value)
    else:
        as_float = float(value)
        if not math.isfinite(as_float) or not as_float.is_integer():
            raise InvalidWeightError(f"Edge weight{where} must be an integer, got {value!r}")
        weight = int(as_float)
    if weight < 0:
        raise NegativeWeightError(f"Edge weight{where} must be non-negative, got {weight}")
    return weight


__all__ = ["Edge", "Node", "coerce_weight"]
