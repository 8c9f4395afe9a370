"""Tentative distance labels keyed by node identity."""

from __future__ import annotations

import math
from typing import Dict, Iterator, Tuple

from pathfinder.graph.domain_types import Node

INFINITY = math.inf


class DistanceTable:
    """Maps nodes to their best-known distance; absent nodes read as ``INFINITY``."""

    def __init__(self) -> None:
        self._distances: Dict[Node, float] = {}

    def get(self, node: Node) -> float:
        return self._distances.get(node, INFINITY)

    def set(self, node: Node, distance: float) -> None:
        # Unconditional overwrite; the solver only calls this with a strictly smaller value.
        self._distances[node] = distance

    def __contains__(self, node: object) -> bool:
        return node in self._distances

    def __len__(self) -> int:
        return len(self._distances)

    def items(self) -> Iterator[Tuple[Node, float]]:
        return iter(self._distances.items())

    def as_dict(self) -> Dict[Node, float]:
        return dict(self._distances)

    def __repr__(self) -> str:
        entries = ", ".join(f"{node.label}={dist}" for node, dist in self._distances.items())
        return f"DistanceTable({entries})"


__all__ = ["DistanceTable", "INFINITY"]
