"""Unvisited-node sets with minimum-distance extraction.

Both backends break ties between equal tentative distances by the order in
which nodes were added to the frontier, so they finalize nodes in exactly the
same sequence.
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, List, Optional, Tuple

from pathfinder.graph.domain_types import Node

from .distance_table import DistanceTable


class Frontier:
    """Nodes that have not been finalized yet."""

    def __init__(self, nodes: Iterable[Node]):
        self._members: Dict[Node, int] = {}
        for node in nodes:
            if node not in self._members:
                self._members[node] = len(self._members)

    def __contains__(self, node: object) -> bool:
        return node in self._members

    def __len__(self) -> int:
        return len(self._members)

    def is_empty(self) -> bool:
        return not self._members

    def remove(self, node: Node) -> None:
        """Drop ``node``; absent nodes are ignored."""
        self._members.pop(node, None)

    def update(self, node: Node, distance: float) -> None:
        """Hook called after ``node``'s tentative distance dropped to ``distance``."""

    def extract_minimum(self, distances: DistanceTable) -> Optional[Node]:
        raise NotImplementedError


class LinearFrontier(Frontier):
    """Scans every member per extraction: O(|V|) each, O(|V|^2) per solve."""

    def extract_minimum(self, distances: DistanceTable) -> Optional[Node]:
        best: Optional[Node] = None
        best_distance = 0.0
        for node in self._members:
            distance = distances.get(node)
            if best is None or distance < best_distance:
                best = node
                best_distance = distance
        return best


class HeapFrontier(Frontier):
    """Binary heap with lazy invalidation: O(|E| log |V|) per solve."""

    def __init__(self, nodes: Iterable[Node]):
        super().__init__(nodes)
        self._heap: List[Tuple[float, int, Node]] = []

    def update(self, node: Node, distance: float) -> None:
        order = self._members.get(node)
        if order is None:
            return
        heapq.heappush(self._heap, (distance, order, node))

    def extract_minimum(self, distances: DistanceTable) -> Optional[Node]:
        while self._heap:
            distance, _, node = self._heap[0]
            if node in self._members and distances.get(node) == distance:
                return node
            heapq.heappop(self._heap)
        if not self._members:
            return None
        # Only never-reached members remain, all at infinity.
        return next(iter(self._members))


FRONTIER_BACKENDS = {
    "linear": LinearFrontier,
    "heap": HeapFrontier,
}


def make_frontier(kind: str, nodes: Iterable[Node]) -> Frontier:
    try:
        factory = FRONTIER_BACKENDS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown frontier backend {kind!r}; choose from {', '.join(sorted(FRONTIER_BACKENDS))}"
        ) from None
    return factory(nodes)


__all__ = ["FRONTIER_BACKENDS", "Frontier", "HeapFrontier", "LinearFrontier", "make_frontier"]
