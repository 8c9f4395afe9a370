"""Rebuild source-to-destination paths from a predecessor table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from pathfinder.errors import PredecessorCycleError
from pathfinder.graph.domain_types import Node

from .predecessor_table import PredecessorTable


@dataclass(frozen=True)
class ShortestPath:
    """Ordered nodes from source to destination (inclusive).

    ``distance`` is the total weight, or ``None`` when the path was rebuilt
    without it.
    """

    nodes: Tuple[Node, ...]
    distance: Optional[int] = None

    @property
    def source(self) -> Node:
        return self.nodes[0]

    @property
    def destination(self) -> Node:
        return self.nodes[-1]

    @property
    def labels(self) -> List[str]:
        return [node.label for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __str__(self) -> str:
        return " -> ".join(self.labels)


@dataclass(frozen=True)
class NoPath:
    """Explicit unreachable verdict. Falsy, so ``if result.path:`` reads naturally."""

    source: Node
    destination: Node
    reason: str = "unreachable"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"no path from {self.source.label} to {self.destination.label} ({self.reason})"


PathResult = Union[ShortestPath, NoPath]


def reconstruct_path(
    predecessors: PredecessorTable,
    source: Node,
    destination: Node,
    distance: Optional[int] = None,
) -> PathResult:
    """
    Walk ``predecessors`` backward from ``destination`` until ``source``.

    Args:
        predecessors: Table filled in by a solve run.
        source: Start of the path.
        destination: End of the path.
        distance: Total weight to attach to the returned path; left as ``None`` when omitted.
    Returns:
        :class:`ShortestPath` when the chain reaches ``source``, otherwise :class:`NoPath`.
    Raises:
        PredecessorCycleError: when the chain revisits a node.
    """
    reversed_nodes: List[Node] = [destination]
    visited = {destination}
    current = destination
    while current is not source:
        previous = predecessors.get(current)
        if previous is None:
            return NoPath(source=source, destination=destination)
        if previous in visited:
            raise PredecessorCycleError(
                f"Predecessor chain from {destination.label} revisits {previous.label}"
            )
        visited.add(previous)
        reversed_nodes.append(previous)
        current = previous
    reversed_nodes.reverse()
    return ShortestPath(
        nodes=tuple(reversed_nodes),
        distance=int(distance) if distance is not None else None,
    )


__all__ = ["NoPath", "PathResult", "ShortestPath", "reconstruct_path"]
