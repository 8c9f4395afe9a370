"""Back-pointers recording how each node was last reached."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from pathfinder.graph.domain_types import Node


class PredecessorTable:
    """Partial node -> node mapping; the source and unreached nodes have no entry."""

    def __init__(self) -> None:
        self._predecessors: Dict[Node, Node] = {}

    def get(self, node: Node) -> Optional[Node]:
        return self._predecessors.get(node)

    def set(self, node: Node, predecessor: Node) -> None:
        self._predecessors[node] = predecessor

    def __contains__(self, node: object) -> bool:
        return node in self._predecessors

    def __len__(self) -> int:
        return len(self._predecessors)

    def items(self) -> Iterator[Tuple[Node, Node]]:
        return iter(self._predecessors.items())

    def as_dict(self) -> Dict[Node, Node]:
        return dict(self._predecessors)


__all__ = ["PredecessorTable"]
