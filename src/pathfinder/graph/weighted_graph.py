"""Immutable weighted directed graph consumed by the shortest-path solver."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from pathfinder.errors import DuplicateEdgeError, InvalidNodeError

from .domain_types import Edge, Node, coerce_weight

logger = logging.getLogger(__name__)


class WeightedGraph:
    """Ordered node set plus directed edges with non-negative integer weights.

    The graph is read-only once built. Node order (and the per-node edge order)
    follows insertion order, which is what makes solver tie-breaking
    reproducible.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge] = ()):
        self._nodes: Dict[Node, None] = {}
        for node in nodes:
            if not isinstance(node, Node):
                raise TypeError(f"Graph nodes must be Node instances, got {node!r}")
            self._nodes.setdefault(node, None)

        self._adjacency: Dict[Node, Dict[Node, int]] = {node: {} for node in self._nodes}
        self._edges: List[Edge] = []
        for edge in edges:
            self._add_edge(edge)

    # ------------------------------------------------------------------ builders
    def _add_edge(self, edge: Edge) -> None:
        for endpoint in (edge.upstream, edge.downstream):
            if endpoint not in self._nodes:
                raise InvalidNodeError(
                    f"Edge {edge.upstream.label}->{edge.downstream.label} references "
                    f"node {endpoint!r} outside the graph"
                )
        outgoing = self._adjacency[edge.upstream]
        if edge.downstream in outgoing:
            raise DuplicateEdgeError(
                f"Duplicate edge {edge.upstream.label}->{edge.downstream.label}"
            )
        outgoing[edge.downstream] = edge.weight
        self._edges.append(edge)

    @classmethod
    def from_edge_list(
        cls,
        edges: Iterable[Tuple[str, str, object]],
        nodes: Optional[Iterable[str]] = None,
    ) -> "WeightedGraph":
        """Build a graph from ``(upstream, downstream, weight)`` label triples.

        Each distinct label becomes exactly one :class:`Node`. Labels listed in
        ``nodes`` come first (in that order) so isolated nodes can be declared.
        """
        by_label: Dict[str, Node] = {}

        def _node(label: object) -> Node:
            key = str(label)
            if key not in by_label:
                by_label[key] = Node(key)
            return by_label[key]

        for label in nodes or ():
            _node(label)
        built: List[Edge] = []
        for upstream, downstream, weight in edges:
            built.append(Edge(_node(upstream), _node(downstream), weight))
        return cls(by_label.values(), built)

    @classmethod
    def from_adjacency_matrix(
        cls, matrix: np.ndarray, labels: Optional[Sequence[str]] = None
    ) -> "WeightedGraph":
        """Build a graph from a dense square matrix where ``inf`` marks a missing edge."""
        array = np.asarray(matrix, dtype=np.float64)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {array.shape}")
        n_nodes = array.shape[0]
        if labels is None:
            labels = [str(idx) for idx in range(n_nodes)]
        if len(labels) != n_nodes:
            raise ValueError("labels must provide one entry per matrix row.")

        nodes = [Node(str(label)) for label in labels]
        edges: List[Edge] = []
        for u in range(n_nodes):
            for v in range(n_nodes):
                value = array[u, v]
                if value == np.inf:
                    continue
                edges.append(Edge(nodes[u], nodes[v], coerce_weight(float(value))))
        return cls(nodes, edges)

    def to_adjacency_matrix(self) -> Tuple[np.ndarray, List[Node]]:
        """Return ``(matrix, nodes)``; ``matrix[i, j]`` is the weight of nodes[i]->nodes[j]."""
        nodes = self.nodes
        index = {node: idx for idx, node in enumerate(nodes)}
        matrix = np.full((len(nodes), len(nodes)), np.inf)
        for edge in self._edges:
            matrix[index[edge.upstream], index[edge.downstream]] = float(edge.weight)
        return matrix, nodes

    # ---------------------------------------------------------------- properties
    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __repr__(self) -> str:
        return f"WeightedGraph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    # ------------------------------------------------------------------- lookup
    def has_node(self, node: Node) -> bool:
        return node in self._nodes

    def require_node(self, node: Node, role: str = "node") -> Node:
        """Return ``node`` or raise :class:`InvalidNodeError` naming its role."""
        if node not in self._nodes:
            raise InvalidNodeError(f"{role} {node!r} is not a member of the graph")
        return node

    def node_by_label(self, label: str) -> Node:
        """Return the first node carrying ``label``."""
        for node in self._nodes:
            if node.label == label:
                return node
        raise InvalidNodeError(f"No node labelled {label!r} in the graph")

    def neighbors(self, node: Node) -> List[Tuple[Node, int]]:
        """Outgoing ``(neighbor, weight)`` pairs in edge insertion order."""
        self.require_node(node)
        return list(self._adjacency[node].items())

    def weight(self, upstream: Node, downstream: Node) -> Optional[int]:
        """Weight of ``upstream->downstream`` or ``None`` when there is no such edge."""
        self.require_node(upstream)
        self.require_node(downstream)
        return self._adjacency[upstream].get(downstream)

    def path_weight(self, path: Sequence[Node]) -> int:
        """Sum the edge weights along consecutive nodes of ``path``."""
        total = 0
        for upstream, downstream in zip(path, path[1:]):
            weight = self.weight(upstream, downstream)
            if weight is None:
                raise ValueError(
                    f"No edge {upstream.label}->{downstream.label} along the given path"
                )
            total += weight
        return total

    def isolated_nodes(self) -> List[Node]:
        """Nodes with neither incoming nor outgoing edges."""
        touched = set()
        for edge in self._edges:
            touched.add(edge.upstream)
            touched.add(edge.downstream)
        return [node for node in self._nodes if node not in touched]

    def without_edge(self, upstream: Node, downstream: Node) -> "WeightedGraph":
        """Return a copy sharing the same nodes but lacking ``upstream->downstream``."""
        if self.weight(upstream, downstream) is None:
            raise ValueError(f"No edge {upstream.label}->{downstream.label} to remove")
        kept = [
            edge
            for edge in self._edges
            if not (edge.upstream is upstream and edge.downstream is downstream)
        ]
        logger.debug("Dropped edge %s->%s", upstream.label, downstream.label)
        return WeightedGraph(self._nodes, kept)


__all__ = ["WeightedGraph"]
