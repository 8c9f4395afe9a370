"""Single-source shortest paths over a :class:`WeightedGraph` (Dijkstra).

A solve is a small state machine owned by :class:`SolveRun`::

    INITIALIZING -> RELAXING -> SELECTING_NEXT -> RELAXING | TERMINATED

Each iteration relaxes the outgoing edges of the current node, finalizes it by
removing it from the frontier, then either stops (destination finalized or
frontier empty) or extracts the next current node. The distance table, the
predecessor table and the frontier belong to the run and are only written by
it; they are consistent at every iteration boundary, so a caller may drive the
run with :meth:`SolveRun.step` and stop between iterations.

Edge weights are non-negative (enforced by the graph), which is what makes
finalizing a node the moment it becomes current sound.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

import pandas as pd

from pathfinder.errors import SolverStateError
from pathfinder.graph.domain_types import Node
from pathfinder.graph.weighted_graph import WeightedGraph

from .distance_table import INFINITY, DistanceTable
from .frontier import Frontier, make_frontier
from .path_reconstructor import NoPath, PathResult, reconstruct_path
from .predecessor_table import PredecessorTable
from .solver_config import SolverConfig

logger = logging.getLogger(__name__)


class SolverState(enum.Enum):
    INITIALIZING = "initializing"
    RELAXING = "relaxing"
    SELECTING_NEXT = "selecting_next"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class RelaxationEvent:
    """One successful relaxation: ``node`` dropped from ``previous`` to ``distance``."""

    iteration: int
    node: Node
    predecessor: Node
    previous: float
    distance: float


@dataclass
class SolveResult:
    """Read-only artifacts of a finished run."""

    graph: WeightedGraph
    source: Node
    destination: Optional[Node]
    distances: DistanceTable
    predecessors: PredecessorTable
    finalized: List[Node]
    iterations: int
    trace: List[RelaxationEvent] = field(default_factory=list)
    finalized_set: FrozenSet[Node] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.finalized_set = frozenset(self.finalized)

    # ------------------------------------------------------------ destination
    @property
    def path(self) -> PathResult:
        if self.destination is None:
            raise SolverStateError("Run had no destination; use path_to(node) instead")
        return self.path_to(self.destination)

    @property
    def distance(self) -> float:
        if self.destination is None:
            raise SolverStateError("Run had no destination; use distance_to(node) instead")
        return self.distance_to(self.destination)

    @property
    def reachable(self) -> bool:
        return self.distance != INFINITY

    # ------------------------------------------------------------------ nodes
    def distance_to(self, node: Node) -> float:
        self.graph.require_node(node)
        return self.distances.get(node)

    def path_to(self, node: Node) -> PathResult:
        self.graph.require_node(node)
        distance = self.distances.get(node)
        if distance == INFINITY:
            return NoPath(source=self.source, destination=node)
        if node not in self.finalized_set:
            return NoPath(source=self.source, destination=node, reason="not finalized")
        return reconstruct_path(self.predecessors, self.source, node, distance=int(distance))

    def next_hops(self) -> Dict[Node, Node]:
        """First hop from the source towards every finalized, reachable node."""
        hops: Dict[Node, Node] = {}
        for node in self.finalized:
            if node is self.source:
                continue
            path = self.path_to(node)
            if path:
                hops[node] = path.nodes[1]
        return hops

    def to_frame(self) -> pd.DataFrame:
        rows = []
        for node in self.graph.nodes:
            predecessor = self.predecessors.get(node)
            rows.append(
                {
                    "node": node.label,
                    "distance": self.distances.get(node),
                    "predecessor": predecessor.label if predecessor is not None else None,
                    "finalized": node in self.finalized_set,
                }
            )
        return pd.DataFrame(rows, columns=["node", "distance", "predecessor", "finalized"])


class SolveRun:
    """One single-use execution of the shortest-path state machine."""

    def __init__(
        self,
        graph: WeightedGraph,
        source: Node,
        destination: Optional[Node] = None,
        *,
        frontier: str = "linear",
        record_trace: bool = False,
    ) -> None:
        self.graph = graph
        self.source = graph.require_node(source, "source")
        self.destination = (
            graph.require_node(destination, "destination") if destination is not None else None
        )
        self.record_trace = record_trace
        self.state = SolverState.INITIALIZING
        self.distances = DistanceTable()
        self.predecessors = PredecessorTable()
        self.frontier: Frontier = make_frontier(frontier, graph.nodes)
        self.finalized: List[Node] = []
        self.trace: List[RelaxationEvent] = []
        self.iterations = 0
        self.current: Optional[Node] = None
        self._initialize()

    # ------------------------------------------------------------------ states
    def _initialize(self) -> None:
        self.distances.set(self.source, 0)
        self.frontier.update(self.source, 0)
        self.current = self.source
        self.state = SolverState.RELAXING

    def _relax_neighbors(self, current: Node) -> None:
        current_distance = self.distances.get(current)
        for neighbor, weight in self.graph.neighbors(current):
            if neighbor not in self.frontier:
                continue
            candidate = current_distance + weight
            previous = self.distances.get(neighbor)
            if candidate < previous:
                self.distances.set(neighbor, candidate)
                self.predecessors.set(neighbor, current)
                self.frontier.update(neighbor, candidate)
                if self.record_trace:
                    self.trace.append(
                        RelaxationEvent(
                            iteration=self.iterations,
                            node=neighbor,
                            predecessor=current,
                            previous=previous,
                            distance=candidate,
                        )
                    )

    def _finalize(self, current: Node) -> None:
        self.frontier.remove(current)
        self.finalized.append(current)

    def _terminate(self, reason: str) -> None:
        self.state = SolverState.TERMINATED
        self.current = None
        logger.debug(
            "Solve from %s terminated after %d iteration(s): %s",
            self.source.label,
            self.iterations,
            reason,
        )

    # --------------------------------------------------------------------- API
    @property
    def done(self) -> bool:
        return self.state is SolverState.TERMINATED

    def step(self) -> bool:
        """Run one iteration. Returns ``False`` once the run has terminated."""
        if self.state is SolverState.TERMINATED:
            raise SolverStateError("Solve run already terminated; start a new run")
        current = self.current
        self._relax_neighbors(current)
        self._finalize(current)
        self.iterations += 1

        if current is self.destination:
            self._terminate("destination finalized")
            return False
        self.state = SolverState.SELECTING_NEXT
        next_node = self.frontier.extract_minimum(self.distances)
        if next_node is None:
            self._terminate("frontier exhausted")
            return False
        self.current = next_node
        self.state = SolverState.RELAXING
        return True

    def run(self) -> SolveResult:
        while self.step():
            pass
        return self.result()

    def result(self) -> SolveResult:
        if self.state is not SolverState.TERMINATED:
            raise SolverStateError("Solve run has not terminated yet")
        return SolveResult(
            graph=self.graph,
            source=self.source,
            destination=self.destination,
            distances=self.distances,
            predecessors=self.predecessors,
            finalized=list(self.finalized),
            iterations=self.iterations,
            trace=list(self.trace),
        )


class ShortestPathSolver:
    """Entry point: validates endpoints and runs a fresh :class:`SolveRun` per call."""

    def __init__(
        self,
        graph: WeightedGraph,
        config: Optional[SolverConfig] = None,
    ) -> None:
        self.graph = graph
        self.config = config or SolverConfig()

    def start(self, source: Node, destination: Optional[Node] = None) -> SolveRun:
        return SolveRun(
            self.graph,
            source,
            destination,
            frontier=self.config.frontier,
            record_trace=self.config.record_trace,
        )

    def solve(self, source: Node, destination: Node) -> SolveResult:
        if destination is None:
            raise ValueError("destination is required; use solve_all() for a full tree")
        logger.debug(
            "Solving %s -> %s over %r with %s frontier",
            source.label,
            destination.label,
            self.graph,
            self.config.frontier,
        )
        result = self.start(source, destination).run()
        logger.debug(
            "Distance %s -> %s: %s", source.label, destination.label, result.distance
        )
        return result

    def solve_all(self, source: Node) -> SolveResult:
        """Run until the frontier is exhausted, yielding the full shortest-path tree."""
        return self.start(source).run()


def shortest_path(
    graph: WeightedGraph,
    source: Node,
    destination: Node,
    *,
    frontier: str = "linear",
) -> PathResult:
    """Convenience wrapper returning only the path (or :class:`NoPath`)."""
    solver = ShortestPathSolver(graph, SolverConfig(frontier=frontier))
    return solver.solve(source, destination).path


__all__ = [
    "RelaxationEvent",
    "ShortestPathSolver",
    "SolveResult",
    "SolveRun",
    "SolverState",
    "shortest_path",
]
