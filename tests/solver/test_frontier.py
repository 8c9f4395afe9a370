from __future__ import annotations

import pytest

from pathfinder.graph.domain_types import Node
from pathfinder.solver.distance_table import INFINITY, DistanceTable
from pathfinder.solver.frontier import HeapFrontier, LinearFrontier, make_frontier


def _nodes(*labels: str) -> list[Node]:
    return [Node(label) for label in labels]


@pytest.mark.parametrize("frontier_cls", [LinearFrontier, HeapFrontier])
def test_extract_minimum_prefers_smallest_then_insertion_order(frontier_cls):
    a, b, c, d = _nodes("a", "b", "c", "d")
    frontier = frontier_cls([a, b, c, d])
    distances = DistanceTable()
    for node, distance in ((c, 4), (b, 2), (d, 2)):
        distances.set(node, distance)
        frontier.update(node, distance)

    assert frontier.extract_minimum(distances) is b
    frontier.remove(b)
    assert frontier.extract_minimum(distances) is d
    frontier.remove(d)
    assert frontier.extract_minimum(distances) is c
    frontier.remove(c)
    # Only the unreached node is left.
    assert frontier.extract_minimum(distances) is a
    frontier.remove(a)
    assert frontier.extract_minimum(distances) is None
    assert frontier.is_empty()


@pytest.mark.parametrize("kind", ["linear", "heap"])
def test_remove_is_idempotent(kind):
    a, b = _nodes("a", "b")
    frontier = make_frontier(kind, [a, b])
    frontier.remove(a)
    frontier.remove(a)
    frontier.remove(Node("elsewhere"))
    assert len(frontier) == 1
    assert a not in frontier and b in frontier


def test_heap_frontier_skips_stale_entries():
    a, b = _nodes("a", "b")
    frontier = HeapFrontier([a, b])
    distances = DistanceTable()
    distances.set(a, 9)
    frontier.update(a, 9)
    distances.set(b, 5)
    frontier.update(b, 5)
    distances.set(a, 3)
    frontier.update(a, 3)

    assert frontier.extract_minimum(distances) is a
    frontier.remove(a)
    assert frontier.extract_minimum(distances) is b


def test_all_infinite_members_still_extracted():
    a, b = _nodes("a", "b")
    frontier = LinearFrontier([a, b])
    distances = DistanceTable()
    assert distances.get(b) == INFINITY
    assert frontier.extract_minimum(distances) is a


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        make_frontier("fibonacci", [])
