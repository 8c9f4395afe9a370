from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import numpy as np
import pytest

from pathfinder.errors import InvalidWeightError, NegativeWeightError
from pathfinder.graph.graph_config import GraphConfig, load_graph
from pathfinder.graph.manhattan_grid import build_manhattan_grid, grid_config


def test_graph_config_yaml_roundtrip(tmp_path):
    yaml_text = textwrap.dedent(
        """
        version: test
        nodes: [a, b, c, lonely]
        edges:
          - {from: a, to: b, weight: 2}
          - [b, c, 3]
        """
    ).strip()
    config_path = tmp_path / "graph.yaml"
    config_path.write_text(yaml_text, encoding="utf-8")
    config = GraphConfig.from_yaml(config_path)
    assert config.version == "test"
    assert config.edges == [("a", "b", 2), ("b", "c", 3)]

    roundtrip_path = tmp_path / "out" / "roundtrip.yaml"
    config.to_yaml(roundtrip_path)
    roundtrip = GraphConfig.from_yaml(roundtrip_path)
    assert roundtrip == config


def test_isolated_nodes_are_logged(tmp_path, caplog):
    config = GraphConfig(edges=[("a", "b", 1)], nodes=["lonely"])
    with caplog.at_level(logging.WARNING, logger="pathfinder.graph.graph_config"):
        graph = config.build_graph()
    assert "lonely" in caplog.text
    assert len(graph) == 3


def test_undirected_config_mirrors_edges():
    config = GraphConfig(edges=[("a", "b", 4), ("b", "a", 1), ("b", "c", 2)], undirected=True)
    assert config.directed_edges() == [("a", "b", 4), ("b", "a", 1), ("b", "c", 2), ("c", "b", 2)]


@pytest.mark.parametrize(
    "entry",
    [
        "{from: a, to: b}",
        "[a, b]",
        "{from: '', to: b, weight: 1}",
    ],
)
def test_graph_config_rejects_malformed_edges(tmp_path, entry):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(f"edges:\n  - {entry}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        GraphConfig.from_yaml(config_path)


def test_graph_config_rejects_negative_weight(tmp_path):
    config_path = tmp_path / "neg.yaml"
    config_path.write_text("edges:\n  - [a, b, -2]\n", encoding="utf-8")
    with pytest.raises(NegativeWeightError):
        GraphConfig.from_yaml(config_path)


def test_graph_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GraphConfig.from_yaml(tmp_path / "missing.yaml")


def test_load_graph_from_csv(tmp_path):
    csv_path = tmp_path / "edges.csv"
    csv_path.write_text("upstream,downstream,weight\na,b,1\nb,c,4\n", encoding="utf-8")
    graph = load_graph(csv_path)
    a = graph.node_by_label("a")
    c = graph.node_by_label("c")
    b = graph.node_by_label("b")
    assert graph.path_weight([a, b, c]) == 5


def test_csv_requires_columns(tmp_path):
    csv_path = tmp_path / "edges.csv"
    csv_path.write_text("from,to,cost\na,b,1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        GraphConfig.from_csv(csv_path)


def test_integer_labels_keep_zero(tmp_path):
    config_path = tmp_path / "graph.yaml"
    config_path.write_text(
        textwrap.dedent(
            """
            nodes: [0, 1]
            edges:
              - [0, 1, 3]
            """
        ).strip(),
        encoding="utf-8",
    )
    config = GraphConfig.from_yaml(config_path)
    assert config.edges == [("0", "1", 3)]
    graph = config.build_graph()
    assert sorted(node.label for node in graph.nodes) == ["0", "1"]
    zero = graph.node_by_label("0")
    assert graph.weight(zero, graph.node_by_label("1")) == 3


def test_csv_reports_raw_non_numeric_weight(tmp_path):
    csv_path = tmp_path / "edges.csv"
    csv_path.write_text("upstream,downstream,weight\na,b,1\nb,c,x\n", encoding="utf-8")
    with pytest.raises(InvalidWeightError) as excinfo:
        GraphConfig.from_csv(csv_path)
    message = str(excinfo.value)
    assert "'x'" in message
    assert "nan" not in message


def test_load_graph_rejects_unknown_extension(tmp_path):
    with pytest.raises(ValueError):
        load_graph(tmp_path / "graph.json")


def test_manhattan_grid_layout():
    grid = build_manhattan_grid()
    assert [node.label for node in grid.graph.nodes] == list("abcdefghi")
    assert len(grid.graph.edges) == 11
    # East neighbour is listed before the south neighbour.
    assert [node.label for node, _ in grid.graph.neighbors(grid["a"])] == ["b", "d"]
    assert grid_config().version == "manhattan-3x3"


def test_shipped_grid_yaml_matches_builtin_grid():
    yaml_path = Path(__file__).resolve().parents[2] / "data" / "manhattan_grid.yaml"
    loaded = load_graph(yaml_path)
    builtin = build_manhattan_grid().graph
    loaded_matrix, loaded_nodes = loaded.to_adjacency_matrix()
    builtin_matrix, builtin_nodes = builtin.to_adjacency_matrix()
    assert [node.label for node in loaded_nodes] == [node.label for node in builtin_nodes]
    np.testing.assert_array_equal(loaded_matrix, builtin_matrix)
