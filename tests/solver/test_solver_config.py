from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pathfinder.solver.solver_config import SolverConfig


def test_defaults():
    config = SolverConfig()
    assert config.frontier == "linear"
    assert config.record_trace is False


def test_shipped_solver_yaml():
    config = SolverConfig.from_yaml(Path(__file__).resolve().parents[2] / "data" / "solver.yaml")
    assert config.frontier == "heap"


def test_from_mapping_normalizes_and_warns_on_unknown_keys(caplog):
    with caplog.at_level(logging.WARNING, logger="pathfinder.solver.solver_config"):
        config = SolverConfig.from_mapping({"frontier": " HEAP ", "max_nodes": 10})
    assert config.frontier == "heap"
    assert "max_nodes" in caplog.text


def test_rejects_unknown_frontier():
    with pytest.raises(ValueError):
        SolverConfig(frontier="fibonacci")


def test_rejects_non_boolean_trace_flag(tmp_path):
    config_path = tmp_path / "solver.yaml"
    config_path.write_text("record_trace: sometimes\n", encoding="utf-8")
    with pytest.raises(TypeError):
        SolverConfig.from_yaml(config_path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SolverConfig.from_yaml(tmp_path / "absent.yaml")
