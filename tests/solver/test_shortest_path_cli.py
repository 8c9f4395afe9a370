from __future__ import annotations

import textwrap

import pandas as pd
import pytest

from pathfinder.solver.shortest_path_cli import main as solve_main
from pathfinder.solver.shortest_path_cli import solve_queries
from pathfinder.solver.shortest_path_solver import ShortestPathSolver
from pathfinder.graph.manhattan_grid import build_manhattan_grid


def test_single_query_on_demo_grid(capsys):
    solve_main(["--demo-grid", "--source", "a", "--destination", "i", "--log-level", "ERROR"])
    out = capsys.readouterr().out
    assert "Total distance: 6" in out


def test_single_query_unreachable(tmp_path, capsys):
    graph_yaml = tmp_path / "graph.yaml"
    graph_yaml.write_text(
        textwrap.dedent(
            """
            nodes: [a, b, island]
            edges:
              - [a, b, 3]
            """
        ).strip(),
        encoding="utf-8",
    )
    solve_main(["--graph", str(graph_yaml), "--source", "a", "--destination", "island"])
    out = capsys.readouterr().out
    assert "no path from a to island" in out


def test_unknown_node_exits():
    with pytest.raises(SystemExit) as excinfo:
        solve_main(["--demo-grid", "--source", "a", "--destination", "zz"])
    assert "zz" in str(excinfo.value)


def test_missing_endpoints_rejected():
    with pytest.raises(SystemExit):
        solve_main(["--demo-grid", "--source", "a"])


def test_batch_queries_write_csv(tmp_path):
    edges_csv = tmp_path / "edges.csv"
    edges_csv.write_text(
        "upstream,downstream,weight\na,b,2\nb,c,2\na,c,5\nc,d,1\n", encoding="utf-8"
    )
    queries_csv = tmp_path / "queries.csv"
    queries_csv.write_text("source,destination\na,c\na,d\nd,a\n", encoding="utf-8")
    solver_yaml = tmp_path / "solver.yaml"
    solver_yaml.write_text("frontier: heap\n", encoding="utf-8")
    output_csv = tmp_path / "out" / "results.csv"

    solve_main(
        [
            "--graph",
            str(edges_csv),
            "--queries-csv",
            str(queries_csv),
            "--solver-config",
            str(solver_yaml),
            "--output-csv",
            str(output_csv),
            "--log-level",
            "ERROR",
        ]
    )

    results = pd.read_csv(output_csv)
    assert list(results["path"].fillna("")) == ["a b c", "a b c d", ""]
    assert list(results["reachable"]) == [True, True, False]
    assert results.loc[0, "distance"] == 4
    assert results.loc[1, "distance"] == 5


def test_solve_queries_without_progress():
    grid = build_manhattan_grid()
    frame = solve_queries(ShortestPathSolver(grid.graph), [("a", "i"), ("i", "a")])
    assert list(frame["reachable"]) == [True, False]
    assert frame.loc[0, "distance"] == 6


def test_missing_queries_csv_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        solve_main(
            [
                "--demo-grid",
                "--queries-csv",
                str(tmp_path / "absent.csv"),
                "--log-level",
                "ERROR",
            ]
        )
    assert "absent.csv" in str(excinfo.value)


def test_blank_query_cell_is_rejected_by_row(tmp_path):
    queries_csv = tmp_path / "queries.csv"
    queries_csv.write_text("source,destination\na,i\na,\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        solve_main(["--demo-grid", "--queries-csv", str(queries_csv), "--log-level", "ERROR"])
    message = str(excinfo.value)
    assert "row #1" in message
    assert "nan" not in message
