"""CLI entry point for shortest-path queries over a weighted graph file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

import pandas as pd
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from pathfinder.errors import InvalidNodeError, PathfinderError
from pathfinder.graph.graph_config import load_graph
from pathfinder.graph.manhattan_grid import build_manhattan_grid
from pathfinder.graph.weighted_graph import WeightedGraph

from .shortest_path_solver import ShortestPathSolver, SolveResult
from .solver_config import SolverConfig

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["source", "destination", "reachable", "distance", "path"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    graph_group = parser.add_mutually_exclusive_group(required=True)
    graph_group.add_argument(
        "--graph",
        help="Graph file: YAML (edges list) or CSV with upstream,downstream,weight columns.",
    )
    graph_group.add_argument(
        "--demo-grid",
        action="store_true",
        help="Use the built-in 3x3 street grid (intersections a..i).",
    )
    parser.add_argument("--source", help="Label of the start node.")
    parser.add_argument("--destination", help="Label of the target node.")
    parser.add_argument(
        "--queries-csv",
        default=None,
        help="Batch mode: CSV with source,destination columns, one query per row.",
    )
    parser.add_argument(
        "--output-csv",
        default=None,
        help="Destination CSV for batch results (defaults to stdout table only).",
    )
    parser.add_argument(
        "--solver-config",
        default=None,
        help="Optional YAML with solver settings (frontier, record_trace).",
    )
    parser.add_argument(
        "--frontier",
        default=None,
        choices=["linear", "heap"],
        help="Override the frontier backend from the solver config.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity for the CLI logger.",
    )
    args = parser.parse_args(argv)
    if args.queries_csv is None and (args.source is None or args.destination is None):
        parser.error("either --queries-csv or both --source and --destination are required")
    return args


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def _load_solver_config(args: argparse.Namespace) -> SolverConfig:
    config = SolverConfig()
    if args.solver_config:
        config = SolverConfig.from_yaml(args.solver_config)
    if args.frontier:
        config = SolverConfig(frontier=args.frontier, record_trace=config.record_trace)
    return config


def _load_graph(args: argparse.Namespace) -> WeightedGraph:
    if args.demo_grid:
        return build_manhattan_grid().graph
    logger.info("Loading graph from %s", args.graph)
    return load_graph(args.graph)


def _result_row(result: SolveResult) -> Dict[str, object]:
    path = result.path
    return {
        "source": result.source.label,
        "destination": result.destination.label,
        "reachable": bool(path),
        "distance": result.distance if path else None,
        "path": " ".join(path.labels) if path else "",
    }


def _read_queries(path: str | Path) -> List[tuple[str, str]]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [col for col in ("source", "destination") if col not in df.columns]
    if missing:
        raise ValueError(f"Queries CSV must include columns: {', '.join(missing)}")
    queries: List[tuple[str, str]] = []
    for idx, row in enumerate(df.itertuples(index=False)):
        source, destination = str(row.source).strip(), str(row.destination).strip()
        if not source or not destination:
            raise ValueError(f"Queries CSV row #{idx} has an empty source or destination")
        queries.append((source, destination))
    return queries


def solve_queries(
    solver: ShortestPathSolver,
    queries: Iterable[tuple[str, str]],
    progress: Progress | None = None,
) -> pd.DataFrame:
    """Solve every ``(source, destination)`` label pair and tabulate the outcomes."""
    queries = list(queries)
    task_id = progress.add_task("Solving queries", total=len(queries)) if progress else None
    rows = []
    for source_label, destination_label in queries:
        source = solver.graph.node_by_label(source_label)
        destination = solver.graph.node_by_label(destination_label)
        rows.append(_result_row(solver.solve(source, destination)))
        if progress is not None:
            progress.advance(task_id)
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def _print_single(console: Console, result: SolveResult) -> None:
    path = result.path
    if not path:
        console.print(str(path))
        return
    table = Table(title=f"{result.source.label} -> {result.destination.label}")
    table.add_column("step", justify="right")
    table.add_column("node")
    table.add_column("distance", justify="right")
    for idx, node in enumerate(path.nodes):
        table.add_row(str(idx), node.label, str(result.distances.get(node)))
    console.print(table)
    console.print(f"Total distance: {result.distance}")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    try:
        graph = _load_graph(args)
        solver = ShortestPathSolver(graph, _load_solver_config(args))
    except (PathfinderError, ValueError, TypeError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc
    console = Console()

    if args.queries_csv is None:
        try:
            source = graph.node_by_label(args.source)
            destination = graph.node_by_label(args.destination)
        except InvalidNodeError as exc:
            raise SystemExit(str(exc)) from exc
        result = solver.solve(source, destination)
        _print_single(console, result)
        return

    progress_console = Console(stderr=True)
    progress = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(bar_width=None),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=progress_console,
        transient=True,
        disable=not progress_console.is_terminal,
    )
    try:
        queries = _read_queries(args.queries_csv)
        with progress:
            dataframe = solve_queries(solver, queries, progress)
    except (InvalidNodeError, ValueError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc

    unreachable = int((~dataframe["reachable"]).sum()) if not dataframe.empty else 0
    logger.info("Solved %d queries (%d unreachable)", len(dataframe), unreachable)
    if args.output_csv:
        output_path = Path(args.output_csv)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        dataframe.to_csv(output_path, index=False)
        logger.info("Wrote results to %s", output_path)
    else:
        console.print(dataframe.to_string(index=False))


if __name__ == "__main__":
    main()
