from __future__ import annotations

import argparse
import logging

from pathfinder.graph.manhattan_grid import build_manhattan_grid
from pathfinder.solver.shortest_path_solver import ShortestPathSolver
from pathfinder.solver.solver_config import SolverConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the street-grid shortest path smoke test.")
    parser.add_argument("--source", default="a")
    parser.add_argument("--destination", default="i")
    parser.add_argument("--frontier", default="linear", choices=["linear", "heap"])
    parser.add_argument(
        "--close-block",
        nargs=2,
        metavar=("FROM", "TO"),
        help="Remove one block (e.g. g h) before solving",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    grid = build_manhattan_grid()
    graph = grid.graph
    if args.close_block:
        upstream, downstream = args.close_block
        logging.info("Closing block %s -> %s", upstream, downstream)
        graph = graph.without_edge(grid[upstream], grid[downstream])

    solver = ShortestPathSolver(graph, SolverConfig(frontier=args.frontier, record_trace=True))
    result = solver.solve(grid[args.source], grid[args.destination])

    print("=== Street Grid Shortest Path ===")
    print(f"Frontier backend: {args.frontier}")
    print(f"Iterations: {result.iterations}")
    print(f"Finalized: {' '.join(node.label for node in result.finalized)}")
    print(f"Relaxations: {len(result.trace)}")
    print("")
    if result.path:
        print(f"Shortest path: {result.path}")
        print(f"Total distance: {result.distance}")
    else:
        print(str(result.path))


if __name__ == "__main__":
    main()
