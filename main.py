#!/usr/bin/env python3
"""
Puzzle solvers: maze sorting energy and virus pursuit.

Both commands read their puzzle from standard input up to the first empty
line and print the answer to standard output.
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from src.maze.board import Maze
from src.maze_solver.config import SearchConfig
from src.maze_solver.solver import AStarSolver
from src.pursuit.config import PursuitConfig
from src.pursuit.parser import graph_from_lines
from src.pursuit.solver import STRATEGIES, create_solver
from src.pursuit.virus import replay_cuts
from src.util.logger import logger, set_verbosity

log = logger.bind(component="cli")


def read_lines(stream: TextIO) -> List[str]:
    """Read lines until the first empty one or end of input."""
    lines = []
    for line in stream:
        line = line.rstrip("\r\n")
        if not line.strip():
            break
        lines.append(line)
    return lines


def run_maze(lines: List[str], args: argparse.Namespace) -> List[str]:
    """Solve the maze and return the output lines."""
    maze = Maze.from_lines(lines)
    config = SearchConfig(
        use_heuristic=not args.dijkstra,
        max_expansions=args.max_expansions,
        timeout_ms=args.timeout_ms,
    )
    result = AStarSolver(config).solve(maze)

    output = []
    if args.show_path and result.success:
        for state in result.path:
            output.append(state.render(maze.layout))
            output.append("")
    output.append(str(result.energy))
    return output


def run_pursuit(lines: Iterable[str], args: argparse.Namespace) -> List[str]:
    """Solve the pursuit puzzle and return the cuts, one per line."""
    config = PursuitConfig(start_node=args.start, strategy=args.strategy)
    graph = graph_from_lines(lines, config.max_nodes, config.max_edges)
    result = create_solver(config).solve(graph)

    if args.verify:
        replay = replay_cuts(graph, config.start_node, result.cuts)
        if replay.safe:
            log.info(f"Replay safe, virus trail: {' -> '.join(replay.trail)}")
        else:
            log.warning(f"Replay unsafe, virus trail: {' -> '.join(replay.trail)}")

    return result.cuts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Maze sorting and virus pursuit solvers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py maze < maze.txt               # Minimum energy
  python main.py maze --show-path < maze.txt   # Also print every step
  python main.py pursuit < edges.txt           # Cuts, one per line
  python main.py pursuit --strategy greedy --verify < edges.txt
        """,
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log solver progress at DEBUG level"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    maze = subparsers.add_parser("maze", help="Minimum energy to sort the maze")
    maze.add_argument(
        "--show-path", action="store_true", help="Print each state of the solution"
    )
    maze.add_argument(
        "--dijkstra", action="store_true", help="Search without the heuristic"
    )
    maze.add_argument(
        "--max-expansions", type=int, default=None, help="Expansion budget"
    )
    maze.add_argument(
        "--timeout-ms", type=float, default=None, help="Time budget in milliseconds"
    )

    pursuit = subparsers.add_parser("pursuit", help="Cuts that contain the virus")
    pursuit.add_argument("--start", default="a", help="Virus start node")
    pursuit.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default="backtracking",
        help="Cutting strategy",
    )
    pursuit.add_argument(
        "--verify", action="store_true", help="Replay the cuts against the virus"
    )
    return parser


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    set_verbosity(args.verbose)

    lines = read_lines(stdin)
    try:
        if args.command == "maze":
            output = run_maze(lines, args)
        else:
            output = run_pursuit(lines, args)
    except ValueError:
        log.exception(f"Invalid {args.command} input")
        raise

    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
