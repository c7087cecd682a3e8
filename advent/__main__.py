"""Command-line entry point: run puzzles, list them, or benchmark the search."""

import argparse
import logging
import random
import sys
import time
from typing import List, Optional

from .app.registry import get_puzzle_info
from .app.runner import RunStatus, format_run, run_day
from .domain.heuristics import HEURISTICS
from .domain.maze import walk_problem
from .domain.path import path_cost, validate_path
from .domain.search import find_path
from .domain.types import SearchConfig
from .utils.grid_factory import add_random_walls, create_open_maze, create_preset_maze
from .utils.inputs import EXAMPLES, INPUTS, list_available

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(prog="advent", description="Grid search puzzle solvers")
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", parents=[common], help="Solve a puzzle")
    run.add_argument("day", type=int, help="Puzzle number")
    run.add_argument("--example", action="store_true", help="Use the example input(s)")
    run.add_argument("--part", type=int, choices=(1, 2), help="Only run one part")
    run.add_argument("--data-dir", type=str, help="Directory holding inputs/ and examples/")

    listing = commands.add_parser("list", parents=[common], help="List registered puzzles")
    listing.add_argument("--data-dir", type=str, help="Directory holding inputs/ and examples/")

    bench = commands.add_parser("bench", parents=[common], help="Time a search on a random maze")
    bench.add_argument("--size", type=int, default=101, help="Maze width and height")
    bench.add_argument("--density", type=float, default=0.2, help="Wall density (0.0 to 1.0)")
    bench.add_argument("--preset", choices=("empty", "sparse", "dense"),
                       help="Use a preset wall layout instead of --density")
    bench.add_argument("--seed", type=int, default=42, help="Random seed")
    bench.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan",
                       help="Frontier ordering estimate")
    bench.add_argument("--all-paths", action="store_true", help="Collect every optimal path")
    return parser


def cmd_run(args: argparse.Namespace) -> int:
    parts = (args.part,) if args.part else (1, 2)
    try:
        runs = run_day(args.day, example=args.example, parts=parts, data_dir=args.data_dir)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    failed = False
    for run in runs:
        print(format_run(run))
        if run.status == RunStatus.ERROR:
            failed = True
    return 1 if failed else 0


def cmd_list(args: argparse.Namespace) -> int:
    inputs = set(list_available(INPUTS, args.data_dir))
    examples = list_available(EXAMPLES, args.data_dir)

    for info in get_puzzle_info():
        name = f"{info['day']:02d}"
        has_input = "input" if name in inputs else "-"
        example_count = sum(1 for e in examples if e.split("-")[0] == name)
        print(f"Day {name}: {info['title']:<20} {has_input:<6} examples: {example_count}")
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    if args.preset:
        maze = create_preset_maze(args.size, args.size, args.preset, args.seed)
    else:
        maze = add_random_walls(create_open_maze(args.size, args.size), args.density,
                                random.Random(args.seed))

    config = SearchConfig(mode="all_paths" if args.all_paths else "single")
    logger.info(f"Benchmark maze {maze.width}x{maze.height} with {len(maze.walls)} walls")

    problem = walk_problem(maze, heuristic_id=args.heuristic)

    t0 = time.perf_counter()
    result = find_path(problem, config)
    elapsed_ms = (time.perf_counter() - t0) * 1000

    print(f"Maze: {maze.width}x{maze.height}, walls: {len(maze.walls)}, "
          f"mode: {config.mode}, heuristic: {args.heuristic}")
    print(f"Expanded: {result.nodes_expanded} nodes in {elapsed_ms:.1f}ms")
    if not result.success:
        print("No path")
        return 0

    print(f"Cost: {result.cost}, cells on optimal paths: {len(result.positions)}")
    # Re-walk the returned path independently of the search bookkeeping
    walkable = validate_path(result.path, maze.grid, maze.walls)
    if not walkable or path_cost(result.path, problem.expand) != result.cost:
        logger.error(f"Returned path does not match cost {result.cost}")
        print("Path check: FAILED")
        return 1
    print("Path check: ok")
    return 0


COMMANDS = {
    "run": cmd_run,
    "list": cmd_list,
    "bench": cmd_bench,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    try:
        return COMMANDS[args.command](args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
