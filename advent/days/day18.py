"""Day 18: RAM Run - shortest walk across a grid as bytes fall and corrupt it."""

import logging
from typing import List, Optional

from ..app.puzzle import Puzzle
from ..domain.heuristics import toward
from ..domain.neighbors import get_open_neighbors
from ..domain.search import lowest_cost
from ..domain.types import Coord, Grid, SearchProblem
from ..errors import MalformedInputError

logger = logging.getLogger(__name__)

MEMORY_SIZE = 71
FALLEN_BYTES = 1024


def parse_bytes(text: str) -> List[Coord]:
    """One ``x,y`` pair per line."""
    coords = []
    for line in text.strip().splitlines():
        parts = line.split(",")
        if len(parts) != 2:
            raise MalformedInputError("Did not find 2 numbers", line)
        try:
            coords.append(Coord(int(parts[0]), int(parts[1])))
        except ValueError:
            raise MalformedInputError("Failed to parse ints", line) from None
    return coords


def exit_steps(grid: Grid, corrupted: List[Coord]) -> Optional[int]:
    """Minimum steps from the top-left to the bottom-right corner, or None."""
    walls = frozenset(corrupted)
    start, end = grid.small_corner, grid.large_corner
    if start in walls or end in walls:
        return None

    problem = SearchProblem(
        start=start,
        expand=lambda coord: get_open_neighbors(coord, grid, walls),
        is_goal=lambda coord: coord == end,
        heuristic=toward(end),
    )
    return lowest_cost(problem)


def part_one(text: str, size: int = MEMORY_SIZE, fallen: int = FALLEN_BYTES) -> Optional[int]:
    """Steps to the exit after the first ``fallen`` bytes have landed."""
    corrupted = parse_bytes(text)
    return exit_steps(Grid(width=size, height=size), corrupted[:fallen])


def part_two(text: str, size: int = MEMORY_SIZE, fallen: int = FALLEN_BYTES) -> Optional[str]:
    """
    Coordinates of the first byte that cuts off the exit, as ``x,y``.

    Reachability is monotone in the number of fallen bytes, so the cut-off
    count is found by binary search starting from ``fallen``.
    """
    corrupted = parse_bytes(text)
    grid = Grid(width=size, height=size)

    lo = min(fallen, len(corrupted))
    if exit_steps(grid, corrupted[:lo]) is None:
        lo = 0
    hi = len(corrupted)
    if exit_steps(grid, corrupted[:hi]) is not None:
        return None

    # Invariant: reachable with lo bytes, unreachable with hi bytes
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if exit_steps(grid, corrupted[:mid]) is None:
            hi = mid
        else:
            lo = mid

    blocker = corrupted[hi - 1]
    logger.debug(f"Exit cut off after {hi} bytes by {blocker}")
    return str(blocker)


PUZZLE = Puzzle(18, "RAM Run", part_one, part_two,
                example_options={"size": 7, "fallen": 12})
