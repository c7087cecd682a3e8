"""Day 10: Hoof It - hiking trails that climb one height step at a time."""

from collections import Counter
from typing import Optional

from ..app.puzzle import Puzzle
from ..domain.types import Coord, Grid
from ..errors import MalformedInputError

TRAILHEAD = 0
SUMMIT = 9


def _height(c: str) -> Optional[int]:
    if c == ".":
        return None
    if not c.isdigit():
        raise MalformedInputError("Unexpected character in height map", c)
    return int(c)


def parse_heights(text: str) -> Grid[Optional[int]]:
    """Height map; ``.`` marks impassable cells."""
    return Grid.from_text(text, _height)


def summit_counts(grid: Grid[Optional[int]], trailhead: Coord) -> Counter:
    """
    Number of distinct trails from a trailhead to each reachable summit.

    Positions are advanced one height level at a time; the counter carries how
    many trails arrive at each position.
    """
    pending = Counter({trailhead: 1})
    for height in range(TRAILHEAD + 1, SUMMIT + 1):
        reached: Counter = Counter()
        for position, trails in pending.items():
            for neighbor in grid.neighbors(position):
                if grid.get(neighbor) == height:
                    reached[neighbor] += trails
        pending = reached
    return pending


def part_one(text: str) -> int:
    """Sum of trailhead scores: distinct summits reachable from each trailhead."""
    grid = parse_heights(text)
    return sum(len(summit_counts(grid, t)) for t in grid.positions_of(TRAILHEAD))


def part_two(text: str) -> int:
    """Sum of trailhead ratings: distinct trails from each trailhead."""
    grid = parse_heights(text)
    return sum(
        sum(summit_counts(grid, t).values())
        for t in grid.positions_of(TRAILHEAD)
    )


PUZZLE = Puzzle(10, "Hoof It", part_one, part_two)
