"""Day 20: Race Condition - count wall-phasing cheats that save enough time."""

from typing import Dict, Optional, Tuple

import numpy as np

from ..app.puzzle import Puzzle
from ..domain.maze import Maze, parse_maze, walk_problem
from ..domain.neighbors import manhattan_offsets
from ..domain.search import cost_map
from ..domain.types import Coord

DEFAULT_THRESHOLD = 100
SHORT_CHEAT = 2
LONG_CHEAT = 20

# Marks cells not on the track
UNREACHED = -1


def distance_array(maze: Maze, distances: Dict[Coord, int]) -> np.ndarray:
    """Row-major array of distances, UNREACHED for walls and isolated cells."""
    array = np.full((maze.height, maze.width), UNREACHED, dtype=np.int64)
    for (x, y), distance in distances.items():
        array[y, x] = distance
    return array


def _window(size: int, delta: int) -> Tuple[slice, slice]:
    """Source and destination slices pairing index i with i + delta."""
    if delta >= 0:
        return slice(0, size - delta), slice(delta, size)
    return slice(-delta, size), slice(0, size + delta)


def count_cheats(text: str, max_cheat: int, threshold: int) -> Optional[int]:
    """
    Count cheats of Manhattan length up to ``max_cheat`` saving ``threshold``.

    A cheat from track cell a to track cell b at distance d finishes the race
    in ``from_start[a] + d + from_end[b]``; it counts when that is at most the
    honest time minus ``threshold``. Each offset is checked for every cell at
    once with array slicing.

    Raises:
        ValueError: If threshold is below 1
    """
    if threshold < 1:
        raise ValueError(f"Threshold must be at least 1, got {threshold}")

    maze = parse_maze(text)
    from_start = cost_map(walk_problem(maze))
    from_end = cost_map(walk_problem(maze, start=maze.end, goal=maze.start))

    honest = from_start.get(maze.end)
    if honest is None:
        return None
    limit = honest - threshold

    start_dist = distance_array(maze, from_start)
    end_dist = distance_array(maze, from_end)

    count = 0
    for dx, dy, length in manhattan_offsets(max_cheat):
        if abs(dx) >= maze.width or abs(dy) >= maze.height:
            continue
        src_x, dst_x = _window(maze.width, dx)
        src_y, dst_y = _window(maze.height, dy)

        src = start_dist[src_y, src_x]
        dst = end_dist[dst_y, dst_x]
        saving = (src >= 0) & (dst >= 0) & (src + length + dst <= limit)
        count += int(np.count_nonzero(saving))

    return count


def part_one(text: str, threshold: int = DEFAULT_THRESHOLD) -> Optional[int]:
    """Two-picosecond cheats saving at least ``threshold``."""
    return count_cheats(text, SHORT_CHEAT, threshold)


def part_two(text: str, threshold: int = DEFAULT_THRESHOLD) -> Optional[int]:
    """Cheats of up to twenty picoseconds saving at least ``threshold``."""
    return count_cheats(text, LONG_CHEAT, threshold)


PUZZLE = Puzzle(20, "Race Condition", part_one, part_two,
                example_options={"threshold": 50})
