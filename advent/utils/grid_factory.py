"""Grid factory for creating synthetic mazes for benchmarks and property checks."""

import random
from dataclasses import replace
from typing import Iterable, List, Optional

from ..domain.maze import END, START, WALL, Maze
from ..domain.types import Coord


def create_open_maze(width: int, height: int, start: Optional[Coord] = None,
                     end: Optional[Coord] = None) -> Maze:
    """
    Create a maze with no walls.

    Args:
        width: Maze width (must be > 0)
        height: Maze height (must be > 0)
        start: Start position (top-left corner if None)
        end: End position (bottom-right corner if None)

    Returns:
        New Maze instance with every cell open

    Raises:
        ValueError: If width or height <= 0, or a marker is out of bounds
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")

    start = Coord(0, 0) if start is None else Coord(*start)
    end = Coord(width - 1, height - 1) if end is None else Coord(*end)

    for name, coord in (("Start", start), ("End", end)):
        if not (0 <= coord.x < width and 0 <= coord.y < height):
            raise ValueError(f"{name} position {coord} is out of bounds")

    return Maze(width=width, height=height, start=start, ends=(end,), walls=frozenset())


def add_walls(maze: Maze, coords: Iterable[Coord]) -> Maze:
    """Return a copy of the maze with extra walls; markers are never covered."""
    protected = {maze.start, *maze.ends}
    extra = {Coord(*c) for c in coords if maze.in_bounds(Coord(*c))} - protected
    return replace(maze, walls=maze.walls | extra)


def add_random_walls(maze: Maze, density: float, rng: Optional[random.Random] = None) -> Maze:
    """
    Add random walls to the maze.

    Args:
        maze: Maze to start from
        density: Wall density (0.0 to 1.0) over the currently open cells
        rng: Seeded generator for reproducible layouts (unseeded if None)

    Returns:
        New Maze with the extra walls
    """
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

    if rng is None:
        rng = random.Random()

    protected = {maze.start, *maze.ends}
    empty_coords = [c for c in maze.open_cells() if c not in protected]
    num_walls = min(int(maze.width * maze.height * density), len(empty_coords))

    return add_walls(maze, rng.sample(empty_coords, num_walls))


def enclose(maze: Maze, coord: Coord) -> Maze:
    """Surround a cell with walls on all eight sides."""
    x, y = coord
    ring = [
        Coord(x + dx, y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if dx or dy
    ]
    blocked = {c for c in ring if maze.in_bounds(c)}
    if blocked & {maze.start, *maze.ends}:
        raise ValueError(f"Cannot enclose {coord}: a marker is adjacent")
    return replace(maze, walls=maze.walls | blocked)


def create_preset_maze(width: int, height: int, preset: str,
                       seed: Optional[int] = None) -> Maze:
    """
    Create a preset maze configuration.

    Args:
        width: Maze width
        height: Maze height
        preset: Preset name ("empty", "sparse", "dense")
        seed: Random seed for reproducibility

    Returns:
        Maze with start in the top-left and end in the bottom-right corner
    """
    rng = random.Random(seed)
    maze = create_open_maze(width, height)

    if preset == "empty":
        return maze
    if preset == "sparse":
        return add_random_walls(maze, 0.15, rng)
    if preset == "dense":
        return add_random_walls(maze, 0.35, rng)
    raise ValueError(f"Unknown preset: {preset}")


def render_maze(maze: Maze) -> str:
    """Render a maze back to the text format accepted by parse_maze."""
    rows: List[str] = []
    for y in range(maze.height):
        row = []
        for x in range(maze.width):
            coord = Coord(x, y)
            if coord == maze.start:
                row.append(START)
            elif coord in maze.ends:
                row.append(END)
            elif coord in maze.walls:
                row.append(WALL)
            else:
                row.append(".")
        rows.append("".join(row))
    return "\n".join(rows) + "\n"

