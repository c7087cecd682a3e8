"""Maze parsing and obstacle queries for grid searches."""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Optional, Tuple

from ..errors import MalformedInputError
from .heuristics import HeuristicId, toward
from .neighbors import get_open_neighbors
from .types import Coord, Grid, SearchProblem

WALL = "#"
START = "S"
END = "E"


@dataclass(frozen=True)
class Maze:
    """
    Parsed character maze.

    Attributes:
        width: Number of columns
        height: Number of rows
        start: Position of the single ``S`` marker
        ends: Positions of every ``E`` marker, in reading order
        walls: Impassable cells; never mutated during a search
    """
    width: int
    height: int
    start: Coord
    ends: Tuple[Coord, ...]
    walls: FrozenSet[Coord]

    @property
    def end(self) -> Coord:
        """The first end marker; the only one for single-goal mazes."""
        return self.ends[0]

    @property
    def grid(self) -> Grid:
        return Grid(width=self.width, height=self.height)

    def is_wall(self, coord: Coord) -> bool:
        """Walls and anything outside the maze are impassable."""
        return coord in self.walls or not self.in_bounds(coord)

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def open_cells(self) -> Iterator[Coord]:
        """Every passable cell in reading order."""
        for y in range(self.height):
            for x in range(self.width):
                coord = Coord(x, y)
                if coord not in self.walls:
                    yield coord


def parse_maze(text: str) -> Maze:
    """
    Parse a rectangular character grid into a Maze.

    ``#`` is a wall, ``S`` the start and ``E`` an end; any other character
    is open floor.

    Raises:
        MalformedInputError: If there is no start, no end, more than one
            start, or rows of inconsistent length
    """
    lines = text.strip("\n").splitlines()
    if not lines or not lines[0]:
        raise MalformedInputError("Empty maze input")

    width = len(lines[0])
    start: Optional[Coord] = None
    ends = []
    walls = set()

    for y, line in enumerate(lines):
        if len(line) != width:
            raise MalformedInputError(f"Inconsistent row length (expected {width})", line)

        for x, c in enumerate(line):
            coord = Coord(x, y)
            if c == WALL:
                walls.add(coord)
            elif c == START:
                if start is not None:
                    raise MalformedInputError("More than one start position S", line)
                start = coord
            elif c == END:
                ends.append(coord)

    if start is None:
        raise MalformedInputError("Did not find starting position S")
    if not ends:
        raise MalformedInputError("Did not find end position E")

    return Maze(
        width=width,
        height=len(lines),
        start=start,
        ends=tuple(ends),
        walls=frozenset(walls),
    )


def walk_problem(maze: Maze, start: Optional[Coord] = None, goal: Optional[Coord] = None,
                 heuristic_id: HeuristicId = "manhattan") -> SearchProblem[Coord]:
    """
    4-directional unit-cost search over the maze's open cells.
    Defaults to the maze's own start and end markers.
    """
    start = maze.start if start is None else start
    goal = maze.end if goal is None else goal
    grid = maze.grid

    return SearchProblem(
        start=start,
        expand=lambda coord: get_open_neighbors(coord, grid, maze.walls),
        is_goal=lambda coord: coord == goal,
        heuristic=toward(goal, heuristic_id),
    )
