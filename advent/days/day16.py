"""Day 16: Reindeer Maze - lowest score path where turning costs 1000."""

import logging
from typing import List, NamedTuple, Optional, Tuple

from ..app.puzzle import Puzzle
from ..domain.maze import Maze, parse_maze
from ..domain.path import count_turns
from ..domain.search import find_path
from ..domain.types import Coord, Direction, SearchConfig, SearchProblem

logger = logging.getLogger(__name__)

STEP_COST = 1
TURN_COST = 1000

# The reindeer always starts facing east
START_FACING = Direction.RIGHT


class Reindeer(NamedTuple):
    """Search state: position plus facing. Same cell, other facing = other state."""
    pos: Coord
    facing: Direction

    def step(self) -> "Reindeer":
        return Reindeer(self.pos.step_in(self.facing), self.facing)

    def turn_left(self) -> "Reindeer":
        return Reindeer(self.pos, self.facing.turn_left())

    def turn_right(self) -> "Reindeer":
        return Reindeer(self.pos, self.facing.turn_right())


def moves(state: Reindeer) -> List[Tuple[Reindeer, int]]:
    """
    Straight step, or a compound turn-then-step to either side.
    Pure rotations are never offered as states of their own.
    """
    return [
        (state.step(), STEP_COST),
        (state.turn_left().step(), TURN_COST + STEP_COST),
        (state.turn_right().step(), TURN_COST + STEP_COST),
    ]


def reindeer_problem(maze: Maze) -> SearchProblem[Reindeer]:
    return SearchProblem(
        start=Reindeer(maze.start, START_FACING),
        expand=moves,
        is_goal=lambda state: state.pos in maze.ends,
        is_blocked=lambda state: maze.is_wall(state.pos),
        position=lambda state: state.pos,
    )


def part_one(text: str) -> Optional[int]:
    """Lowest score a reindeer could possibly get."""
    result = find_path(reindeer_problem(parse_maze(text)))
    if not result.success:
        return None

    route = [state.pos for state in result.path]
    logger.debug(f"Best route: {len(route) - 1} steps, {count_turns(route, START_FACING)} turns")
    return result.cost


def part_two(text: str) -> Optional[int]:
    """Number of tiles that are part of at least one best path."""
    result = find_path(reindeer_problem(parse_maze(text)), SearchConfig(mode="all_paths"))
    if not result.success:
        return None
    return len(result.positions)


PUZZLE = Puzzle(16, "Reindeer Maze", part_one, part_two, example_parts=(1, 2))
