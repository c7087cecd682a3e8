"""Daily puzzle solvers."""

from . import day10, day11, day16, day18, day20, day21

PUZZLES = (
    day10.PUZZLE,
    day11.PUZZLE,
    day16.PUZZLE,
    day18.PUZZLE,
    day20.PUZZLE,
    day21.PUZZLE,
)
