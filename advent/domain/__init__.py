"""Grid model, frontier and state-space search engine."""

from .maze import Maze, parse_maze, walk_problem
from .priority_queue import PriorityQueue
from .search import StateSearch, cost_map, find_path, lowest_cost, optimal_positions
from .types import Coord, Direction, Grid, SearchConfig, SearchProblem, SearchResult

__all__ = [
    "Coord",
    "Direction",
    "Grid",
    "Maze",
    "PriorityQueue",
    "SearchConfig",
    "SearchProblem",
    "SearchResult",
    "StateSearch",
    "cost_map",
    "find_path",
    "lowest_cost",
    "optimal_positions",
    "parse_maze",
    "walk_problem",
]
