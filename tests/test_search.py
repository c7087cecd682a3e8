"""Tests for the uniform-cost search engine."""

import random
from dataclasses import replace

import pytest

from advent.days.day16 import reindeer_problem
from advent.days.day18 import exit_steps, parse_bytes
from advent.domain.heuristics import manhattan_distance
from advent.domain.maze import parse_maze, walk_problem
from advent.domain.search import (
    StateSearch, cost_map, find_path, lowest_cost, optimal_positions,
)
from advent.domain.types import Coord, Grid, SearchConfig, SearchProblem
from advent.errors import SearchLimitExceeded
from advent.utils.grid_factory import add_random_walls, add_walls, create_open_maze, enclose

CORRIDOR = "#S....E#"

ONE_TURN = """\
######
####E#
####.#
####.#
#S...#
######
"""


class TestSingleMode:
    @pytest.mark.parametrize("width,height", [(1, 1), (5, 1), (4, 7), (12, 9)])
    def test_open_grid_costs_manhattan_distance(self, width, height):
        maze = create_open_maze(width, height)
        result = find_path(walk_problem(maze))
        assert result.success
        assert result.cost == manhattan_distance(maze.start, maze.end)
        assert len(result.path) == result.cost + 1

    @pytest.mark.parametrize("heuristic_id", ["manhattan", "chebyshev", "zero"])
    def test_heuristic_choice_keeps_cost(self, heuristic_id):
        maze = add_random_walls(create_open_maze(18, 18), 0.2, random.Random(11))
        baseline = lowest_cost(walk_problem(maze, heuristic_id="zero"))
        assert lowest_cost(walk_problem(maze, heuristic_id=heuristic_id)) == baseline

    def test_repeated_search_is_idempotent(self):
        maze = add_random_walls(create_open_maze(20, 20), 0.2, random.Random(7))
        problem = walk_problem(maze)
        assert find_path(problem).cost == find_path(problem).cost

    def test_start_is_goal(self):
        problem = SearchProblem(
            start=Coord(2, 2),
            expand=lambda c: [],
            is_goal=lambda c: c == Coord(2, 2),
        )
        result = find_path(problem)
        assert result.cost == 0
        assert result.positions == {Coord(2, 2)}
        assert find_path(problem, SearchConfig(mode="all_paths")).positions == {Coord(2, 2)}

    def test_enclosed_start_is_unreachable(self):
        maze = enclose(create_open_maze(5, 5), Coord(0, 0))
        result = find_path(walk_problem(maze))
        assert not result.found
        assert result.cost is None
        assert result.path is None
        assert optimal_positions(walk_problem(maze)) == set()

    def test_straight_corridor(self):
        maze = parse_maze(CORRIDOR)
        assert lowest_cost(walk_problem(maze)) == 5
        assert lowest_cost(reindeer_problem(maze)) == 5

    def test_one_turn_costs_thousand_more(self):
        assert lowest_cost(reindeer_problem(parse_maze(ONE_TURN))) == 1006

    def test_byte_grid_example(self, example):
        corrupted = parse_bytes(example(18))[:12]
        assert exit_steps(Grid(width=7, height=7), corrupted) == 22

    def test_negative_cost_rejected(self):
        problem = SearchProblem(
            start=0,
            expand=lambda s: [(s + 1, -1)],
            is_goal=lambda s: s == 3,
        )
        with pytest.raises(ValueError):
            find_path(problem)

    def test_expansion_limit(self):
        maze = create_open_maze(10, 10)
        with pytest.raises(SearchLimitExceeded) as exc:
            find_path(walk_problem(maze), SearchConfig(max_expansions=3))
        assert exc.value.limit == 3

    def test_blocked_states_are_never_entered(self):
        problem = SearchProblem(
            start=0,
            expand=lambda s: [(s + 1, 1), (s + 2, 5)],
            is_goal=lambda s: s == 4,
            is_blocked=lambda s: s == 2,
        )
        # 0 -> 1 -> 3 -> 4 costs 1 + 5 + 1
        assert lowest_cost(problem) == 7


class TestAllPathsMode:
    def test_open_grid_covers_every_cell(self):
        maze = create_open_maze(3, 3)
        result = find_path(walk_problem(maze), SearchConfig(mode="all_paths"))
        assert result.cost == 4
        assert result.positions == set(maze.open_cells())

    @pytest.mark.parametrize("seed", range(1, 11))
    def test_cost_matches_single_mode(self, seed):
        maze = add_random_walls(create_open_maze(15, 15), 0.25, random.Random(seed))
        single = find_path(walk_problem(maze))
        every = find_path(walk_problem(maze), SearchConfig(mode="all_paths"))
        assert single.cost == every.cost
        assert single.success == every.success
        if single.success:
            assert set(single.path) <= every.positions
        else:
            assert single.path is None
            assert every.positions == set()

    def test_cut_off_maze_agrees_across_modes(self):
        # A full wall column separates start and end
        maze = add_walls(create_open_maze(5, 5), [Coord(2, y) for y in range(5)])
        single = find_path(walk_problem(maze))
        every = find_path(walk_problem(maze), SearchConfig(mode="all_paths"))
        assert not single.success and not every.success
        assert single.path is None
        assert every.positions == set()

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_every_position_lies_on_an_optimal_path(self, seed):
        maze = add_random_walls(create_open_maze(12, 12), 0.2, random.Random(seed))
        result = find_path(walk_problem(maze), SearchConfig(mode="all_paths"))
        if not result.success:
            assert result.positions == set()
            return

        from_start = cost_map(walk_problem(maze))
        from_end = cost_map(walk_problem(maze, start=maze.end, goal=maze.start))
        for coord in result.positions:
            assert from_start[coord] + from_end[coord] == result.cost

        on_optimal = {
            c for c in from_start
            if c in from_end and from_start[c] + from_end[c] == result.cost
        }
        assert result.positions == on_optimal

    def test_multiple_goals(self):
        maze = parse_maze("E...S..E")
        problem = replace(walk_problem(maze), is_goal=lambda c: c in maze.ends, heuristic=None)
        result = find_path(problem, SearchConfig(mode="all_paths"))
        assert result.cost == 3
        assert result.goal_states == [Coord(7, 0)]
        assert result.positions == {Coord(4, 0), Coord(5, 0), Coord(6, 0), Coord(7, 0)}


class TestStateSearch:
    def test_step_requires_initialize(self):
        with pytest.raises(ValueError):
            StateSearch().step()

    def test_stepwise_run(self):
        search = StateSearch()
        search.initialize(walk_problem(create_open_maze(4, 4)))
        assert not search.is_complete()
        result = search.run_complete()
        assert search.is_complete()
        assert search.step() is result
        assert result.cost == 6

    def test_cost_map_explores_everything(self):
        maze = create_open_maze(4, 3)
        distances = cost_map(walk_problem(maze))
        assert len(distances) == 12
        assert all(d == c.x + c.y for c, d in distances.items())
