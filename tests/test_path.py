"""Tests for path reconstruction and validation."""

import pytest

from advent.domain.neighbors import get_open_neighbors
from advent.domain.path import (
    collect_optimal_states, count_turns, path_cost, reconstruct_path, validate_path,
)
from advent.domain.types import Coord, Direction, Grid


def test_reconstruct_path():
    parents = {"a": None, "b": "a", "c": "b"}
    assert reconstruct_path("c", parents) == ["a", "b", "c"]
    assert reconstruct_path("a", parents) == ["a"]


def test_collect_optimal_states_follows_every_branch():
    # Diamond: a -> b -> d and a -> c -> d, plus an unrelated state
    predecessors = {"a": set(), "b": {"a"}, "c": {"a"}, "d": {"b", "c"}, "x": {"a"}}
    assert collect_optimal_states(["d"], predecessors) == {"a", "b", "c", "d"}


def test_path_cost():
    grid = Grid(width=3, height=1)

    def expand(coord):
        return get_open_neighbors(coord, grid, frozenset(), step_cost=2)

    path = [Coord(0, 0), Coord(1, 0), Coord(2, 0)]
    assert path_cost(path, expand) == 4
    with pytest.raises(ValueError):
        path_cost([Coord(0, 0), Coord(2, 0)], expand)


def test_count_turns():
    coords = [Coord(0, 0), Coord(1, 0), Coord(1, 1), Coord(1, 2), Coord(2, 2)]
    assert count_turns(coords, Direction.RIGHT) == 2
    assert count_turns(coords[:2], Direction.LEFT) == 2


def test_validate_path():
    grid = Grid(width=3, height=3)
    walls = frozenset({Coord(1, 1)})
    assert validate_path([Coord(0, 0), Coord(1, 0), Coord(2, 0)], grid, walls)
    assert not validate_path([], grid, walls)
    assert not validate_path([Coord(0, 1), Coord(1, 1)], grid, walls)
    assert not validate_path([Coord(0, 0), Coord(2, 0)], grid, walls)
    assert not validate_path([Coord(0, 0), Coord(-1, 0)], grid, walls)
