"""Tests for the core coordinate, direction and grid types."""

import pytest

from advent.domain.types import Coord, Direction, Grid, SearchConfig, SearchResult
from advent.errors import MalformedInputError


class TestCoord:
    def test_step_and_diff(self):
        c = Coord(2, 3)
        assert c.step(-3, 1) == Coord(-1, 4)
        assert Coord(5, 1).diff(Coord(2, 3)) == (3, -2)

    def test_step_in_direction(self):
        assert Coord(0, 0).step_in(Direction.UP) == Coord(0, -1)
        assert Coord(0, 0).step_in(Direction.RIGHT) == Coord(1, 0)

    def test_str_is_comma_separated(self):
        assert str(Coord(6, 1)) == "6,1"

    def test_is_hashable_tuple(self):
        assert {Coord(1, 2), (1, 2)} == {Coord(1, 2)}


class TestDirection:
    def test_turns_cycle(self):
        d = Direction.RIGHT
        assert d.turn_right() == Direction.DOWN
        assert d.turn_left() == Direction.UP
        assert d.turn_left().turn_left().turn_left().turn_left() == d

    def test_opposite(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.LEFT.opposite() == Direction.RIGHT


class TestGrid:
    def test_from_text(self):
        grid = Grid.from_text("ab\ncd\n")
        assert (grid.width, grid.height) == (2, 2)
        assert grid.get(Coord(1, 0)) == "b"
        assert grid.get(Coord(2, 0)) is None

    def test_from_text_converts(self):
        grid = Grid.from_text("12\n34", int)
        assert grid.positions_of(4) == {Coord(1, 1)}

    def test_ragged_rows_rejected(self):
        with pytest.raises(MalformedInputError) as exc:
            Grid.from_text("abc\nab")
        assert exc.value.fragment == "ab"

    def test_empty_rejected(self):
        with pytest.raises(MalformedInputError):
            Grid.from_text("")

    def test_neighbors_clipped_at_corner(self):
        grid = Grid(width=3, height=3)
        assert grid.neighbors(Coord(0, 0)) == [Coord(1, 0), Coord(0, 1)]
        assert set(grid.diagonal_neighbors(Coord(0, 0))) == {Coord(1, 1)}
        assert len(grid.neighbors(Coord(1, 1))) == 4

    def test_corners(self):
        grid = Grid(width=7, height=5)
        assert grid.small_corner == Coord(0, 0)
        assert grid.large_corner == Coord(6, 4)
        assert len(list(grid.coords())) == 35


def test_search_config_modes():
    assert not SearchConfig().collect_all_paths
    assert SearchConfig(mode="all_paths").collect_all_paths


def test_empty_result_is_not_success():
    result = SearchResult()
    assert not result.success
    assert result.positions == set()
