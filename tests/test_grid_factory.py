"""Tests for synthetic maze generation."""

import random

import pytest

from advent.domain.maze import parse_maze
from advent.domain.types import Coord
from advent.utils.grid_factory import (
    add_random_walls, add_walls, create_open_maze, create_preset_maze, enclose, render_maze,
)


def test_open_maze_defaults_to_corners():
    maze = create_open_maze(6, 4)
    assert maze.start == Coord(0, 0)
    assert maze.end == Coord(5, 3)
    assert not maze.walls


@pytest.mark.parametrize("kwargs", [
    {"width": 0, "height": 3},
    {"width": 3, "height": 3, "end": Coord(3, 0)},
])
def test_open_maze_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        create_open_maze(**kwargs)


def test_walls_never_cover_markers():
    maze = create_open_maze(4, 4)
    walled = add_walls(maze, [maze.start, maze.end, Coord(1, 1), Coord(9, 9)])
    assert walled.walls == {Coord(1, 1)}


def test_random_walls_are_reproducible():
    maze = create_open_maze(10, 10)
    a = add_random_walls(maze, 0.3, random.Random(5))
    b = add_random_walls(maze, 0.3, random.Random(5))
    assert a.walls == b.walls
    assert len(a.walls) == 30
    assert maze.start not in a.walls and maze.end not in a.walls


def test_random_walls_density_range():
    with pytest.raises(ValueError):
        add_random_walls(create_open_maze(3, 3), 1.5)


def test_enclose_rejects_adjacent_marker():
    maze = create_open_maze(3, 3)
    with pytest.raises(ValueError):
        enclose(maze, Coord(1, 1))


def test_presets():
    empty = create_preset_maze(10, 10, "empty", seed=1)
    dense = create_preset_maze(10, 10, "dense", seed=1)
    assert not empty.walls
    assert len(dense.walls) == 35
    with pytest.raises(ValueError):
        create_preset_maze(10, 10, "spiral")


def test_render_parses_back():
    maze = create_preset_maze(8, 5, "sparse", seed=9)
    assert parse_maze(render_maze(maze)) == maze


def test_preset_layout_depends_only_on_seed():
    a = create_preset_maze(12, 12, "sparse", seed=4)
    b = create_preset_maze(12, 12, "sparse", seed=4)
    assert a == b
    direct = add_random_walls(create_open_maze(12, 12), 0.15, random.Random(4))
    assert direct.walls == a.walls


def test_unseeded_random_walls():
    maze = add_random_walls(create_open_maze(10, 10), 0.2)
    assert len(maze.walls) == 20
