"""Neighbor generation for grid searches with movement rules."""

from typing import AbstractSet, List, Tuple

from .types import Coord, Direction, Grid


def get_neighbors(coord: Coord, grid: Grid, allow_diagonal: bool = False) -> List[Coord]:
    """
    Get in-bounds neighbors of a coordinate.
    Cardinal steps come first, then diagonal steps when allowed.
    """
    neighbors = grid.neighbors(coord)
    if allow_diagonal:
        neighbors.extend(grid.diagonal_neighbors(coord))
    return neighbors


def get_open_neighbors(coord: Coord, grid: Grid, walls: AbstractSet[Coord],
                       step_cost: int = 1) -> List[Tuple[Coord, int]]:
    """
    Get passable cardinal neighbors with their movement costs.
    Returns list of (neighbor_coord, cost) tuples.
    """
    return [
        (neighbor, step_cost)
        for neighbor in get_neighbors(coord, grid)
        if neighbor not in walls
    ]


def direction_between(from_coord: Coord, to_coord: Coord) -> Direction:
    """
    Cardinal direction of a single orthogonal move.

    Raises:
        ValueError: If the two coordinates are not orthogonally adjacent
    """
    dx = to_coord[0] - from_coord[0]
    dy = to_coord[1] - from_coord[1]
    if abs(dx) + abs(dy) != 1:
        raise ValueError(f"Invalid movement from {from_coord} to {to_coord}")
    return Direction((dx, dy))


def manhattan_offsets(radius: int) -> List[Tuple[int, int, int]]:
    """
    All offsets within Manhattan distance ``radius``, excluding the origin.
    Returns (dx, dy, distance) tuples in a fixed order.
    """
    offsets = []
    for dx in range(-radius, radius + 1):
        remaining = radius - abs(dx)
        for dy in range(-remaining, remaining + 1):
            if dx or dy:
                offsets.append((dx, dy, abs(dx) + abs(dy)))
    return offsets
