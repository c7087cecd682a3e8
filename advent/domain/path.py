"""Path reconstruction and validation utilities for state-space search."""

from typing import AbstractSet, Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from .neighbors import direction_between
from .types import Coord, Direction, Grid

S = TypeVar("S", bound=Hashable)


def reconstruct_path(goal: S, parents: Dict[S, Optional[S]]) -> List[S]:
    """
    Reconstruct the path from start to goal using parent links.
    The start state is the one whose parent is None.
    """
    path = []
    current: Optional[S] = goal

    while current is not None:
        path.append(current)
        current = parents.get(current)

    # Reverse to get path from start to goal
    return list(reversed(path))


def collect_optimal_states(goals: Iterable[S], predecessors: Dict[S, Set[S]]) -> Set[S]:
    """
    Walk predecessor links backward from every optimal goal state.

    ``predecessors`` maps each state to all states that reach it at its
    minimum cost, so every state returned lies on some minimum-cost path.
    """
    seen: Set[S] = set()
    stack = list(goals)

    while stack:
        state = stack.pop()
        if state in seen:
            continue
        seen.add(state)
        stack.extend(p for p in predecessors.get(state, ()) if p not in seen)

    return seen


def path_cost(path: List[S], expand: Callable[[S], Iterable[Tuple[S, int]]]) -> int:
    """
    Calculate the total cost of a path of states.

    Raises:
        ValueError: If a step is not offered by ``expand``
    """
    total = 0
    for prev, nxt in zip(path, path[1:]):
        costs = [cost for state, cost in expand(prev) if state == nxt]
        if not costs:
            raise ValueError(f"Invalid transition from {prev} to {nxt}")
        total += min(costs)
    return total


def count_turns(coords: List[Coord], initial: Direction) -> int:
    """Number of 90 degree direction changes along a walk of coordinates."""
    turns = 0
    facing = initial
    for prev, nxt in zip(coords, coords[1:]):
        direction = direction_between(prev, nxt)
        if direction != facing:
            turns += 1 if direction != facing.opposite() else 2
            facing = direction
    return turns


def validate_path(path: List[Coord], grid: Grid, walls: AbstractSet[Coord]) -> bool:
    """
    Validate that a path is walkable and connected.
    Returns True if path is valid.
    """
    if not path:
        return False

    for coord in path:
        if not grid.in_bounds(coord) or coord in walls:
            return False

    # Consecutive cells must be orthogonally adjacent
    for prev, nxt in zip(path, path[1:]):
        dx = abs(nxt[0] - prev[0])
        dy = abs(nxt[1] - prev[1])
        if dx + dy != 1:
            return False

    return True
