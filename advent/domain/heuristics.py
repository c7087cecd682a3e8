"""Heuristic functions for informed grid search."""

from typing import Callable, Dict, Literal

from .types import Coord

# Heuristic function identifiers
HeuristicId = Literal["manhattan", "chebyshev", "zero"]


def manhattan_distance(start: Coord, target: Coord) -> int:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for 4-directional unit-cost movement.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])


def chebyshev_distance(start: Coord, target: Coord) -> int:
    """
    Chebyshev (L-infinity) distance heuristic.
    Admissible for 8-directional movement where diagonal cost = orthogonal cost.
    """
    return max(abs(start[0] - target[0]), abs(start[1] - target[1]))


def zero_distance(start: Coord, target: Coord) -> int:
    """Uninformed search: plain uniform-cost ordering."""
    return 0


# Mapping from heuristic IDs to functions
HEURISTICS: Dict[HeuristicId, Callable[[Coord, Coord], int]] = {
    "manhattan": manhattan_distance,
    "chebyshev": chebyshev_distance,
    "zero": zero_distance,
}


def get_heuristic(heuristic_id: HeuristicId) -> Callable[[Coord, Coord], int]:
    """Get heuristic function by ID."""
    return HEURISTICS[heuristic_id]


def toward(target: Coord, heuristic_id: HeuristicId = "manhattan",
           scale: int = 1) -> Callable[[Coord], int]:
    """
    Bind a heuristic to a fixed target.

    ``scale`` multiplies the estimate and must not exceed the cheapest step
    cost, otherwise the estimate stops being a lower bound.
    """
    func = get_heuristic(heuristic_id)

    def estimate(coord: Coord) -> int:
        return func(coord, target) * scale

    return estimate
