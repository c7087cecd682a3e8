"""Puzzle registry: read-only lookup from day number to solvers."""

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..days import PUZZLES
from .puzzle import Puzzle


def build_registry(puzzles: Iterable[Puzzle]) -> Mapping[int, Puzzle]:
    """
    Index puzzles by day.

    Raises:
        ValueError: If two puzzles share a day
    """
    table: Dict[int, Puzzle] = {}
    for puzzle in puzzles:
        if puzzle.day in table:
            raise ValueError(f"Day {puzzle.day} is registered twice")
        table[puzzle.day] = puzzle
    return MappingProxyType(table)


# Built once at import from the solver modules
REGISTRY: Mapping[int, Puzzle] = build_registry(PUZZLES)


def get_puzzle(day: int, registry: Optional[Mapping[int, Puzzle]] = None) -> Puzzle:
    """
    Look up a registered puzzle.

    Raises:
        ValueError: If the day is not registered
    """
    registry = REGISTRY if registry is None else registry
    if day not in registry:
        available = ", ".join(str(d) for d in get_puzzle_days(registry))
        raise ValueError(f"Unknown day: {day}. Available: {available}")
    return registry[day]


def get_puzzle_days(registry: Optional[Mapping[int, Puzzle]] = None) -> List[int]:
    """Registered day numbers in ascending order."""
    return sorted(REGISTRY if registry is None else registry)


def get_puzzle_info(registry: Optional[Mapping[int, Puzzle]] = None) -> List[Dict[str, Any]]:
    """Day and title for every registered puzzle."""
    registry = REGISTRY if registry is None else registry
    return [
        {"day": day, "title": registry[day].title}
        for day in get_puzzle_days(registry)
    ]
