"""Puzzle record shared by the solver modules and the registry."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Tuple

# Part solvers take the raw input text plus puzzle-specific keyword options
PartSolver = Callable[..., Any]


@dataclass(frozen=True)
class Puzzle:
    """
    One daily puzzle.

    Attributes:
        day: Puzzle number
        title: Human-readable title
        part_one: Solver for part one
        part_two: Solver for part two
        example_options: Keyword options applied when running on example input
        example_parts: Example file suffixes, empty if there is a single file
    """
    day: int
    title: str
    part_one: PartSolver
    part_two: PartSolver
    example_options: Mapping[str, Any] = field(default_factory=dict)
    example_parts: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "example_options", MappingProxyType(dict(self.example_options)))

    def solve(self, text: str, **options: Any) -> Tuple[Any, Any]:
        """Answer both parts for one input."""
        return self.part_one(text, **options), self.part_two(text, **options)
