"""Core type definitions for grid state-space search."""

from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any, Callable, Dict, FrozenSet, Generic, Hashable, Iterable, Iterator,
    List, Literal, NamedTuple, Optional, Set, Tuple, TypeVar,
)

from ..errors import MalformedInputError

T = TypeVar("T")
S = TypeVar("S", bound=Hashable)

# Search modes
SearchMode = Literal["single", "all_paths"]


class Coord(NamedTuple):
    """Signed integer grid position. ``x`` is the column, ``y`` the row."""
    x: int
    y: int

    def step(self, dx: int, dy: int) -> "Coord":
        """Translate without any bounds check."""
        return Coord(self.x + dx, self.y + dy)

    def step_in(self, direction: "Direction") -> "Coord":
        """Move one cell in the given direction."""
        dx, dy = direction.dx_dy
        return Coord(self.x + dx, self.y + dy)

    def diff(self, other: "Coord") -> Tuple[int, int]:
        """Offset from ``other`` to this coordinate."""
        return (self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


class Direction(Enum):
    """Cardinal facing. Rows grow downward, so UP decreases ``y``."""
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx_dy(self) -> Tuple[int, int]:
        return self.value

    def turn_right(self) -> "Direction":
        """Rotate 90 degrees clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turn_left(self) -> "Direction":
        """Rotate 90 degrees counter-clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def opposite(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]


_CLOCKWISE: Tuple[Direction, ...] = (
    Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT
)

# Neighbor emission order is fixed so tie-breaking is reproducible
CARDINAL_STEPS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((1, -1), (-1, 1), (1, 1), (-1, -1))


@dataclass(frozen=True)
class Grid(Generic[T]):
    """
    Rectangular grid bounds with optional cell values.

    ``values`` is row-major (``values[y][x]``) and may be empty when only the
    dimensions matter, e.g. for a byte-drop grid described by coordinates.
    """
    width: int
    height: int
    values: Tuple[Tuple[T, ...], ...] = ()

    @classmethod
    def from_text(cls, text: str, convert: Callable[[str], T] = str) -> "Grid[T]":
        """
        Build a valued grid from text lines.

        Args:
            text: Rectangular block of characters
            convert: Maps each character to a cell value

        Returns:
            Grid with one cell per character

        Raises:
            MalformedInputError: If the input is empty or rows are ragged
        """
        lines = text.strip("\n").splitlines()
        if not lines or not lines[0]:
            raise MalformedInputError("Empty grid input")

        width = len(lines[0])
        for line in lines:
            if len(line) != width:
                raise MalformedInputError(
                    f"Inconsistent row length (expected {width})", line
                )

        values = tuple(tuple(convert(c) for c in line) for line in lines)
        return cls(width=width, height=len(lines), values=values)

    def in_bounds(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, coord: Coord) -> Optional[T]:
        """Get value at coordinate, returns None if out of bounds."""
        if not self.values or not self.in_bounds(coord):
            return None
        return self.values[coord[1]][coord[0]]

    def neighbors(self, coord: Coord) -> List[Coord]:
        """Cardinal neighbors inside the grid, in fixed order."""
        return self._offsets(coord, CARDINAL_STEPS)

    def diagonal_neighbors(self, coord: Coord) -> List[Coord]:
        """Diagonal neighbors inside the grid, in fixed order."""
        return self._offsets(coord, DIAGONAL_STEPS)

    def _offsets(self, coord: Coord, steps: Tuple[Tuple[int, int], ...]) -> List[Coord]:
        x, y = coord
        candidates = (Coord(x + dx, y + dy) for dx, dy in steps)
        return [c for c in candidates if self.in_bounds(c)]

    def coords(self) -> Iterator[Coord]:
        """All coordinates in reading order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def positions_of(self, value: T) -> Set[Coord]:
        """All coordinates holding ``value``."""
        return {coord for coord in self.coords() if self.get(coord) == value}

    @property
    def small_corner(self) -> Coord:
        return Coord(0, 0)

    @property
    def large_corner(self) -> Coord:
        return Coord(self.width - 1, self.height - 1)


@dataclass
class SearchConfig:
    """Configuration for the state-space search."""
    mode: SearchMode = "single"
    max_expansions: Optional[int] = None

    @property
    def collect_all_paths(self) -> bool:
        """Whether every minimum-cost path is tracked."""
        return self.mode == "all_paths"


def _identity(state: Any) -> Any:
    return state


@dataclass
class SearchProblem(Generic[S]):
    """
    Everything the engine needs to know about one search.

    Attributes:
        start: Initial state
        expand: Yields ``(next_state, incremental_cost)`` pairs
        is_goal: Goal predicate
        is_blocked: Optional impassability test applied to expanded states
        position: Projects a state onto its grid coordinate
        heuristic: Optional consistent lower bound on remaining cost
    """
    start: S
    expand: Callable[[S], Iterable[Tuple[S, int]]]
    is_goal: Callable[[S], bool]
    is_blocked: Optional[Callable[[S], bool]] = None
    position: Callable[[S], Coord] = _identity
    heuristic: Optional[Callable[[S], float]] = None


@dataclass
class SearchResult(Generic[S]):
    """Result of a search operation."""
    cost: Optional[int] = None
    found: bool = False
    path: Optional[List[S]] = None
    positions: Set[Coord] = field(default_factory=set)
    goal_states: List[S] = field(default_factory=list)
    nodes_expanded: int = 0

    @property
    def success(self) -> bool:
        """Whether a goal was reached."""
        return self.found and self.cost is not None


WallSet = FrozenSet[Coord]
VisitedMap = Dict[Hashable, int]
