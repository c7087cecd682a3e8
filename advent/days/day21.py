"""Day 21: Keypad Conundrum - button presses through a chain of keypad robots."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..app.puzzle import Puzzle
from ..domain.types import Coord
from ..errors import MalformedInputError
from ..utils.memo import MemoCache

ACTIVATE = "A"
SHORT_CHAIN = 2
LONG_CHAIN = 25


@dataclass(frozen=True)
class Keypad:
    """
    Button layout of a keypad. Rows grow downward.

    Attributes:
        name: Label used in error messages
        buttons: Button label to position
        gap: The empty position the arm must never pass over
    """
    name: str
    buttons: Mapping[str, Coord]
    gap: Coord

    def position(self, button: str) -> Coord:
        if button not in self.buttons:
            raise MalformedInputError(f"No button on the {self.name} keypad", button)
        return self.buttons[button]


NUMERIC_KEYPAD = Keypad(
    name="numeric",
    buttons=MappingProxyType({
        "7": Coord(0, 0), "8": Coord(1, 0), "9": Coord(2, 0),
        "4": Coord(0, 1), "5": Coord(1, 1), "6": Coord(2, 1),
        "1": Coord(0, 2), "2": Coord(1, 2), "3": Coord(2, 2),
        "0": Coord(1, 3), "A": Coord(2, 3),
    }),
    gap=Coord(0, 3),
)

DIRECTIONAL_KEYPAD = Keypad(
    name="directional",
    buttons=MappingProxyType({
        "^": Coord(1, 0), "A": Coord(2, 0),
        "<": Coord(0, 1), "v": Coord(1, 1), ">": Coord(2, 1),
    }),
    gap=Coord(0, 0),
)


def route(keypad: Keypad, start: str, end: str) -> str:
    """
    Shortest directional presses moving from ``start`` to ``end`` and
    pressing it, chosen to be cheapest for the robot one level up.

    Moves are grouped so each direction is pressed in one run. Left presses
    go first because ``<`` is furthest from ``A``, then vertical, then right;
    that order is swapped only when it would sweep over the gap.
    """
    src = keypad.position(start)
    dst = keypad.position(end)
    dx, dy = dst.diff(src)

    horizontal = (">" if dx > 0 else "<") * abs(dx)
    vertical = ("v" if dy > 0 else "^") * abs(dy)

    if src.y == keypad.gap.y and dst.x == keypad.gap.x:
        # Horizontal first would enter the gap's row at the gap
        moves = vertical + horizontal
    elif src.x == keypad.gap.x and dst.y == keypad.gap.y:
        # Vertical first would enter the gap's column at the gap
        moves = horizontal + vertical
    elif dx < 0:
        moves = horizontal + vertical
    else:
        moves = vertical + horizontal

    return moves + ACTIVATE


def presses_for(keypad: Keypad, sequence: str) -> str:
    """Directional presses that type ``sequence``; the arm starts on A."""
    output = []
    current = ACTIVATE
    for button in sequence:
        output.append(route(keypad, current, button))
        current = button
    return "".join(output)


def sequence_length(sequence: str, robots: int, cache: MemoCache[int]) -> int:
    """
    Presses a human needs so ``robots`` directional robots type ``sequence``.

    Every segment ends on A, so segments are independent and the result is
    cached per (robots, segment).
    """
    if robots == 0:
        return len(sequence)

    def compute() -> int:
        total = 0
        current = ACTIVATE
        for button in sequence:
            total += sequence_length(route(DIRECTIONAL_KEYPAD, current, button), robots - 1, cache)
            current = button
        return total

    return cache.compute((robots, sequence), compute)


def parse_codes(text: str) -> List[str]:
    codes = [line.strip() for line in text.strip().splitlines() if line.strip()]
    for code in codes:
        if not code.endswith(ACTIVATE) or not code[:-1].isdigit():
            raise MalformedInputError("Door code must be digits followed by A", code)
    return codes


def total_complexity(text: str, robots: int, cache: Optional[MemoCache[int]] = None) -> int:
    """Sum over codes of shortest press count times the code's numeric part."""
    if cache is None:
        cache = MemoCache("keypad")
    total = 0
    for code in parse_codes(text):
        typed = presses_for(NUMERIC_KEYPAD, code)
        total += sequence_length(typed, robots, cache) * int(code[:-1])
    return total


def part_one(text: str, robots: int = SHORT_CHAIN) -> int:
    return total_complexity(text, robots)


def part_two(text: str, robots: int = LONG_CHAIN) -> int:
    return total_complexity(text, robots)


PUZZLE = Puzzle(21, "Keypad Conundrum", part_one, part_two)
