"""Day 11: Plutonian Pebbles - stones that change or split every blink."""

from typing import List, Optional, Tuple

from ..app.puzzle import Puzzle
from ..errors import MalformedInputError
from ..utils.memo import MemoCache

SHORT_BLINKS = 25
LONG_BLINKS = 75
MULTIPLIER = 2024


def parse_stones(text: str) -> List[int]:
    """Stone numbers from the single input line."""
    try:
        return [int(token) for token in text.split()]
    except ValueError:
        raise MalformedInputError("Failed to parse stone numbers", text.strip()) from None


def blink(stone: int) -> Tuple[int, ...]:
    """Stones replacing ``stone`` after one blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return (int(digits[:half]), int(digits[half:]))
    return (stone * MULTIPLIER,)


def count_stones(stone: int, blinks: int, cache: MemoCache[int]) -> int:
    """Number of stones one stone becomes after ``blinks`` blinks."""
    if blinks == 0:
        return 1
    return cache.compute(
        (stone, blinks),
        lambda: sum(count_stones(s, blinks - 1, cache) for s in blink(stone)),
    )


def total_stones(text: str, blinks: int, cache: Optional[MemoCache[int]] = None) -> int:
    if cache is None:
        cache = MemoCache("stones")
    return sum(count_stones(s, blinks, cache) for s in parse_stones(text))


def part_one(text: str) -> int:
    return total_stones(text, SHORT_BLINKS)


def part_two(text: str) -> int:
    return total_stones(text, LONG_BLINKS)


PUZZLE = Puzzle(11, "Plutonian Pebbles", part_one, part_two)
