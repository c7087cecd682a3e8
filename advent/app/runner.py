"""Run harness: executes a registered puzzle on an input and times each part."""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..errors import MalformedInputError
from ..utils.inputs import EXAMPLES, INPUTS, read_input
from .puzzle import Puzzle
from .registry import get_puzzle

logger = logging.getLogger(__name__)


class RunStatus(Enum):
    """Outcome of a puzzle run."""
    COMPLETE = "complete"
    NO_ANSWER = "no_answer"
    ERROR = "error"


@dataclass
class PartResult:
    """Answer and timing for one part."""
    part: int
    answer: Any
    elapsed_ms: float


@dataclass
class PuzzleRun:
    """Result of running one puzzle on one input file."""
    day: int
    title: str
    source: str
    parts: List[PartResult] = field(default_factory=list)
    status: RunStatus = RunStatus.COMPLETE
    error: Optional[str] = None

    @property
    def answers(self) -> List[Any]:
        return [p.answer for p in self.parts]

    @property
    def total_ms(self) -> float:
        return sum(p.elapsed_ms for p in self.parts)


def run_puzzle(puzzle: Puzzle, text: str, options: Optional[Mapping[str, Any]] = None,
               parts: Sequence[int] = (1, 2), source: str = "") -> PuzzleRun:
    """
    Run the selected parts of a puzzle on one input text.

    A malformed input ends the run with status ERROR and the parser's
    diagnostic; a part returning None marks the run NO_ANSWER.
    """
    options = options or {}
    run = PuzzleRun(day=puzzle.day, title=puzzle.title, source=source)
    solvers = {1: puzzle.part_one, 2: puzzle.part_two}

    for part in parts:
        if part not in solvers:
            raise ValueError(f"Unknown part: {part}. Available: 1, 2")

        t0 = time.perf_counter()
        try:
            answer = solvers[part](text, **options)
        except MalformedInputError as e:
            logger.error(f"Day {puzzle.day} part {part}: malformed input: {e}")
            run.status = RunStatus.ERROR
            run.error = str(e)
            return run
        elapsed_ms = (time.perf_counter() - t0) * 1000

        logger.debug(f"Day {puzzle.day} part {part}: {answer!r} in {elapsed_ms:.2f}ms")
        run.parts.append(PartResult(part=part, answer=answer, elapsed_ms=elapsed_ms))
        if answer is None:
            run.status = RunStatus.NO_ANSWER

    return run


def run_day(day: int, example: bool = False, parts: Sequence[int] = (1, 2),
            data_dir: Optional[Union[str, Path]] = None) -> List[PuzzleRun]:
    """
    Load the input for a day and run it.

    Example runs use the puzzle's example options and produce one run per
    example file.
    """
    puzzle = get_puzzle(day)

    if not example:
        text = read_input(day, INPUTS, data_dir=data_dir)
        return [run_puzzle(puzzle, text, parts=parts, source=f"{INPUTS}/{day:02d}")]

    runs = []
    suffixes = puzzle.example_parts or (None,)
    for suffix in suffixes:
        text = read_input(day, EXAMPLES, part=suffix, data_dir=data_dir)
        name = f"{day:02d}" if suffix is None else f"{day:02d}-{suffix}"
        runs.append(run_puzzle(puzzle, text, puzzle.example_options, parts, f"{EXAMPLES}/{name}"))
    return runs


def format_run(run: PuzzleRun) -> str:
    """Render a run as a short report."""
    lines = [f"Day {run.day:02d}: {run.title} [{run.source}]"]
    if run.status == RunStatus.ERROR:
        lines.append(f"  error: {run.error}")
        return "\n".join(lines)

    for part in run.parts:
        answer = "no answer" if part.answer is None else part.answer
        lines.append(f"  Part {part.part}: {answer}  ({part.elapsed_ms:.1f}ms)")
    return "\n".join(lines)
