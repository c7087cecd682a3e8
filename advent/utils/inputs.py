"""Input file loading for puzzle runs."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

# Environment override for the data directory
DATA_DIR_ENV = "ADVENT_DATA_DIR"

INPUTS = "inputs"
EXAMPLES = "examples"


def get_data_directory(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the directory holding ``inputs/`` and ``examples/``.

    An explicit argument wins, then the ADVENT_DATA_DIR environment variable,
    then ``data/`` in the project root.
    """
    if data_dir is not None:
        return Path(data_dir)
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path(__file__).parent.parent.parent / "data"


def input_path(day: int, kind: str = INPUTS, part: Optional[int] = None,
               data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Path of the input file for a day, e.g. ``examples/16-2.txt``."""
    if kind not in (INPUTS, EXAMPLES):
        raise ValueError(f"Unknown input kind: {kind}. Available: {INPUTS}, {EXAMPLES}")
    name = f"{day:02d}" if part is None else f"{day:02d}-{part}"
    return get_data_directory(data_dir) / kind / f"{name}.txt"


def read_input(day: int, kind: str = INPUTS, part: Optional[int] = None,
               data_dir: Optional[Union[str, Path]] = None) -> str:
    """
    Read a puzzle input or example file.

    Args:
        day: Puzzle number (1-25)
        kind: "inputs" or "examples"
        part: Optional suffix for puzzles with more than one example file
        data_dir: Override for the data directory

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = input_path(day, kind, part, data_dir)
    if not path.exists():
        raise FileNotFoundError(f"No {kind} file for day {day}: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    logger.debug(f"Loaded {path} ({len(text)} bytes)")
    return text


def list_available(kind: str = INPUTS, data_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """Names of the input files present for ``kind``, sorted."""
    directory = get_data_directory(data_dir) / kind
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*.txt"))
