"""Shared fixtures for the test suite."""

from pathlib import Path

import pytest

from advent.utils.inputs import EXAMPLES, read_input

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def example():
    """Loader for files under data/examples."""
    def load(day: int, part=None) -> str:
        return read_input(day, EXAMPLES, part=part, data_dir=DATA_DIR)
    return load
