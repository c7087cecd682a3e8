"""Tests for input file loading."""

from pathlib import Path

import pytest

from advent.utils.inputs import (
    DATA_DIR_ENV, EXAMPLES, INPUTS, get_data_directory, input_path, list_available, read_input,
)


def test_explicit_directory_wins(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, "/elsewhere")
    assert get_data_directory(tmp_path) == tmp_path


def test_environment_override(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    assert get_data_directory() == tmp_path


def test_default_is_project_data(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    assert get_data_directory().name == "data"


def test_input_path_names(tmp_path):
    assert input_path(7, INPUTS, data_dir=tmp_path) == tmp_path / "inputs" / "07.txt"
    assert input_path(16, EXAMPLES, part=2, data_dir=tmp_path) == tmp_path / "examples" / "16-2.txt"
    with pytest.raises(ValueError):
        input_path(1, "answers", data_dir=tmp_path)


def test_read_input(tmp_path):
    (tmp_path / "inputs").mkdir()
    (tmp_path / "inputs" / "11.txt").write_text("1 2 3\n")
    assert read_input(11, data_dir=tmp_path) == "1 2 3\n"
    with pytest.raises(FileNotFoundError):
        read_input(12, data_dir=tmp_path)


def test_list_available(tmp_path, data_dir):
    assert list_available(INPUTS, tmp_path) == []
    examples = list_available(EXAMPLES, data_dir)
    assert "16-1" in examples and "21" in examples
    assert isinstance(data_dir, Path)
