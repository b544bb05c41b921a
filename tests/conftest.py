"""Shared fixtures for the stringsmith test suite."""

import io

import pytest
from rich.console import Console


@pytest.fixture
def console():
    """A rich console that records output instead of printing it."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def write_file(tmp_path):
    """Write a UTF-8 file below tmp_path and return its path."""

    def _write(relative_path, content):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
