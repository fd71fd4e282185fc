"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from task_cli.storage import TaskFile  # noqa: E402
from task_cli.store import TaskStore  # noqa: E402


@pytest.fixture
def task_file(tmp_path):
    return TaskFile(tmp_path / "tasks.txt")


@pytest.fixture
def store(task_file):
    """An empty store backed by a file that does not exist yet."""
    return TaskStore(task_file)
