"""Shared fixtures for the task list tests."""

import io

import pytest
from rich.console import Console

from cleantodo.dispatcher import CommandDispatcher
from cleantodo.manager import TaskManager
from cleantodo.storage import TaskStorage


@pytest.fixture
def console():
    """A console that records output instead of printing it."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def output(console):
    """Return everything printed to the console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def tasks_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture
def storage(tasks_file, console):
    return TaskStorage(tasks_file, console=console)


@pytest.fixture
def manager(storage, console):
    return TaskManager(storage, console=console)


@pytest.fixture
def dispatcher(manager, console):
    return CommandDispatcher(manager, console=console)
