"""Minimalist personal task list."""

__version__ = "0.1.0"

from cleantodo.dispatcher import CommandDispatcher, CommandResult
from cleantodo.manager import TaskManager
from cleantodo.parser import parse_input
from cleantodo.storage import TaskStorage
from cleantodo.task import Task, TaskStatus, create_task

__all__ = [
    "CommandDispatcher",
    "CommandResult",
    "Task",
    "TaskManager",
    "TaskStatus",
    "TaskStorage",
    "create_task",
    "parse_input",
]
