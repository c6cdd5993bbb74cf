"""Exceptions raised by the task list manager."""


class TodoError(Exception):
    """Base class for all task list errors."""


class ValidationError(TodoError):
    """Raised when a description or task number is not acceptable."""


class StorageReadError(TodoError):
    """Raised when the tasks file cannot be read or parsed."""


class StorageWriteError(TodoError):
    """Raised when the tasks file cannot be written."""


class AlreadyCompletedError(TodoError):
    """Raised when completing a task that is already completed."""


class UnknownCommandError(TodoError):
    """Raised when a command name is not recognised."""

    def __init__(self, command: str):
        super().__init__(f'Unknown command "{command}"')
        self.command = command
