"""Task operations: add, list, complete and remove."""

import logging
import re
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cleantodo.exceptions import AlreadyCompletedError, ValidationError
from cleantodo.storage import TaskStorage
from cleantodo.task import STATUS_GLYPHS, Task, create_task

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def is_valid_description(description: Optional[str]) -> bool:
    """Return True if the description has content once trimmed."""
    return bool(description and description.strip())


def parse_task_number(raw: str, total: int) -> int:
    """Convert a 1-based task number into a 0-based index.

    Only the leading integer is considered, so ``"2abc"`` reads as 2.

    Raises:
        ValidationError: If the number is missing or outside [1, total].
    """
    match = _LEADING_INT.match(str(raw))
    number = int(match.group(1)) if match else None
    if number is None or number < 1 or number > total:
        raise ValidationError(
            f"Invalid task number. Please use a number between 1 and {total}"
        )
    return number - 1


class TaskManager:
    """Runs task operations against a storage file.

    Every operation performs a full read-modify-write cycle and reports
    its outcome on the console.

    Attributes:
        storage: Where the task collection lives.
        console: Where messages are printed.
    """

    def __init__(self, storage: TaskStorage, console: Optional[Console] = None):
        """Initialize the manager.

        Args:
            storage: The storage adapter to read and write tasks with.
            console: Console for operator messages (defaults to the storage's).
        """
        self.storage = storage
        self.console = console or storage.console

    def _error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def validate_task_number(self, raw: str, total: int) -> Optional[int]:
        """Resolve a task number, reporting the valid range on failure.

        Returns:
            The 0-based index, or None if the number is not valid.
        """
        try:
            return parse_task_number(raw, total)
        except ValidationError as e:
            self._error(str(e))
            return None

    def add_task(self, description: str) -> bool:
        """Append a new pending task.

        Args:
            description: Task description; surrounding whitespace is dropped.

        Returns:
            True if the task was added and saved.
        """
        if not is_valid_description(description):
            self._error("Task description cannot be empty")
            return False

        tasks = self.storage.read_all()
        task = create_task(description)
        # Millisecond ids can collide when tasks are added in quick succession.
        if tasks:
            task.id = max(task.id, max(t.id for t in tasks) + 1)
        tasks.append(task)

        if not self.storage.write_all(tasks):
            return False
        logger.debug("Added task %d", task.id)
        self.console.print(f'[green]✅ Task added:[/green] "{escape(task.description)}"')
        return True

    def get_tasks(self) -> list[Task]:
        """Return the stored tasks in display order."""
        return self.storage.read_all()

    def list_tasks(self) -> None:
        """Print every task with its number and status."""
        tasks = self.storage.read_all()

        if not tasks:
            self.console.print(
                '📝 No tasks found. Add your first task with: add "Your task"'
            )
            return

        table = Table(title="📋 Your Tasks", box=box.SIMPLE_HEAD, title_justify="left")
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Status", justify="center", no_wrap=True)
        table.add_column("Task")

        for number, task in enumerate(tasks, 1):
            style = "dim" if task.completed else ""
            table.add_row(
                str(number),
                STATUS_GLYPHS[task.status],
                escape(task.description),
                style=style,
            )

        self.console.print(table)
        completed = sum(1 for t in tasks if t.completed)
        self.console.print(
            f"Total: {len(tasks)} tasks "
            f"({completed} completed, {len(tasks) - completed} pending)"
        )

    def complete_task(self, task_number: str) -> bool:
        """Mark a pending task as completed.

        Args:
            task_number: 1-based position of the task, as typed.

        Returns:
            True if the task was completed and saved.
        """
        tasks = self.storage.read_all()
        index = self.validate_task_number(task_number, len(tasks))
        if index is None:
            return False

        try:
            tasks[index].complete()
        except AlreadyCompletedError as e:
            self.console.print(f"[yellow]⚠️  {escape(str(e))}[/yellow]")
            return False

        if not self.storage.write_all(tasks):
            return False
        self.console.print(f"[green]✅ Task {index + 1} marked as completed[/green]")
        return True

    def remove_task(self, task_number: str) -> bool:
        """Delete a task; later tasks shift down by one position.

        Args:
            task_number: 1-based position of the task, as typed.

        Returns:
            True if the task was removed and the collection saved.
        """
        tasks = self.storage.read_all()
        index = self.validate_task_number(task_number, len(tasks))
        if index is None:
            return False

        removed = tasks.pop(index)

        if not self.storage.write_all(tasks):
            return False
        self.console.print(
            f'🗑️  Task {index + 1} removed: "{escape(removed.description)}"'
        )
        return True
