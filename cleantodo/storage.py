"""JSON file persistence for the task list."""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape

from cleantodo.exceptions import StorageReadError, StorageWriteError
from cleantodo.task import Task

logger = logging.getLogger(__name__)


class TaskStorage:
    """Reads and writes the whole task collection to a single JSON file.

    The file is never held open: every call opens, fully reads or writes,
    and closes it. There is no locking, so two processes writing the same
    file race and the last writer wins.

    Expected format:
    [
      {
        "id": 1714555800123,
        "description": "Buy milk",
        "status": "pending",
        "createdAt": "2024-05-01T09:30:00.123Z"
      }
    ]
    """

    def __init__(self, path: Union[str, Path], console: Optional[Console] = None):
        self.path = Path(path)
        self.console = console or Console()

    def load(self) -> list[Task]:
        """Load tasks from disk.

        A missing file is an empty collection.

        Raises:
            StorageReadError: If the file cannot be read or parsed.
        """
        if not self.path.exists():
            logger.debug("Tasks file %s does not exist yet", self.path)
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            raise StorageReadError(str(e)) from e

        if not isinstance(data, list):
            raise StorageReadError(f"Expected a list of tasks, got {type(data).__name__}")

        tasks = [Task.from_dict(entry) for entry in data]
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Overwrite the tasks file with the given collection.

        Content goes to a temporary file next to the target, which then
        replaces it. Symlinks are followed and the existing file mode kept.

        Raises:
            StorageWriteError: If the file cannot be written.
        """
        payload = json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)
        target = self.path.resolve()
        tmp_name = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(payload)
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(str(e)) from e
        logger.debug("Wrote %d tasks to %s", len(tasks), self.path)

    def read_all(self) -> list[Task]:
        """Load tasks, reporting problems and falling back to an empty list.

        A corrupt file is left untouched on disk.
        """
        try:
            return self.load()
        except StorageReadError as e:
            logger.debug("Failed to read %s", self.path, exc_info=True)
            self.console.print(f"[red]Error reading tasks file:[/red] {escape(str(e))}")
            return []

    def write_all(self, tasks: list[Task]) -> bool:
        """Save tasks, reporting problems. Returns True on success."""
        try:
            self.save(tasks)
        except StorageWriteError as e:
            logger.debug("Failed to write %s", self.path, exc_info=True)
            self.console.print(f"[red]Error writing tasks file:[/red] {escape(str(e))}")
            return False
        return True
