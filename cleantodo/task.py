"""Task module for the task list."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional

from cleantodo.exceptions import AlreadyCompletedError, StorageReadError


class TaskStatus(str, Enum):
    """Lifecycle state of a task."""

    PENDING = "pending"
    COMPLETED = "completed"


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

STATUS_GLYPHS = {
    TaskStatus.PENDING: "⏳",
    TaskStatus.COMPLETED: "✅",
}


def now_iso(moment: Optional[datetime] = None) -> str:
    """Return a UTC ISO-8601 timestamp with millisecond precision.

    The format matches ``2024-05-01T09:30:00.123Z``.
    """
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Task:
    """Represents a task in the list.

    Attributes:
        id: Creation time in milliseconds since the epoch.
        description: Trimmed, non-empty description of the task.
        status: Whether the task is pending or completed.
        created_at: ISO-8601 timestamp of creation.
        completed_at: ISO-8601 timestamp of completion (if completed).
    """

    id: int
    description: str
    status: TaskStatus = TaskStatus.PENDING
    created_at: str = ""
    completed_at: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    def complete(self, now: Optional[datetime] = None) -> None:
        """Mark the task as completed.

        Raises:
            AlreadyCompletedError: If the task was completed before.
        """
        if self.completed:
            raise AlreadyCompletedError("Task is already completed")
        self.status = TaskStatus.COMPLETED
        self.completed_at = now_iso(now)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the task."""
        data: dict[str, Any] = {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        if self.completed_at is not None:
            data["completedAt"] = self.completed_at
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Build a task from its persisted representation.

        Raises:
            StorageReadError: If required fields are missing or invalid.
        """
        if not isinstance(data, dict):
            raise StorageReadError(f"Expected a task object, got {type(data).__name__}")
        try:
            task = cls(
                id=int(data["id"]),
                description=data["description"],
                status=TaskStatus(data["status"]),
                created_at=data["createdAt"],
                completed_at=data.get("completedAt"),
            )
        except KeyError as e:
            raise StorageReadError(f"Task entry is missing field {e}") from e
        except (TypeError, ValueError, OverflowError) as e:
            raise StorageReadError(f"Invalid task entry: {e}") from e

        for name, value in (
            ("description", task.description),
            ("createdAt", task.created_at),
            ("completedAt", task.completed_at),
        ):
            if not isinstance(value, str) and not (name == "completedAt" and value is None):
                raise StorageReadError(f"Invalid task entry: {name} must be a string")
        return task

    def __str__(self) -> str:
        return f"{STATUS_GLYPHS[self.status]} {self.description}"


def create_task(description: str, now: Optional[datetime] = None) -> Task:
    """Create a new pending task.

    The caller is responsible for passing a description that is not
    empty once trimmed.
    """
    moment = now or datetime.now(timezone.utc)
    return Task(
        id=(moment - EPOCH) // timedelta(milliseconds=1),
        description=description.strip(),
        status=TaskStatus.PENDING,
        created_at=now_iso(moment),
    )
