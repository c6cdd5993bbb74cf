"""Tests for the Task model."""

from datetime import datetime, timezone

import pytest

from cleantodo import Task, TaskStatus, create_task
from cleantodo.exceptions import AlreadyCompletedError, StorageReadError
from cleantodo.task import now_iso


MOMENT = datetime(2024, 5, 1, 9, 30, 0, 123000, tzinfo=timezone.utc)


class TestCreateTask:
    """Tests for task construction."""

    def test_task_creation(self):
        """Test creating a new task."""
        task = create_task("Test task", now=MOMENT)
        assert task.description == "Test task"
        assert task.status is TaskStatus.PENDING
        assert task.created_at == "2024-05-01T09:30:00.123Z"
        assert task.completed_at is None

    def test_id_is_creation_time_in_milliseconds(self):
        """Test that the id is the millisecond timestamp."""
        task = create_task("Test task", now=MOMENT)
        assert task.id == 1714555800123

    def test_description_is_trimmed(self):
        """Test surrounding whitespace is dropped."""
        task = create_task("   Buy milk  \n")
        assert task.description == "Buy milk"

    def test_default_timestamp_is_current(self):
        """Test created_at defaults to now in UTC."""
        before = now_iso()
        task = create_task("Test task")
        after = now_iso()
        assert before <= task.created_at <= after
        assert task.created_at.endswith("Z")


class TestTaskComplete:
    """Tests for the pending -> completed transition."""

    def test_task_complete(self):
        """Test completing a task."""
        task = create_task("Test task", now=MOMENT)
        task.complete(now=MOMENT)
        assert task.completed
        assert task.status is TaskStatus.COMPLETED
        assert task.completed_at == "2024-05-01T09:30:00.123Z"

    def test_complete_twice_raises(self):
        """Test a completed task cannot be completed again."""
        task = create_task("Test task")
        task.complete(now=MOMENT)
        with pytest.raises(AlreadyCompletedError):
            task.complete()
        assert task.completed_at == "2024-05-01T09:30:00.123Z"

    def test_task_str(self):
        """Test string representation of task."""
        task = create_task("Test task")
        assert str(task) == "⏳ Test task"
        task.complete()
        assert str(task) == "✅ Test task"


class TestTaskSerialization:
    """Tests for the persisted representation."""

    def test_pending_task_omits_completed_at(self):
        task = create_task("Walk dog", now=MOMENT)
        assert task.to_dict() == {
            "id": 1714555800123,
            "description": "Walk dog",
            "status": "pending",
            "createdAt": "2024-05-01T09:30:00.123Z",
        }

    def test_completed_task_round_trip(self):
        task = create_task("Walk dog", now=MOMENT)
        task.complete(now=MOMENT)
        data = task.to_dict()
        assert data["status"] == "completed"
        assert data["completedAt"] == "2024-05-01T09:30:00.123Z"
        assert Task.from_dict(data) == task

    def test_from_dict_missing_field(self):
        with pytest.raises(StorageReadError, match="description"):
            Task.from_dict({"id": 1, "status": "pending", "createdAt": "x"})

    def test_from_dict_unknown_status(self):
        with pytest.raises(StorageReadError):
            Task.from_dict(
                {"id": 1, "description": "a", "status": "doing", "createdAt": "x"}
            )

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(StorageReadError):
            Task.from_dict(["not", "a", "task"])

    @pytest.mark.parametrize("field", ["description", "createdAt", "completedAt"])
    def test_from_dict_rejects_null_text_fields(self, field):
        data = create_task("Walk dog", now=MOMENT).to_dict()
        data["completedAt"] = "2024-05-01T10:00:00.000Z"
        data[field] = None if field != "completedAt" else 42
        with pytest.raises(StorageReadError, match="must be a string"):
            Task.from_dict(data)

    def test_from_dict_rejects_overflowing_id(self):
        data = create_task("Walk dog", now=MOMENT).to_dict()
        data["id"] = float("inf")
        with pytest.raises(StorageReadError):
            Task.from_dict(data)
