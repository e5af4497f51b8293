"""Tests for Task model."""

import pytest
from datetime import datetime, timezone

from taskly.task import Task, Priority, generate_id


class TestTask:
    """Test Task model functionality."""

    def test_task_creation(self):
        """Test basic task creation."""
        task = Task(id="abc", title="Test task")

        assert task.id == "abc"
        assert task.title == "Test task"
        assert task.priority == Priority.LOW
        assert task.completed is False
        assert task.completed_at is None
        assert task.created.tzinfo is not None

    def test_task_completion(self):
        """Test task completion sets the timestamp once."""
        task = Task(id="abc", title="Test task")

        assert task.complete() is True
        assert task.completed is True
        first = task.completed_at
        assert first is not None

        # Completing again changes nothing
        assert task.complete() is False
        assert task.completed_at == first

    def test_naive_timestamps_are_utc(self):
        task = Task(id="abc", title="x", created=datetime(2024, 5, 1, 12, 0, 0))
        assert task.created.tzinfo == timezone.utc


class TestTaskSerialization:
    """Test conversion to and from the JSON objects on disk."""

    def test_to_dict_uses_camel_case_keys(self):
        created = datetime(2024, 5, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        task = Task(id="abc", title="Buy milk", priority=Priority.HIGH, created=created)
        task.complete()

        data = task.to_dict()

        assert data["id"] == "abc"
        assert data["title"] == "Buy milk"
        assert data["priority"] == "high"
        assert data["completed"] is True
        assert data["created"] == "2024-05-01T12:00:00.123Z"
        assert data["completedAt"].endswith("Z")
        assert "completed_at" not in data

    def test_to_dict_omits_missing_completed_at(self):
        data = Task(id="abc", title="x").to_dict()
        assert "completedAt" not in data

    def test_from_dict_reads_existing_files(self):
        """Records written by earlier releases load unchanged."""
        data = {
            "id": "lq2k3x9a0b1c2d3e",
            "title": "Write report",
            "priority": "medium",
            "completed": False,
            "created": "2024-01-15T08:30:00.000Z",
        }

        task = Task.from_dict(data)

        assert task.priority == Priority.MEDIUM
        assert task.completed_at is None
        assert task.created == datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc)
        assert task.to_dict() == data

    def test_unknown_keys_are_preserved(self):
        data = {
            "id": "a",
            "title": "x",
            "priority": "low",
            "completed": False,
            "created": "2024-01-15T08:30:00.000Z",
            "tags": ["home"],
        }

        assert Task.from_dict(data).to_dict()["tags"] == ["home"]

    def test_from_dict_rejects_unknown_priority(self):
        with pytest.raises(ValueError):
            Task.from_dict({"id": "a", "title": "x", "priority": "urgent"})

    @pytest.mark.parametrize("key, value", [
        ("created", 12345),
        ("completedAt", 7),
        ("created", "yesterday"),
        ("title", None),
    ])
    def test_from_dict_rejects_bad_field_values(self, key, value):
        data = {"id": "a", "title": "x", "priority": "low", "completed": False}
        data[key] = value

        with pytest.raises(ValueError):
            Task.from_dict(data)

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(ValueError, match="must be an object"):
            Task.from_dict(["not", "a", "task"])


class TestGenerateId:
    def test_ids_are_lowercase_base36(self):
        task_id = generate_id()
        assert task_id.isalnum()
        assert task_id == task_id.lower()
        assert len(task_id) > 10

    def test_ids_differ(self):
        assert len({generate_id() for _ in range(50)}) == 50
