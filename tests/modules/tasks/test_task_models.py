"""Tests for task models."""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from modules.tasks.models import CreateTaskRequest, Task, TaskUpdate


class TestTask:

    def test_serializes_with_wire_names(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        task = Task(id="abc", title="t", created_at=now, updated_at=now)
        data = task.model_dump(by_alias=True)
        assert data["createdAt"] == now
        assert data["updatedAt"] == now
        assert data["description"] == ""
        assert data["completed"] is False

    def test_accepts_wire_names(self):
        task = Task.model_validate({
            "id": "abc",
            "title": "t",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-01T00:00:00Z",
        })
        assert task.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestCreateTaskRequest:

    def test_defaults(self):
        request = CreateTaskRequest(title="t")
        assert request.description == ""
        assert request.completed is False

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title(self, title):
        with pytest.raises(ValidationError):
            CreateTaskRequest(title=title)

    def test_title_too_long(self):
        with pytest.raises(ValidationError):
            CreateTaskRequest(title="x" * 501)


class TestTaskUpdate:

    def test_absent_vs_empty(self):
        update = TaskUpdate.model_validate({"description": ""})
        assert update.changes() == {"description": ""}
        assert not update.is_empty()

    def test_empty(self):
        update = TaskUpdate.model_validate({})
        assert update.is_empty()
        assert update.changes() == {}

    def test_several_fields(self):
        update = TaskUpdate.model_validate({"title": "a", "completed": False})
        assert update.changes() == {"title": "a", "completed": False}

    @pytest.mark.parametrize("field", ["title", "description", "completed"])
    def test_null_rejected(self, field):
        with pytest.raises(ValidationError):
            TaskUpdate.model_validate({field: None})

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            TaskUpdate.model_validate({"title": "  "})

    def test_immutable_fields_rejected(self):
        with pytest.raises(ValidationError):
            TaskUpdate.model_validate({"id": "x"})
