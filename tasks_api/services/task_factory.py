# tasks_api/services/task_factory.py
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from tasks_api.models.task import TaskDraft


def build_task_draft(overrides: Optional[Mapping[str, Any]] = None) -> TaskDraft:
    """Default task fields, with `overrides` merged on top. Never assigns an id."""
    now = datetime.now(timezone.utc)
    fields = {
        "title": "Task title",
        "description": "Description",
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides or {})
    return TaskDraft(**fields)
