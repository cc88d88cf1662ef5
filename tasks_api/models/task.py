# tasks_api/models/task.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TaskDraft(BaseModel):
    """A task that has not been persisted yet (no id)."""

    title: str
    description: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Task(TaskDraft):
    id: int
