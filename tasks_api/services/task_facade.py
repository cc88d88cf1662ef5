# tasks_api/services/task_facade.py
from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional

from tasks_api.core.errors import ValidationFailure, missing_parameter_message
from tasks_api.models.task import Task, TaskDraft
from tasks_api.services.task_dao import TaskStore
from tasks_api.services.task_factory import build_task_draft

log = logging.getLogger(__name__)


class TaskFacade:
    """Business rules in front of the store."""

    def __init__(
        self,
        store: TaskStore,
        factory: Callable[[Optional[Mapping[str, Any]]], TaskDraft] = build_task_draft,
    ) -> None:
        self.store = store
        self.factory = factory

    async def get(self, task_id: int) -> Task:
        return await self.store.get(task_id)

    async def get_all(self) -> List[Task]:
        return await self.store.get_all()

    async def create(self, draft: Mapping[str, Any]) -> Task:
        if not draft.get("title"):
            raise ValidationFailure(missing_parameter_message("title"))
        return await self.store.create(self.factory(draft))

    async def update(self, task: Mapping[str, Any]) -> Task:
        # a missing description is also reported as a missing title
        if not task.get("title") or not task.get("description"):
            log.debug("update rejected: id=%s", task.get("id"))
            raise ValidationFailure(missing_parameter_message("title"))
        return await self.store.update(task)

    async def remove(self, task_id: int) -> Task:
        return await self.store.remove(task_id)
