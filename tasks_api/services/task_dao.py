# tasks_api/services/task_dao.py
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from tasks_api.core.errors import NotFoundError, not_found_message
from tasks_api.models.task import Task, TaskDraft

log = logging.getLogger(__name__)

# fields the caller can never overwrite through update()
_IMMUTABLE_FIELDS = ("id", "created_at")


class TaskStore:
    """In-memory task storage. Async so it can be swapped for a real database.

    Records handed out are copies; the map itself never leaves the instance.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    async def create(self, draft: TaskDraft) -> Task:
        async with self._lock:
            task = Task(**draft.model_dump(), id=self._next_id)
            self._next_id += 1
            self._tasks[task.id] = task
            log.info("task created: id=%s", task.id)
            return task.model_copy()

    async def get(self, task_id: int) -> Task:
        async with self._lock:
            return self._require(task_id).model_copy()

    async def get_all(self) -> List[Task]:
        async with self._lock:
            return [t.model_copy() for t in self._tasks.values()]

    async def update(self, task: Mapping[str, Any]) -> Task:
        async with self._lock:
            current = self._require(task["id"])
            changes = {k: v for k, v in task.items() if k not in _IMMUTABLE_FIELDS}
            changes["updated_at"] = datetime.now(timezone.utc)
            merged = current.model_copy(update=changes)
            self._tasks[current.id] = merged
            log.info("task updated: id=%s", current.id)
            return merged.model_copy()

    async def remove(self, task_id: int) -> Task:
        async with self._lock:
            task = self._require(task_id)
            del self._tasks[task_id]
            log.info("task removed: id=%s", task_id)
            return task

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(not_found_message("Task"))
        return task
