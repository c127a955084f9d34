"""
Service for managing the task list.

``TaskService`` is a thin layer between the HTTP handlers and the
configured ``TaskStore``.  It adds logging but no validation: names
are stored as given and deleting an unknown id is not an error.  A
new service instance is built per request around the store owned by
the application.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from task_manager_api.app.schemas.task import TaskCreate, TaskRead
from task_manager_api.app.storage.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Create, list and delete tasks through a task store."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    async def list_tasks(self) -> List[TaskRead]:
        return await self.store.list_all()

    async def create_task(self, data: Optional[TaskCreate]) -> TaskRead:
        """Insert a new task and return it with its store‑assigned id.

        ``data`` may be ``None`` when the request carried no body; the
        task is then stored without a name.
        """
        name = data.name if data is not None else None
        task = await self.store.insert(name)
        logger.info("Created task %s", task.id)
        return task

    async def delete_task(self, task_id: str) -> None:
        await self.store.delete_by_id(task_id)
        logger.info("Deleted task %s", task_id)
