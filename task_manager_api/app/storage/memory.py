"""In‑process task store, used for tests and demos."""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import uuid4

from task_manager_api.app.schemas.task import TaskRead


class InMemoryTaskStore:
    """Keeps tasks in a dict; contents are lost when the process exits."""

    def __init__(self) -> None:
        self._tasks: Dict[str, Optional[str]] = {}

    async def connect(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def list_all(self) -> List[TaskRead]:
        return [TaskRead(id=task_id, name=name) for task_id, name in self._tasks.items()]

    async def insert(self, name: Optional[str]) -> TaskRead:
        task_id = uuid4().hex
        self._tasks[task_id] = name
        return TaskRead(id=task_id, name=name)

    async def delete_by_id(self, task_id: str) -> None:
        self._tasks.pop(task_id, None)
