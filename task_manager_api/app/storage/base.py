"""
Interface shared by all task stores.

The API only needs three capabilities from its storage collaborator:
list every task, insert a task (the store assigns the id) and delete a
task by id.  ``connect`` and ``close`` bracket the application's
lifetime.  Any object providing these coroutines can back the API.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from task_manager_api.app.schemas.task import TaskRead


@runtime_checkable
class TaskStore(Protocol):
    """Storage collaborator for tasks."""

    async def connect(self) -> None:
        """Open connections or files.  Failures are logged, not raised."""

    async def close(self) -> None:
        """Release any resources held by the store."""

    async def list_all(self) -> List[TaskRead]:
        """Return every stored task in the store's natural order."""

    async def insert(self, name: Optional[str]) -> TaskRead:
        """Persist a new task and return it with its assigned id."""

    async def delete_by_id(self, task_id: str) -> None:
        """Delete the task with ``task_id``.  Missing ids are not an error."""
