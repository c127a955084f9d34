"""
API endpoints for the task list.

Three operations are exposed: list every task, create a task and
delete a task by id.  Handlers delegate straight to ``TaskService``;
store errors are not caught and reach the client as HTTP 500.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, status

from task_manager_api.app.api.deps import get_task_service
from task_manager_api.app.schemas.task import TaskCreate, TaskRead
from task_manager_api.app.services.task_service import TaskService

router = APIRouter()


@router.get(
    "/tasks",
    response_model=List[TaskRead],
    summary="List all tasks",
)
async def list_tasks(service: TaskService = Depends(get_task_service)) -> List[TaskRead]:
    """Return every stored task in the store's natural order.

    There is no pagination, filtering or sorting.  An empty store
    yields an empty array.
    """
    return await service.list_tasks()


@router.post(
    "/tasks",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
async def create_task(
    task_in: Optional[TaskCreate] = None,
    service: TaskService = Depends(get_task_service),
) -> TaskRead:
    """Create a task and return it with its generated id.

    The ``name`` field is optional and is not checked for emptiness.
    Creating two tasks with the same name produces two records.
    """
    return await service.create_task(task_in)


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
async def delete_task(
    task_id: str = Path(..., description="Identifier returned when the task was created"),
    service: TaskService = Depends(get_task_service),
) -> None:
    """Delete the task with ``task_id``.

    Responds with HTTP 204 whether or not a task with this id existed.
    """
    await service.delete_task(task_id)
