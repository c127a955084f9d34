"""
FastAPI dependencies shared by the endpoints.

The task store is owned by the application: ``create_app`` places it
on ``app.state.task_store`` and these helpers hand it to the route
handlers, so no module keeps a global database handle.
"""

from fastapi import Depends, Request

from task_manager_api.app.services.task_service import TaskService
from task_manager_api.app.storage.base import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """Return the task store attached to the running application."""
    return request.app.state.task_store


def get_task_service(store: TaskStore = Depends(get_task_store)) -> TaskService:
    """Build a ``TaskService`` around the application's store."""
    return TaskService(store)
