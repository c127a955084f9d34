"""Tests for TaskService"""

import logging

from task_manager_api.app.schemas.task import TaskCreate
from task_manager_api.app.services.task_service import TaskService


async def test_create_task_passes_name_to_store(memory_store):
    service = TaskService(memory_store)

    task = await service.create_task(TaskCreate(name="Buy milk"))

    assert await memory_store.list_all() == [task]


async def test_create_task_without_body(memory_store):
    task = await TaskService(memory_store).create_task(None)

    assert task.name is None


async def test_create_and_delete_are_logged(memory_store, caplog):
    service = TaskService(memory_store)

    with caplog.at_level(logging.INFO, logger="task_manager_api.app.services.task_service"):
        task = await service.create_task(TaskCreate(name="Logged"))
        await service.delete_task(task.id)

    assert f"Created task {task.id}" in caplog.text
    assert f"Deleted task {task.id}" in caplog.text
    assert await service.list_tasks() == []
