"""
Task storage backends.

``build_task_store`` picks the implementation named by
``settings.task_store``.  The Mongo driver is imported only when the
Mongo store is requested.
"""

import logging

from task_manager_api.app.core.config import Settings
from task_manager_api.app.storage.base import TaskStore
from task_manager_api.app.storage.memory import InMemoryTaskStore
from task_manager_api.app.storage.sqlite import SQLiteTaskStore

logger = logging.getLogger(__name__)

__all__ = ["TaskStore", "InMemoryTaskStore", "SQLiteTaskStore", "build_task_store"]


def build_task_store(settings: Settings) -> TaskStore:
    """Create the task store configured in ``settings``.

    Raises
    ------
    ValueError
        If ``settings.task_store`` names an unknown backend.
    """
    kind = settings.task_store.strip().lower()
    logger.info("Using %s task store", kind)
    if kind == "mongo":
        from task_manager_api.app.storage.mongo import MongoTaskStore

        return MongoTaskStore(
            url=settings.mongo_url,
            database=settings.mongo_database,
            collection=settings.mongo_collection,
            timeout_ms=settings.mongo_timeout_ms,
        )
    if kind == "sqlite":
        return SQLiteTaskStore(settings.resolve_path(settings.database_url))
    if kind == "memory":
        return InMemoryTaskStore()
    raise ValueError(f"Unknown task store: {settings.task_store!r}")
