"""
SQLite task store.

Tasks live in a single ``tasks`` table.  A new connection is opened
for every operation and closed afterwards, so the store object itself
holds no connection and can be shared freely between requests.  The
integer primary key is exposed to clients as a string to keep the
``id`` type identical across stores.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from task_manager_api.app.schemas.task import TaskRead

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT
)
"""


class SQLiteTaskStore:
    """Task store backed by a SQLite database file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new connection with rows keyed by column name."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    async def connect(self) -> None:
        try:
            with self.get_cursor() as cursor:
                cursor.execute(SCHEMA)
        except sqlite3.Error as exc:
            logger.error("SQLite initialisation failed for %s: %s", self.path, exc)
            return
        logger.info("SQLite task store ready at %s", self.path)

    async def close(self) -> None:
        return None

    async def list_all(self) -> List[TaskRead]:
        with self.get_cursor() as cursor:
            rows = cursor.execute("SELECT id, name FROM tasks ORDER BY id").fetchall()
        return [TaskRead(id=str(row["id"]), name=row["name"]) for row in rows]

    async def insert(self, name: Optional[str]) -> TaskRead:
        with self.get_cursor() as cursor:
            cursor.execute("INSERT INTO tasks (name) VALUES (?)", (name,))
            task_id = cursor.lastrowid
        return TaskRead(id=str(task_id), name=name)

    async def delete_by_id(self, task_id: str) -> None:
        with self.get_cursor() as cursor:
            cursor.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
