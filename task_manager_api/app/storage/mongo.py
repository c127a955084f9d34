"""
MongoDB task store.

Tasks are documents ``{"_id": ObjectId, "name": ...}`` in a single
collection, accessed through the asynchronous ``motor`` driver.  The
client is created in ``connect`` and reused for the lifetime of the
store.  A failed ping at startup is logged and the store stays
usable: later operations will raise until the server becomes
reachable, and those errors surface as HTTP 500 responses.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient

from task_manager_api.app.schemas.task import TaskRead

logger = logging.getLogger(__name__)


class MongoTaskStore:
    """Task store backed by a MongoDB collection."""

    def __init__(
        self,
        url: str,
        database: str,
        collection: str = "tasks",
        timeout_ms: int = 5000,
    ) -> None:
        self.url = url
        self.database_name = database
        self.collection_name = collection
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self.collection = None

    async def connect(self) -> None:
        self.client = AsyncIOMotorClient(self.url, serverSelectionTimeoutMS=self.timeout_ms)
        self.collection = self.client[self.database_name][self.collection_name]
        try:
            await self.client.admin.command("ping")
        except Exception as exc:
            logger.error("MongoDB connection error (%s): %s", self.url, exc)
            return
        logger.info("MongoDB connected: %s/%s", self.url, self.database_name)

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            self.collection = None

    @staticmethod
    def _document_to_task(document: Dict[str, Any]) -> TaskRead:
        return TaskRead(id=str(document["_id"]), name=document.get("name"))

    async def list_all(self) -> List[TaskRead]:
        return [self._document_to_task(document) async for document in self.collection.find()]

    async def insert(self, name: Optional[str]) -> TaskRead:
        result = await self.collection.insert_one({"name": name})
        return TaskRead(id=str(result.inserted_id), name=name)

    async def delete_by_id(self, task_id: str) -> None:
        # ObjectId raises InvalidId for malformed identifiers.
        await self.collection.delete_one({"_id": ObjectId(task_id)})
