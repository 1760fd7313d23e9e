# app/infra/repo/mongo_client.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.config import Settings
from app.domain.errors import DatabaseConnectionError

log = logging.getLogger("meddb.mongo")


class MongoConnection:
    """
    Process-wide, lazily established handle to the medicines collection.

    Cold start: first caller creates the client, pings, binds db/collection.
    Warm start: the cached collection is returned as-is (no liveness check).
    Establishment runs under an asyncio.Lock so concurrent first requests
    share a single client.
    """

    def __init__(self, uri: str, db_name: str, collection: str,
                 client_factory: Callable[[str], Any] = AsyncIOMotorClient) -> None:
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection
        self._client_factory = client_factory
        self._client: Optional[AsyncIOMotorClient] = None
        self._coll: Optional[AsyncIOMotorCollection] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(settings.mongodb_uri, settings.db_name, settings.collection)

    @property
    def is_connected(self) -> bool:
        return self._coll is not None

    async def collection(self) -> AsyncIOMotorCollection:
        if self._coll is not None:
            return self._coll

        async with self._lock:
            if self._coll is None:
                client = None
                try:
                    client = self._client_factory(self.uri)
                    await client.admin.command("ping")
                except PyMongoError as e:
                    log.error("Mongo connection error: %s", e)
                    if client is not None:
                        client.close()
                    raise DatabaseConnectionError("Failed to connect to database") from e

                self._client = client
                self._coll = client[self.db_name][self.collection_name]
                log.info("NEW connection to MongoDB: %s %s", self.db_name, self.collection_name)
        return self._coll

    async def ping(self) -> bool:
        await self.collection()
        await self._client.admin.command("ping")
        return True

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            log.info("Closed MongoDB connection")
        self._client = None
        self._coll = None
