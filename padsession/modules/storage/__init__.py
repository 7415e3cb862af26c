"""
Storage Module - Black Box Interface

Purpose: Abstract all data persistence
Interface: StorageModule.connect(), KeyValueStore.get()/set()/remove()
Hidden: Redis specifics, connection pooling, JSON serialization

Can be replaced with any storage backend offering single-key get/set/remove
without affecting other modules.
"""

import json
import logging
import os
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from padsession.errors import StoreError

logger = logging.getLogger(__name__)


class StorageModule:
    """Black box storage connection owner."""

    def __init__(self, connection_url: str = None, password: Optional[str] = None):
        """Initialize storage with connection URL."""
        self.url = connection_url or os.getenv("REDIS_URL", "redis://localhost:6379/0")
        self.password = password
        self._client = None

    async def connect(self) -> redis.Redis:
        """Get storage connection."""
        if not self._client:
            self._client = redis.from_url(
                self.url,
                password=self.password,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    async def disconnect(self):
        """Close storage connection."""
        if self._client:
            await self._client.aclose()
            self._client = None


class KeyValueStore:
    """
    JSON-valued key/value store on top of an async Redis client.

    Only single-key operations are offered. Each call is atomic on its own
    key; nothing spans keys.
    """

    def __init__(self, redis_client):
        """
        Args:
            redis_client: Async Redis client (decode_responses=True)
        """
        self.redis = redis_client

    async def get(self, key: str) -> Optional[Any]:
        """
        Read a value.

        Returns:
            Decoded JSON value or None if the key is absent
        """
        try:
            data = await self.redis.get(key)
        except RedisError as exc:
            raise StoreError(f"get {key} failed: {exc}") from exc

        if data is None:
            return None

        if isinstance(data, bytes):
            data = data.decode("utf-8")

        try:
            return json.loads(data)
        except ValueError as exc:
            raise StoreError(f"value at {key} is not valid JSON") from exc

    async def set(self, key: str, value: Any) -> None:
        """Upsert a value, overwriting it fully."""
        try:
            await self.redis.set(key, json.dumps(value))
        except RedisError as exc:
            raise StoreError(f"set {key} failed: {exc}") from exc

    async def remove(self, key: str) -> None:
        """Delete a key. No-op if absent."""
        try:
            await self.redis.delete(key)
        except RedisError as exc:
            raise StoreError(f"remove {key} failed: {exc}") from exc


__all__ = ["StorageModule", "KeyValueStore"]
