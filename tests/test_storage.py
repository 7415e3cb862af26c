"""
Unit tests for the storage module.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import TimeoutError as RedisTimeoutError

from padsession.errors import StoreError
from padsession.modules.storage import KeyValueStore, StorageModule


@pytest.mark.asyncio
async def test_set_serializes_json(mock_redis):
    """Test values are written as JSON strings."""
    store = KeyValueStore(mock_redis)

    await store.set("session:s.1", {"authorID": "a.1", "validUntil": 10})

    mock_redis.set.assert_called_once()
    key, payload = mock_redis.set.call_args[0]
    assert key == "session:s.1"
    assert json.loads(payload) == {"authorID": "a.1", "validUntil": 10}


@pytest.mark.asyncio
async def test_get_decodes_json(mock_redis):
    """Test stored JSON (str or bytes) is decoded."""
    store = KeyValueStore(mock_redis)

    mock_redis.get.return_value = '{"sessionIDs": {"s.1": 1}}'
    assert await store.get("author2sessions:a.1") == {"sessionIDs": {"s.1": 1}}

    mock_redis.get.return_value = b'{"authorID": "a.1"}'
    assert await store.get("session:s.1") == {"authorID": "a.1"}


@pytest.mark.asyncio
async def test_get_absent_returns_none(mock_redis):
    """Test missing keys read as None."""
    store = KeyValueStore(mock_redis)

    assert await store.get("session:missing") is None
    mock_redis.get.assert_called_once_with("session:missing")


@pytest.mark.asyncio
async def test_get_invalid_json(mock_redis):
    """Test undecodable values raise StoreError."""
    mock_redis.get.return_value = "{not json"
    store = KeyValueStore(mock_redis)

    with pytest.raises(StoreError):
        await store.get("session:s.1")


@pytest.mark.asyncio
async def test_remove_deletes_key(mock_redis):
    """Test remove issues DEL and tolerates absent keys."""
    mock_redis.delete.return_value = 0
    store = KeyValueStore(mock_redis)

    await store.remove("session:s.1")

    mock_redis.delete.assert_called_once_with("session:s.1")


@pytest.mark.asyncio
@pytest.mark.parametrize("method, args", [("get", ("k",)), ("set", ("k", 1)), ("remove", ("k",))])
async def test_redis_errors_become_store_errors(mock_redis, method, args):
    """Test every Redis failure is raised as StoreError."""
    error = RedisTimeoutError("timed out")
    mock_redis.get.side_effect = error
    mock_redis.set.side_effect = error
    mock_redis.delete.side_effect = error
    store = KeyValueStore(mock_redis)

    with pytest.raises(StoreError) as exc_info:
        await getattr(store, method)(*args)

    assert exc_info.value.__cause__ is error
    assert exc_info.value.kind == "StoreError"


@pytest.mark.asyncio
async def test_storage_module_connect_and_disconnect():
    """Test the Redis client is created once and closed on disconnect."""
    client = MagicMock()
    client.aclose = AsyncMock()

    with patch("padsession.modules.storage.redis.from_url", return_value=client) as from_url:
        storage = StorageModule("redis://cache:6379/2", password="secret")

        assert await storage.connect() is client
        assert await storage.connect() is client
        from_url.assert_called_once_with(
            "redis://cache:6379/2",
            password="secret",
            encoding="utf-8",
            decode_responses=True,
        )

        await storage.disconnect()

    client.aclose.assert_awaited_once()
    assert storage._client is None


def test_storage_module_url_from_env():
    """Test REDIS_URL is used when no URL is given."""
    with patch.dict("os.environ", {"REDIS_URL": "redis://env-host:6380/1"}):
        assert StorageModule().url == "redis://env-host:6380/1"
