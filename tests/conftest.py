"""
Shared pytest fixtures for padsession tests.

This module provides:
- Redis mocks (call-recording and in-memory) for storage/session tests
- Store, author and session manager fixtures wired over the in-memory mock
"""

import json
import os
import sys
from itertools import count
from unittest.mock import AsyncMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from padsession.modules.author import AuthorModule
from padsession.modules.session import SessionManager
from padsession.modules.storage import KeyValueStore

# Fixed wall clock for expiry checks
NOW = 1_700_000_000


# =============================================================================
# Redis Mocking Infrastructure
# =============================================================================

@pytest.fixture
def mock_redis():
    """Create a call-recording mock Redis client for async operations."""
    redis = AsyncMock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock(return_value=True)
    redis.delete = AsyncMock(return_value=1)
    return redis


@pytest.fixture
def mock_redis_with_data():
    """
    Redis mock with in-memory data storage for more realistic tests.

    This allows testing code that reads back what it writes.
    """
    storage = {}

    redis = AsyncMock()

    async def mock_set(key, value, *args, **kwargs):
        storage[key] = value
        return True

    async def mock_get(key):
        return storage.get(key)

    async def mock_delete(*keys):
        deleted = 0
        for key in keys:
            if key in storage:
                del storage[key]
                deleted += 1
        return deleted

    redis.set = mock_set
    redis.get = mock_get
    redis.delete = mock_delete
    redis._storage = storage  # Expose for test assertions

    return redis


# =============================================================================
# Session Stack Fixtures
# =============================================================================

@pytest.fixture
def store(mock_redis_with_data):
    return KeyValueStore(mock_redis_with_data)


@pytest.fixture
def storage(mock_redis_with_data):
    """Raw in-memory key space, values decoded from JSON."""

    class _View:
        def keys(self):
            return set(mock_redis_with_data._storage)

        def __getitem__(self, key):
            return json.loads(mock_redis_with_data._storage[key])

        def __contains__(self, key):
            return key in mock_redis_with_data._storage

        def put(self, key, value):
            mock_redis_with_data._storage[key] = json.dumps(value)

    return _View()


@pytest.fixture
def author_ids(storage):
    """Seed two existing authors."""
    for author_id in ("a.alice", "a.bob"):
        storage.put(f"globalAuthor:{author_id}", {"colorId": 1, "name": author_id})
    return "a.alice", "a.bob"


@pytest.fixture
def session_manager(store, author_ids):
    """SessionManager with deterministic IDs and a frozen clock."""
    ids = count(1)
    return SessionManager(
        store,
        AuthorModule(store),
        id_generator=lambda: f"s.{next(ids):016d}",
        clock=lambda: NOW,
    )
