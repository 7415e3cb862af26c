"""
Session manager factory following Black Box Design principles.

This factory:
- Connects storage based on configuration
- Wires store, author lookups and session manager together
- Returns only the session manager facade
"""

import logging
from typing import Any, Optional, Tuple

from padsession.logging_config import configure_logging
from padsession.modules.author import AuthorModule
from padsession.modules.config import ConfigModule, get_config
from padsession.modules.session import SessionManager, generate_session_id
from padsession.modules.storage import KeyValueStore, StorageModule

logger = logging.getLogger(__name__)


class SessionManagerFactory:
    """Composition root for the session stack."""

    @staticmethod
    def build(config: ConfigModule, redis_client: Any) -> SessionManager:
        """
        Build a session manager on top of an existing Redis client.

        Args:
            config: Configuration module
            redis_client: Async Redis client

        Returns:
            SessionManager facade
        """
        store = KeyValueStore(redis_client)
        authors = AuthorModule(store)
        id_length = config.get("session_id_length", 16)

        logger.info("Session manager built (session id length %d)", id_length)
        return SessionManager(
            store,
            authors,
            id_generator=lambda: generate_session_id(id_length),
        )


async def create_session_manager(
    config: Optional[ConfigModule] = None,
) -> Tuple[SessionManager, StorageModule]:
    """
    Connect Redis and build a session manager.

    The caller owns the returned StorageModule and should
    `await storage.disconnect()` on shutdown.
    """
    config = config or get_config()
    configure_logging(config.get("log_level", "INFO"))

    storage = StorageModule(config.redis_url, password=config.get("redis_password"))
    redis_client = await storage.connect()

    return SessionManagerFactory.build(config, redis_client), storage
