import asyncio
import logging
import secrets
import string
import time
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from padsession.errors import AuthorNotFoundError, SessionNotFoundError, StoreError
from padsession.models import AuthorSessionIndex, SessionInfo

from .validation import parse_valid_until

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"
AUTHOR_INDEX_KEY_PREFIX = "author2sessions:"
SESSION_ID_PREFIX = "s."
SESSION_ID_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


def random_string(length: int) -> str:
    """Random string of [0-9A-Za-z] using a CSPRNG."""
    return "".join(secrets.choice(SESSION_ID_ALPHABET) for _ in range(length))


def generate_session_id(length: int = 16) -> str:
    """Generate a session ID such as `s.Ab3dE5gH7jK9mN1p`."""
    return SESSION_ID_PREFIX + random_string(length)


def session_key(session_id: str) -> str:
    return f"{SESSION_KEY_PREFIX}{session_id}"


def author_index_key(author_id: str) -> str:
    return f"{AUTHOR_INDEX_KEY_PREFIX}{author_id}"


class SessionManager:
    """
    Create, look up, enumerate and delete author sessions.

    A session lives in two keys: its record under `session:<id>` and a
    membership entry under `author2sessions:<authorID>`. The store only
    offers single-key get/set/remove, so the two keys are never updated
    atomically. See `_index_session` and `_unindex_session`.
    """

    def __init__(
        self,
        store,
        authors,
        id_generator: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize session manager.

        Args:
            store: KeyValueStore (async get/set/remove with JSON values)
            authors: AuthorDirectory used for existence checks
            id_generator: Zero-arg callable returning a fresh session ID
            clock: Zero-arg callable returning unix time in seconds
        """
        self.store = store
        self.authors = authors
        self.id_generator = id_generator or generate_session_id
        self.clock = clock or time.time

    async def session_exists(self, session_id: str) -> bool:
        """
        Check whether a session record is present.

        Args:
            session_id: Session identifier

        Returns:
            True if `session:<session_id>` exists
        """
        return await self.store.get(session_key(session_id)) is not None

    async def create_session(self, author_id: str, valid_until: Any) -> str:
        """
        Create a new session for an author.

        Args:
            author_id: Existing author identifier
            valid_until: Expiry as unix seconds (int or numeric string)

        Returns:
            Generated session ID

        Raises:
            AuthorNotFoundError: author does not exist
            InvalidArgumentError: valid_until rejected (four variants)
            StoreError: store call failed

        Logic:
        1. Check author exists
        2. Normalize and check valid_until
        3. Write the session record
        4. Add the session to the author's index
        """
        await self._require_author(author_id)

        expiry = parse_valid_until(valid_until, now=self.clock)

        session_id = self.id_generator()
        session = SessionInfo(author_id=author_id, valid_until=expiry)

        await self.store.set(session_key(session_id), session.to_record())
        await self._index_session(author_index_key(author_id), session_id)

        logger.info("Created session %s for author %s (validUntil=%d)", session_id, author_id, expiry)
        return session_id

    async def get_session_info(self, session_id: str) -> SessionInfo:
        """
        Get a session record.

        Args:
            session_id: Session identifier

        Returns:
            Stored session record

        Raises:
            SessionNotFoundError: no record for session_id
        """
        record = await self.store.get(session_key(session_id))
        if record is None:
            raise SessionNotFoundError()

        try:
            return SessionInfo.model_validate(record)
        except ValidationError as exc:
            raise StoreError(f"malformed session record for {session_id}") from exc

    async def delete_session(self, session_id: str) -> None:
        """
        Delete a session and drop it from its author's index.

        Args:
            session_id: Session identifier

        Raises:
            SessionNotFoundError: no record for session_id (also on a repeat delete)
        """
        session = await self.get_session_info(session_id)
        index_key = author_index_key(session.author_id)

        index = await self._load_index(index_key)

        await self.store.remove(session_key(session_id))
        await self._unindex_session(index_key, index, session_id)

        logger.info("Deleted session %s of author %s", session_id, session.author_id)

    async def list_sessions_of_author(self, author_id: str) -> Dict[str, SessionInfo]:
        """
        List all sessions of an author.

        Args:
            author_id: Existing author identifier

        Returns:
            Mapping of session ID to session record (empty if none)

        Raises:
            AuthorNotFoundError: author does not exist
            SessionNotFoundError: the index names a session with no record
        """
        await self._require_author(author_id)
        return await self._list_sessions_with_key(author_index_key(author_id))

    async def _require_author(self, author_id: str) -> None:
        if not await self.authors.author_exists(author_id):
            raise AuthorNotFoundError()

    async def _load_index(self, index_key: str) -> Optional[AuthorSessionIndex]:
        record = await self.store.get(index_key)
        if record is None:
            return None
        try:
            return AuthorSessionIndex.model_validate(record)
        except ValidationError as exc:
            raise StoreError(f"malformed session index at {index_key}") from exc

    async def _index_session(self, index_key: str, session_id: str) -> None:
        """
        Add a freshly written session to an index entry.

        Runs after the session record is set. A failure or crash between
        the two writes leaves a record that no index points to. Two
        concurrent calls on the same index race on this read-modify-write
        and one addition can be lost.
        """
        index = await self._load_index(index_key) or AuthorSessionIndex()
        index.add(session_id)
        await self.store.set(index_key, index.to_record())

    async def _unindex_session(
        self, index_key: str, index: Optional[AuthorSessionIndex], session_id: str
    ) -> None:
        """
        Remove a session from an index entry read before its record was removed.

        Shares the lost-update window of `_index_session`: a session added
        to the same index between the read and this write is dropped from it.
        """
        if index is None:
            logger.warning("Session %s had no index entry at %s", session_id, index_key)
            return

        index.discard(session_id)
        await self.store.set(index_key, index.to_record())

    async def _list_sessions_with_key(self, index_key: str) -> Dict[str, SessionInfo]:
        """Resolve every member of an index entry into its session record."""
        index = await self._load_index(index_key)
        if index is None:
            return {}

        session_ids = list(index.session_ids)
        try:
            records = await asyncio.gather(
                *(self.get_session_info(session_id) for session_id in session_ids)
            )
        except SessionNotFoundError:
            logger.warning("Index %s references a missing session record", index_key)
            raise

        return dict(zip(session_ids, records))
