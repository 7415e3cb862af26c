"""padsession - author session lifecycle for collaborative documents."""

from padsession.errors import (
    AuthorNotFoundError,
    InvalidArgumentError,
    PadSessionError,
    SessionNotFoundError,
    StoreError,
)
from padsession.models import AuthorSessionIndex, SessionInfo
from padsession.modules.session import SessionManager

__version__ = "0.1.0"

__all__ = [
    "SessionManager",
    "SessionInfo",
    "AuthorSessionIndex",
    "PadSessionError",
    "InvalidArgumentError",
    "AuthorNotFoundError",
    "SessionNotFoundError",
    "StoreError",
]
