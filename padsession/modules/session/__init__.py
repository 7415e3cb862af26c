"""
Session Module - Black Box Interface

Purpose: Manage author session lifecycle
Interface: session_exists(), create_session(), get_session_info(),
           delete_session(), list_sessions_of_author()
Hidden: Key layout, author index maintenance, expiry validation

Replaceable with any session backend offering the same operations.
"""

from .session import SessionManager, generate_session_id
from .validation import parse_valid_until

__all__ = ["SessionManager", "generate_session_id", "parse_valid_until"]
