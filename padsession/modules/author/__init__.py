"""
Author Module - Black Box Interface

Purpose: Answer whether an author identity exists
Interface: author_exists()
Hidden: Author record key layout

Any object implementing AuthorDirectory can stand in for this module.
"""

from .author import AUTHOR_KEY_PREFIX, AuthorModule
from .interfaces import AuthorDirectory

__all__ = ["AuthorModule", "AuthorDirectory", "AUTHOR_KEY_PREFIX"]
