"""Author collaborator interface following Black Box Design principles."""
from typing import Protocol


class AuthorDirectory(Protocol):
    """Protocol for author existence checks - allows swappable implementations."""

    async def author_exists(self, author_id: str) -> bool:
        """
        Check whether an author is known.

        Args:
            author_id: Author identifier

        Returns:
            True if the author exists
        """
        ...
