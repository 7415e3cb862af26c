"""
Author lookups backed by the shared key-value store.

Author records are owned by the host platform; this module only reads them.
"""

AUTHOR_KEY_PREFIX = "globalAuthor:"


class AuthorModule:
    def __init__(self, store):
        """
        Initialize author module.

        Args:
            store: KeyValueStore shared with the session module
        """
        self.store = store

    async def author_exists(self, author_id: str) -> bool:
        """
        Check if the author record exists.

        Args:
            author_id: Author identifier

        Returns:
            True if `globalAuthor:<author_id>` is present
        """
        author = await self.store.get(f"{AUTHOR_KEY_PREFIX}{author_id}")
        return author is not None
