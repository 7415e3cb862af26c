"""
padsession shared data models.

These models mirror the JSON values persisted under the session and
author2sessions keys. Field aliases keep the stored camelCase names.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class SessionInfo(BaseModel):
    """Stored session record: `session:<sessionID>`."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    author_id: str = Field(..., alias="authorID", description="Owning author")
    valid_until: int = Field(
        ..., alias="validUntil", ge=0, description="Expiry as unix seconds"
    )

    def to_record(self) -> Dict:
        """Serialize to the stored JSON shape."""
        return self.model_dump(by_alias=True)


class AuthorSessionIndex(BaseModel):
    """Author to sessions index: `author2sessions:<authorID>`."""

    model_config = ConfigDict(populate_by_name=True)

    session_ids: Dict[str, int] = Field(default_factory=dict, alias="sessionIDs")

    def add(self, session_id: str) -> None:
        self.session_ids[session_id] = 1

    def discard(self, session_id: str) -> None:
        self.session_ids.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self.session_ids

    def to_record(self) -> Dict:
        return self.model_dump(by_alias=True)
