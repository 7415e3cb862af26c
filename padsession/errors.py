"""Project-level exception hierarchy."""

from typing import Dict


class PadSessionError(Exception):
    """Base for all padsession exceptions."""

    kind = "PadSessionError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        """Structured error value handed back to callers."""
        return {"kind": self.kind, "message": self.message}


class InvalidArgumentError(PadSessionError):
    """A caller-supplied argument is malformed."""

    kind = "InvalidArgument"


class ValidUntilNotANumberError(InvalidArgumentError):
    def __init__(self):
        super().__init__("validUntil is not a number")


class ValidUntilNegativeError(InvalidArgumentError):
    def __init__(self):
        super().__init__("validUntil is a negative number")


class ValidUntilFloatError(InvalidArgumentError):
    def __init__(self):
        super().__init__("validUntil is a float value")


class ValidUntilInPastError(InvalidArgumentError):
    def __init__(self):
        super().__init__("validUntil is in the past")


class AuthorNotFoundError(PadSessionError):
    """Referenced author does not exist."""

    kind = "AuthorNotFound"

    def __init__(self, message: str = "authorID does not exist"):
        super().__init__(message)


class SessionNotFoundError(PadSessionError):
    """Referenced session does not exist."""

    kind = "SessionNotFound"

    def __init__(self, message: str = "sessionID does not exist"):
        super().__init__(message)


class StoreError(PadSessionError):
    """Key-value store operation failed."""

    kind = "StoreError"
