"""Domain exceptions."""
from typing import Optional


class GhostfeedError(Exception):
    """Base class for all service errors."""


class RecordSourceError(GhostfeedError):
    """A record source could not return its collection."""

    def __init__(self, kind: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.status_code = status_code


class RecordLoadError(GhostfeedError):
    """One of the collection fetches failed; the snapshot was not replaced."""

    def __init__(self, kind: str, cause: BaseException):
        super().__init__(f"Failed to load {kind}: {cause}")
        self.kind = kind
        self.cause = cause


class SessionNotActiveError(GhostfeedError):
    """No authenticated session is active for the given id."""

    def __init__(self, session_id: str):
        super().__init__(f"Session '{session_id}' is not active")
        self.session_id = session_id
