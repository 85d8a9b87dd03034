"""Session store port - interface for visitor session storage."""

from contextlib import AbstractContextManager
from typing import Protocol

from ..entities import VisitorSession
from ..values import SessionId


class SessionStore(Protocol):
    """Protocol for visitor session storage.

    Implementations serialize reads and writes per session key: callers
    hold lock(session_id) while they read and modify a session.
    """

    def lock(self, session_id: SessionId) -> AbstractContextManager:
        """Get the lock guarding one session."""
        ...

    def get(self, session_id: SessionId) -> VisitorSession | None:
        """Get a live session by ID, None if unknown or expired."""
        ...

    def create(self) -> VisitorSession:
        """Create and store a new empty session."""
        ...

    def save(self, session: VisitorSession) -> None:
        """Persist changes made to a session."""
        ...

    def count(self) -> int:
        """Get number of stored sessions."""
        ...

    def prune(self) -> int:
        """Drop expired sessions. Returns number removed."""
        ...
