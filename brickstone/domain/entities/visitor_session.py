"""Visitor session entity."""

from dataclasses import dataclass

from ..values import SessionId


@dataclass
class VisitorSession:
    """Server-side state for one browser.

    Holds the anti-forgery token and the contact quota counters.
    Counters stay None until the first submission reaches rate limiting.
    """

    id: SessionId
    created_at: float
    last_seen: float
    csrf_token: str | None = None
    send_count: int | None = None
    window_start: float | None = None

    @property
    def session_id(self) -> str:
        """Get session ID as string."""
        return str(self.id)

    def touch(self, now: float) -> None:
        """Update last seen timestamp."""
        self.last_seen = now

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        """Check if the session has been idle longer than the TTL."""
        return (now - self.last_seen) >= ttl_seconds
