"""In-memory visitor session store."""

import logging
from threading import Lock

from brickstone.domain import Clock, SessionId, VisitorSession

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = 7200  # 2 hours idle


class InMemorySessionStore:
    """Process-local session store.

    Sessions expire after being idle for the TTL. Expiry is checked
    lazily on access and in prune(), which the session sweeper calls
    periodically.

    Each live session has its own lock so one request at a time can
    read and modify it.
    """

    def __init__(self, clock: Clock, ttl_seconds: float = DEFAULT_SESSION_TTL) -> None:
        if ttl_seconds <= 0:
            raise ValueError("Session TTL must be positive")
        self._clock = clock
        self._ttl = ttl_seconds
        self._sessions: dict[str, VisitorSession] = {}
        self._session_locks: dict[str, Lock] = {}
        self._lock = Lock()

    def lock(self, session_id: SessionId) -> Lock:
        """Get the lock guarding a session.

        Unknown IDs get a private lock: there is nothing to share, and
        forged cookies must not grow the lock table.
        """
        key = str(session_id)
        with self._lock:
            if key not in self._sessions:
                return Lock()
            return self._session_locks.setdefault(key, Lock())

    def get(self, session_id: SessionId) -> VisitorSession | None:
        """Get a live session by ID."""
        now = self._clock.now()
        key = str(session_id)
        with self._lock:
            session = self._sessions.get(key)
            if session is None:
                return None
            if session.is_expired(now, self._ttl):
                self._drop(key)
                logger.debug("Session expired session_id=%s", session_id)
                return None
            session.touch(now)
            return session

    def create(self) -> VisitorSession:
        """Create and store a new session."""
        now = self._clock.now()
        session = VisitorSession(id=SessionId.generate(), created_at=now, last_seen=now)
        with self._lock:
            self._sessions[session.session_id] = session
        return session

    def save(self, session: VisitorSession) -> None:
        """Store the session (replaces any previous state)."""
        session.touch(self._clock.now())
        with self._lock:
            self._sessions[session.session_id] = session

    def count(self) -> int:
        """Get total session count."""
        with self._lock:
            return len(self._sessions)

    def prune(self) -> int:
        """Remove all expired sessions."""
        now = self._clock.now()
        with self._lock:
            expired = [
                key
                for key, session in self._sessions.items()
                if session.is_expired(now, self._ttl)
            ]
            for key in expired:
                self._drop(key)
        if expired:
            logger.debug("Pruned expired sessions count=%d", len(expired))
        return len(expired)

    def _drop(self, key: str) -> None:
        # Caller holds self._lock
        del self._sessions[key]
        self._session_locks.pop(key, None)
