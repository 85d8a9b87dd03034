"""Lazy access to the visitor session for a single request."""

from contextlib import ExitStack

from brickstone.domain import SessionId, SessionStore, VisitorSession


class SessionContext:
    """Resolves the caller's session only when a handler asks for it.

    An unknown or expired session ID from the client is never reused;
    a fresh session with a server-generated ID replaces it.

    The session lock is taken in acquire() and held until release(),
    so requests sharing a cookie run their session steps one at a time.
    Handlers use the context as a `with` block to guarantee the release.
    """

    def __init__(self, store: SessionStore, session_id: SessionId | None = None) -> None:
        self._store = store
        self._requested_id = session_id
        self._session: VisitorSession | None = None
        self._created = False
        self._locks = ExitStack()

    def __enter__(self) -> "SessionContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()

    @property
    def created(self) -> bool:
        """Whether a new session was created during this request."""
        return self._created

    @property
    def session(self) -> VisitorSession | None:
        """The acquired session, None if never acquired."""
        return self._session

    def acquire(self) -> VisitorSession:
        """Lock and get the caller's session, creating it on first contact."""
        if self._session is not None:
            return self._session

        session = None
        if self._requested_id is not None:
            self._locks.enter_context(self._store.lock(self._requested_id))
            session = self._store.get(self._requested_id)

        if session is None:
            session = self._store.create()
            self._locks.enter_context(self._store.lock(session.id))
            self._created = True

        self._session = session
        return session

    def persist(self) -> None:
        """Write the acquired session back to the store."""
        if self._session is not None:
            self._store.save(self._session)

    def release(self) -> None:
        """Release the session lock. Safe to call more than once."""
        self._locks.close()
