"""Infrastructure repositories - data storage implementations."""

from .in_memory_session import DEFAULT_SESSION_TTL, InMemorySessionStore

__all__ = [
    "InMemorySessionStore",
    "DEFAULT_SESSION_TTL",
]
