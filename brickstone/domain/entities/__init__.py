"""Domain entities - objects with identity."""

from .visitor_session import VisitorSession

__all__ = [
    "VisitorSession",
]
