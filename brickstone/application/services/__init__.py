"""Application services - use case implementations."""

from .session_context import SessionContext
from .session_sweeper import SessionSweeper
from .submission_guard import SubmissionGuard
from .token_issuer import TokenIssuer

__all__ = [
    "SessionContext",
    "SessionSweeper",
    "SubmissionGuard",
    "TokenIssuer",
]
