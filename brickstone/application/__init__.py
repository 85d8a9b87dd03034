"""Application layer - request handlers built on the domain."""

from .exchange import GuardOutcome, HandlerResponse, IncomingRequest
from .services import SessionContext, SessionSweeper, SubmissionGuard, TokenIssuer

__all__ = [
    "GuardOutcome",
    "HandlerResponse",
    "IncomingRequest",
    "SessionContext",
    "SessionSweeper",
    "SubmissionGuard",
    "TokenIssuer",
]
