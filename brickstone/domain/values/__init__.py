"""Domain value objects - immutable data structures."""

from .allowed_origins import AllowedOrigins, normalize_origin
from .borough import BOROUGHS, NO_PREFERENCE, Borough
from .outgoing_message import OutgoingMessage
from .rate_limit_config import DEFAULT_MAX_SENDS, DEFAULT_WINDOW_SECONDS, RateLimitConfig
from .session_id import SessionId
from .submission import CSRF_FIELD, HONEYPOT_FIELD, SubmissionInput, ValidationResult

__all__ = [
    "AllowedOrigins",
    "normalize_origin",
    "Borough",
    "BOROUGHS",
    "NO_PREFERENCE",
    "OutgoingMessage",
    "RateLimitConfig",
    "DEFAULT_MAX_SENDS",
    "DEFAULT_WINDOW_SECONDS",
    "SessionId",
    "SubmissionInput",
    "ValidationResult",
    "HONEYPOT_FIELD",
    "CSRF_FIELD",
]
