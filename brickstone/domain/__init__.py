"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import VisitorSession

# Ports
from .ports import MailerPort, SessionStore

# Services
from .services import (
    DEFAULT_FIELD_LIMITS,
    EMAIL_ERROR,
    MESSAGE_ERROR,
    NAME_ERROR,
    PHONE_ERROR,
    Clock,
    EnquiryComposer,
    InputSanitizer,
    RateLimitDecision,
    SanitizedSubmission,
    SendWindowRateLimiter,
    SubmissionValidator,
    contains_header_injection,
    evaluate_window,
    generate_csrf_token,
    tokens_match,
)

# Value Objects
from .values import (
    BOROUGHS,
    CSRF_FIELD,
    HONEYPOT_FIELD,
    NO_PREFERENCE,
    AllowedOrigins,
    Borough,
    OutgoingMessage,
    RateLimitConfig,
    SessionId,
    SubmissionInput,
    ValidationResult,
)

__all__ = [
    # Values
    "AllowedOrigins",
    "Borough",
    "BOROUGHS",
    "NO_PREFERENCE",
    "OutgoingMessage",
    "RateLimitConfig",
    "SessionId",
    "SubmissionInput",
    "ValidationResult",
    "HONEYPOT_FIELD",
    "CSRF_FIELD",
    # Entities
    "VisitorSession",
    # Services
    "Clock",
    "RateLimitDecision",
    "SendWindowRateLimiter",
    "evaluate_window",
    "generate_csrf_token",
    "tokens_match",
    "InputSanitizer",
    "SanitizedSubmission",
    "DEFAULT_FIELD_LIMITS",
    "SubmissionValidator",
    "contains_header_injection",
    "NAME_ERROR",
    "EMAIL_ERROR",
    "MESSAGE_ERROR",
    "PHONE_ERROR",
    "EnquiryComposer",
    # Ports
    "SessionStore",
    "MailerPort",
]
