"""Domain services - pure business logic operations."""

from .csrf import CSRF_TOKEN_BYTES, generate_csrf_token, tokens_match
from .enquiry_composer import EnquiryComposer
from .input_sanitizer import DEFAULT_FIELD_LIMITS, InputSanitizer, SanitizedSubmission, strip_markup
from .rate_limiter import Clock, RateLimitDecision, SendWindowRateLimiter, evaluate_window
from .submission_validator import (
    EMAIL_ERROR,
    MESSAGE_ERROR,
    NAME_ERROR,
    PHONE_ERROR,
    SubmissionValidator,
    contains_header_injection,
    is_valid_email,
    is_valid_phone,
)

__all__ = [
    "Clock",
    "RateLimitDecision",
    "SendWindowRateLimiter",
    "evaluate_window",
    "CSRF_TOKEN_BYTES",
    "generate_csrf_token",
    "tokens_match",
    "InputSanitizer",
    "SanitizedSubmission",
    "DEFAULT_FIELD_LIMITS",
    "strip_markup",
    "SubmissionValidator",
    "contains_header_injection",
    "is_valid_email",
    "is_valid_phone",
    "NAME_ERROR",
    "EMAIL_ERROR",
    "MESSAGE_ERROR",
    "PHONE_ERROR",
    "EnquiryComposer",
]
