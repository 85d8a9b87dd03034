"""Contact field validation rules."""

import re

from email_validator import EmailNotValidError, validate_email

from ..values import ValidationResult
from .input_sanitizer import SanitizedSubmission

MIN_NAME_LENGTH = 2
MIN_MESSAGE_LENGTH = 10

NAME_ERROR = "Name must be at least 2 characters."
EMAIL_ERROR = "A valid email address is required."
MESSAGE_ERROR = "Message must be at least 10 characters."
PHONE_ERROR = "Please enter a valid phone number."

PHONE_PATTERN = re.compile(r"[0-9\s+\-().]{7,20}")

# NUL plus every character str.splitlines() breaks on; the email
# package refuses header values containing any of them
HEADER_INJECTION_CHARS = frozenset(
    {
        "\0",
        "\n",
        "\r",
        "\x0b",
        "\x0c",
        "\x1c",
        "\x1d",
        "\x1e",
        "\x85",
        "\u2028",
        "\u2029",
    }
)


def is_valid_email(email: str) -> bool:
    """Check mailbox syntax only (no DNS lookups)."""
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(phone: str) -> bool:
    """Check an optional phone number against the allowed shape."""
    return PHONE_PATTERN.fullmatch(phone) is not None


def contains_header_injection(text: str) -> bool:
    """Check for NUL or any line-breaking character."""
    return any(char in HEADER_INJECTION_CHARS for char in text)


class SubmissionValidator:
    """Validates sanitized contact fields.

    Collects every violation in a fixed order (name, email, message,
    phone) instead of stopping at the first one. Borough is not
    validated here; unknown values are coerced, never rejected.
    """

    def validate(self, submission: SanitizedSubmission) -> ValidationResult:
        errors: list[str] = []

        if len(submission.name) < MIN_NAME_LENGTH:
            errors.append(NAME_ERROR)

        if not is_valid_email(submission.email):
            errors.append(EMAIL_ERROR)

        if len(submission.message) < MIN_MESSAGE_LENGTH:
            errors.append(MESSAGE_ERROR)

        if submission.phone and not is_valid_phone(submission.phone):
            errors.append(PHONE_ERROR)

        return ValidationResult(tuple(errors))
