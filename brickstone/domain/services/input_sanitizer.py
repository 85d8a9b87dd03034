"""Contact field sanitization."""

import re
from dataclasses import dataclass, field

from ..values import SubmissionInput

# Maximum field lengths in code points
DEFAULT_FIELD_LIMITS: dict[str, int] = {
    "name": 100,
    "email": 254,
    "phone": 30,
    "borough": 30,
    "message": 5000,
}

# Comments, tags and a dangling unterminated tag at the end of the text.
# A "<" followed by whitespace or a digit is plain text ("3 < 5", "<3").
_MARKUP_PATTERN = re.compile(r"<!--.*?(?:-->|$)|<[A-Za-z/!?][^>]*(?:>|$)", re.DOTALL)


def strip_markup(text: str) -> str:
    """Remove anything that looks like HTML/XML markup."""
    return _MARKUP_PATTERN.sub("", text)


@dataclass(frozen=True, slots=True)
class SanitizedSubmission:
    """Contact fields after markup stripping, trimming and truncation."""

    name: str
    email: str
    phone: str
    borough: str
    message: str

    def header_values(self) -> str:
        """Fields that end up in outgoing mail headers."""
        return self.name + self.email


@dataclass
class InputSanitizer:
    """Sanitizes contact fields before they are validated.

    Truncation happens before validation so oversized payloads are
    judged on what will actually be sent.
    """

    limits: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_FIELD_LIMITS))

    def clean(self, value: str, field_name: str) -> str:
        """Strip markup, trim and truncate a single field."""
        text = strip_markup(value).strip()
        limit = self.limits.get(field_name)
        if limit is not None:
            text = text[:limit]
        return text

    def sanitize(self, submission: SubmissionInput) -> SanitizedSubmission:
        """Sanitize every user-facing field of a submission."""
        return SanitizedSubmission(
            name=self.clean(submission.name, "name"),
            email=self.clean(submission.email, "email"),
            phone=self.clean(submission.phone, "phone"),
            borough=self.clean(submission.borough, "borough"),
            message=self.clean(submission.message, "message"),
        )
