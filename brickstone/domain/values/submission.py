"""Contact submission value objects."""

from collections.abc import Mapping
from dataclasses import dataclass

# Form field names posted by the contact form
HONEYPOT_FIELD = "website"
CSRF_FIELD = "csrf_token"


@dataclass(frozen=True, slots=True)
class SubmissionInput:
    """Raw contact form fields for a single request.

    Built once at the request boundary; every field is a plain string,
    empty when the client did not send it.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    borough: str = ""
    message: str = ""
    honeypot: str = ""
    csrf_token: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "SubmissionInput":
        """Create from posted form fields."""

        def field(key: str) -> str:
            value = form.get(key, "")
            return value if isinstance(value, str) else ""

        return cls(
            name=field("name"),
            email=field("email"),
            phone=field("phone"),
            borough=field("borough"),
            message=field("message"),
            honeypot=field(HONEYPOT_FIELD),
            csrf_token=field(CSRF_FIELD),
        )

    @property
    def is_bot(self) -> bool:
        """Humans never see the honeypot field, so any content marks a bot."""
        return self.honeypot.strip() != ""


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of field validation with every violation, in check order."""

    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def message(self) -> str:
        """All errors joined for display."""
        return " ".join(self.errors)
