"""Outgoing email value object."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class OutgoingMessage:
    """A composed plain-text email ready for a mailer."""

    to: str
    subject: str
    body: str
    headers: dict[str, str] = field(default_factory=dict)
