"""Mailer port - interface for outbound email delivery."""

from typing import Protocol


class MailerPort(Protocol):
    """Protocol for sending a plain-text email.

    Implementations report failure by returning False rather than raising.
    """

    def send(self, to: str, subject: str, body: str, headers: dict[str, str]) -> bool:
        """Send a message. Returns True on success."""
        ...
