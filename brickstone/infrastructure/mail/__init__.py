"""Mail infrastructure - outbound delivery."""

from .logging_mailer import LoggingMailer
from .smtp_mailer import SmtpMailer, build_message

__all__ = [
    "SmtpMailer",
    "LoggingMailer",
    "build_message",
]
