"""Domain ports - interfaces for infrastructure to implement."""

from .mailer_port import MailerPort
from .session_store import SessionStore

__all__ = [
    "SessionStore",
    "MailerPort",
]
