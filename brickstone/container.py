"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from brickstone.application.services import SessionSweeper, SubmissionGuard, TokenIssuer
from brickstone.config import Config
from brickstone.domain import Clock, MailerPort, SessionStore


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    """

    # Handlers
    token_issuer: TokenIssuer
    submission_guard: SubmissionGuard

    # Collaborators
    session_store: SessionStore
    session_sweeper: SessionSweeper
    mailer: MailerPort
    clock: Clock

    # Configuration
    config: Config

    @property
    def session_cookie_name(self) -> str:
        return self.config.session.cookie_name
