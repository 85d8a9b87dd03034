"""Composition root - the ONLY place where dependencies are wired."""

import logging
from pathlib import Path

from brickstone.application.services import SessionSweeper, SubmissionGuard, TokenIssuer
from brickstone.config import Config, MailConfig, load_config
from brickstone.container import Container
from brickstone.domain import (
    AllowedOrigins,
    Clock,
    EnquiryComposer,
    MailerPort,
    RateLimitConfig,
    SendWindowRateLimiter,
)
from brickstone.infrastructure.clock import SystemClock
from brickstone.infrastructure.mail import LoggingMailer, SmtpMailer
from brickstone.infrastructure.repositories import InMemorySessionStore

logger = logging.getLogger(__name__)


def create_mailer(mail: MailConfig) -> MailerPort:
    """Create the configured mail transport."""
    if mail.transport == "smtp":
        if not mail.username or not mail.password:
            logger.warning("SMTP credentials not configured host=%s", mail.host)
        return SmtpMailer(
            host=mail.host,
            port=mail.port,
            username=mail.username,
            password=mail.password,
            starttls=mail.starttls,
            timeout=mail.timeout,
        )
    logger.info("Using log mail transport, enquiries will not be delivered")
    return LoggingMailer()


def build_container(
    config: Config,
    mailer: MailerPort | None = None,
    clock: Clock | None = None,
) -> Container:
    """Wire every dependency from an already loaded config.

    Args:
        config: Validated application configuration.
        mailer: Mail transport override (defaults to the configured one).
        clock: Time source override (defaults to wall clock).

    Returns:
        Fully wired dependency container.
    """
    clock = clock or SystemClock()
    mailer = mailer or create_mailer(config.mail)

    allowed_origins = AllowedOrigins.from_list(config.site.allowed_origins)
    session_store = InMemorySessionStore(clock, ttl_seconds=config.session.ttl_seconds)
    session_sweeper = SessionSweeper(
        session_store, interval_seconds=config.session.sweep_interval_seconds
    )

    token_issuer = TokenIssuer(allowed_origins)
    rate_limiter = SendWindowRateLimiter(
        RateLimitConfig(
            max_sends=config.contact.max_sends,
            window_seconds=config.contact.window_seconds,
        ),
        clock,
    )
    composer = EnquiryComposer(
        site_name=config.site.name,
        source_url=config.site.public_url,
        recipient=config.contact.recipient,
        sender=config.contact.sender,
        sender_name=config.contact.sender_name,
    )

    submission_guard = SubmissionGuard(
        allowed_origins=allowed_origins,
        token_issuer=token_issuer,
        rate_limiter=rate_limiter,
        composer=composer,
        mailer=mailer,
        clock=clock,
        fallback_email=config.contact.fallback_email,
    )

    return Container(
        token_issuer=token_issuer,
        submission_guard=submission_guard,
        session_store=session_store,
        session_sweeper=session_sweeper,
        mailer=mailer,
        clock=clock,
        config=config,
    )


def create_container(config_path: Path | str = "config.yaml") -> Container:
    """Create the dependency container from a config file.

    This is the composition root - the single place where all
    dependencies are created and wired together.
    """
    config = load_config(config_path)
    return build_container(config)
