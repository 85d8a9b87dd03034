"""Shared test fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient

from brickstone.app import create_app
from brickstone.application import SessionContext, TokenIssuer
from brickstone.composition import build_container
from brickstone.config import Config
from brickstone.domain import (
    AllowedOrigins,
    EnquiryComposer,
    InputSanitizer,
    RateLimitConfig,
    SendWindowRateLimiter,
    SubmissionInput,
)
from brickstone.infrastructure.repositories import InMemorySessionStore

SITE_ORIGIN = "https://www.brickstonerealtygroups.com"
FOREIGN_ORIGIN = "https://evil.example.net"

START_TIME = 1_700_000_000.0  # 2023-11-14 22:13:20 UTC


def valid_form(**overrides: str) -> dict[str, str]:
    """Form fields for a submission that passes every check."""
    form = {
        "name": "Jane Rivera",
        "email": "jane.rivera@gmail.com",
        "phone": "(718) 555-0142",
        "borough": "brooklyn",
        "message": "Looking for a two bedroom near Prospect Park from June.",
        "website": "",
        "csrf_token": "",
    }
    form.update(overrides)
    return form


# ============= Mock Fixtures =============


class FakeClock:
    """Fake clock for testing time windows."""

    def __init__(self, start_time: float = START_TIME):
        self._time = start_time

    def now(self) -> float:
        return self._time

    def advance(self, seconds: float) -> None:
        self._time += seconds


class FakeMailer:
    """Fake mailer recording every send."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent: list[dict] = []

    def send(self, to: str, subject: str, body: str, headers: dict[str, str]) -> bool:
        self.sent.append({"to": to, "subject": subject, "body": body, "headers": dict(headers)})
        return self.succeed


class SequenceTokens:
    """Deterministic token factory: tok-1, tok-2, ..."""

    def __init__(self):
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"tok-{self.count}"


@pytest.fixture
def fake_clock():
    """Fake clock starting at a fixed wall-clock time."""
    return FakeClock()


@pytest.fixture
def fake_mailer():
    """Mailer that always succeeds."""
    return FakeMailer()


@pytest.fixture
def token_factory():
    """Deterministic token factory."""
    return SequenceTokens()


# ============= Domain Fixtures =============


@pytest.fixture
def allowed_origins():
    """Allow-set with the public site origins."""
    return AllowedOrigins.from_list([SITE_ORIGIN, "https://brickstonerealtygroups.com"])


@pytest.fixture
def rate_limit_config():
    """Default rate limit config (3 sends per 600 s)."""
    return RateLimitConfig()


@pytest.fixture
def rate_limiter(rate_limit_config, fake_clock):
    """Rate limiter on the fake clock."""
    return SendWindowRateLimiter(rate_limit_config, fake_clock)


@pytest.fixture
def sanitizer():
    """Default input sanitizer."""
    return InputSanitizer()


@pytest.fixture
def composer():
    """Enquiry composer with production-like settings."""
    return EnquiryComposer(
        site_name="Brickstone Realty Group",
        source_url=SITE_ORIGIN,
        recipient="info@brickstonerealty.com",
        sender="no-reply@brickstonerealtygroups.com",
        sender_name="Brickstone Realty Website",
    )


@pytest.fixture
def sample_input():
    """A valid raw submission."""
    return SubmissionInput.from_form(valid_form())


# ============= Session Fixtures =============


@pytest.fixture
def session_store(fake_clock):
    """Empty in-memory session store."""
    return InMemorySessionStore(fake_clock, ttl_seconds=3600)


@pytest.fixture
def session_context(session_store):
    """Session context for a first-time visitor."""
    return SessionContext(session_store)


@pytest.fixture
def token_issuer(allowed_origins, token_factory):
    """Token issuer with deterministic tokens."""
    return TokenIssuer(allowed_origins, token_factory=token_factory)


# ============= App Fixtures =============


@pytest.fixture
def app_config():
    """Config used by the app-level tests."""
    return Config.model_validate(
        {
            "site": {"public_url": SITE_ORIGIN},
            "contact": {"fallback_email": "info@brickstonerealty.com"},
            "mail": {"transport": "log"},
        }
    )


@pytest.fixture
def container(app_config, fake_mailer, fake_clock):
    """Fully wired container with fakes for mail and time."""
    return build_container(app_config, mailer=fake_mailer, clock=fake_clock)


@pytest.fixture
def client(container):
    """Test client for the app."""
    return TestClient(create_app(container))
