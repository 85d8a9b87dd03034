"""Request and response types shared by the web layer and the handlers."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class GuardOutcome(str, Enum):
    """How a request was resolved."""

    TOKEN_ISSUED = "token_issued"
    ACCEPTED = "accepted"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    FORBIDDEN_ORIGIN = "forbidden_origin"
    BOT_SUPPRESSED = "bot_suppressed"
    INVALID_TOKEN = "invalid_token"
    RATE_LIMITED = "rate_limited"
    VALIDATION_FAILED = "validation_failed"
    INJECTION_REJECTED = "injection_rejected"
    DELIVERY_FAILED = "delivery_failed"


@dataclass(frozen=True, slots=True)
class IncomingRequest:
    """HTTP request data the handlers need, populated once at the boundary."""

    method: str
    origin: str | None = None
    referer: str | None = None
    form: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class HandlerResponse:
    """Status, JSON body and extra headers produced by a handler."""

    status: int
    body: dict
    outcome: GuardOutcome
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def success(cls, outcome: GuardOutcome = GuardOutcome.ACCEPTED) -> "HandlerResponse":
        return cls(200, {"success": True}, outcome)

    @classmethod
    def error(
        cls,
        status: int,
        message: str,
        outcome: GuardOutcome,
        headers: dict[str, str] | None = None,
    ) -> "HandlerResponse":
        return cls(status, {"success": False, "error": message}, outcome, headers or {})
