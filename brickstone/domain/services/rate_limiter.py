"""Per-session send quota with a lazily rolled fixed window."""

import math
from dataclasses import dataclass
from typing import Protocol

from ..entities import VisitorSession
from ..values import RateLimitConfig


class Clock(Protocol):
    """Protocol for time source (allows testing)."""

    def now(self) -> float:
        """Get current time in seconds."""
        ...


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    """Result of a quota check."""

    allowed: bool
    send_count: int
    window_start: float
    retry_after: int = 0


def evaluate_window(
    now: float,
    window_start: float | None,
    send_count: int | None,
    config: RateLimitConfig,
) -> RateLimitDecision:
    """Decide whether one more send fits in the current window.

    Pure function of its inputs. An absent or elapsed window starts over
    at (0, now). When allowed, the returned count already includes the
    send being attempted.
    """
    if window_start is None or send_count is None:
        window_start, send_count = now, 0
    elif now - window_start >= config.window_seconds:
        window_start, send_count = now, 0

    if send_count >= config.max_sends:
        remaining = window_start + config.window_seconds - now
        return RateLimitDecision(
            allowed=False,
            send_count=send_count,
            window_start=window_start,
            retry_after=max(0, math.floor(remaining)),
        )

    return RateLimitDecision(
        allowed=True,
        send_count=send_count + 1,
        window_start=window_start,
    )


class SendWindowRateLimiter:
    """Applies the send quota to a visitor session.

    Counts before field validation so malformed submissions also
    consume quota.
    """

    def __init__(self, config: RateLimitConfig, clock: Clock) -> None:
        self._config = config
        self._clock = clock

    @property
    def config(self) -> RateLimitConfig:
        return self._config

    def check_and_count(self, session: VisitorSession) -> RateLimitDecision:
        """Evaluate the quota and record the attempt on the session."""
        decision = evaluate_window(
            self._clock.now(),
            session.window_start,
            session.send_count,
            self._config,
        )
        session.window_start = decision.window_start
        session.send_count = decision.send_count
        return decision
