"""Rate limit configuration value object."""

from dataclasses import dataclass

# Default business rules
DEFAULT_MAX_SENDS = 3
DEFAULT_WINDOW_SECONDS = 600  # 10 minutes


@dataclass(frozen=True, slots=True)
class RateLimitConfig:
    """Contact submission quota per session (value object)."""

    max_sends: int = DEFAULT_MAX_SENDS
    window_seconds: int = DEFAULT_WINDOW_SECONDS

    def __post_init__(self) -> None:
        if self.max_sends <= 0:
            raise ValueError("Max sends must be positive")
        if self.window_seconds <= 0:
            raise ValueError("Window must be positive")
