"""Session identifier value object."""

import secrets
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionId:
    """Opaque visitor session identifier."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("SessionId cannot be empty")

    @classmethod
    def generate(cls) -> "SessionId":
        """Create a new unguessable session ID."""
        return cls(secrets.token_urlsafe(32))

    def __str__(self) -> str:
        return self.value
