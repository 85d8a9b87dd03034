"""Allowed origin set for cross-site request checks."""

from dataclasses import dataclass


def normalize_origin(origin: str) -> str:
    """Strip surrounding whitespace and trailing slashes."""
    return origin.strip().rstrip("/")


@dataclass(frozen=True, slots=True)
class AllowedOrigins:
    """Exact origins treated as legitimate callers (value object)."""

    origins: frozenset[str]

    def __post_init__(self) -> None:
        if not self.origins:
            raise ValueError("At least one allowed origin is required")

    @classmethod
    def from_list(cls, origins: list[str] | tuple[str, ...]) -> "AllowedOrigins":
        normalized = {normalize_origin(o) for o in origins}
        normalized.discard("")
        return cls(frozenset(normalized))

    def matches_origin(self, origin: str | None) -> bool:
        """Check an Origin header value (exact match, trailing slash ignored)."""
        if not origin:
            return False
        return normalize_origin(origin) in self.origins

    def matches_referer(self, referer: str | None) -> bool:
        """Check a Referer header against the allowed origins as a prefix."""
        if not referer:
            return False
        referer = referer.strip()
        for origin in self.origins:
            if referer == origin or referer.startswith(origin + "/"):
                return True
        return False

    def is_foreign(self, origin: str | None) -> bool:
        """True only for an explicitly present origin outside the set."""
        if origin is None or normalize_origin(origin) == "":
            return False
        return not self.matches_origin(origin)

    def __iter__(self):
        return iter(sorted(self.origins))
