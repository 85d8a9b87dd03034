"""Borough preference value object."""

from dataclasses import dataclass

NO_PREFERENCE = "No preference"

BOROUGHS: frozenset[str] = frozenset(
    {
        "",
        "manhattan",
        "brooklyn",
        "queens",
        "bronx",
        "staten-island",
    }
)


@dataclass(frozen=True, slots=True)
class Borough:
    """Preferred borough selected on the contact form.

    Unknown values are coerced to no preference instead of being rejected.
    """

    value: str = ""

    def __post_init__(self) -> None:
        if self.value not in BOROUGHS:
            raise ValueError(f"Unknown borough: {self.value}")

    @classmethod
    def normalize(cls, raw: str) -> "Borough":
        """Build a borough, silently dropping anything outside the enum."""
        if raw in BOROUGHS:
            return cls(raw)
        return cls()

    @property
    def is_set(self) -> bool:
        return self.value != ""

    def display_name(self) -> str:
        """Human readable label ("staten-island" -> "Staten Island")."""
        if not self.value:
            return NO_PREFERENCE
        return " ".join(word.capitalize() for word in self.value.split("-"))
