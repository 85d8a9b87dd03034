"""Anti-forgery token generation and comparison."""

import secrets

CSRF_TOKEN_BYTES = 32  # 256 bits, 64 hex characters


def generate_csrf_token() -> str:
    """Generate a fresh token from the OS random source."""
    return secrets.token_hex(CSRF_TOKEN_BYTES)


def tokens_match(submitted: str | None, expected: str | None) -> bool:
    """Compare tokens in constant time. Empty values never match."""
    if not submitted or not expected:
        return False
    return secrets.compare_digest(submitted.encode("utf-8"), expected.encode("utf-8"))
