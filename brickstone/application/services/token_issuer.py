"""Anti-forgery token issuance."""

import logging
from collections.abc import Callable

from brickstone.domain import AllowedOrigins, VisitorSession, generate_csrf_token

from ..exchange import GuardOutcome, HandlerResponse, IncomingRequest
from .session_context import SessionContext

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed."
FORBIDDEN = "Forbidden."


class TokenIssuer:
    """Issues one anti-forgery token per session.

    The token stays the same until a submission consumes it.
    """

    def __init__(
        self,
        allowed_origins: AllowedOrigins,
        token_factory: Callable[[], str] = generate_csrf_token,
    ) -> None:
        self._allowed_origins = allowed_origins
        self._token_factory = token_factory

    def issue(self, session: VisitorSession) -> str:
        """Return the session token, generating it if absent."""
        if not session.csrf_token:
            session.csrf_token = self._token_factory()
        return session.csrf_token

    def rotate(self, session: VisitorSession) -> str:
        """Replace the session token with a fresh one."""
        session.csrf_token = self._token_factory()
        return session.csrf_token

    def handle(self, request: IncomingRequest, context: SessionContext) -> HandlerResponse:
        """Serve a token request."""
        if request.method.upper() != "GET":
            logger.info("Token request rejected method=%s", request.method)
            return HandlerResponse.error(
                405,
                METHOD_NOT_ALLOWED,
                GuardOutcome.METHOD_NOT_ALLOWED,
                headers={"Allow": "GET"},
            )

        # Absent Origin is fine: same-origin GETs often omit it
        if self._allowed_origins.is_foreign(request.origin):
            logger.warning("Token request from foreign origin=%s", request.origin)
            return HandlerResponse.error(403, FORBIDDEN, GuardOutcome.FORBIDDEN_ORIGIN)

        with context:
            session = context.acquire()
            token = self.issue(session)
            context.persist()

        return HandlerResponse(200, {"token": token}, GuardOutcome.TOKEN_ISSUED)
