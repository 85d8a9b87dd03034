"""Contact submission guard - ordered anti-abuse and validation checks."""

import logging
from datetime import UTC, datetime

from brickstone.domain import (
    AllowedOrigins,
    Borough,
    Clock,
    EnquiryComposer,
    InputSanitizer,
    MailerPort,
    SendWindowRateLimiter,
    SubmissionInput,
    SubmissionValidator,
    contains_header_injection,
    tokens_match,
)

from ..exchange import GuardOutcome, HandlerResponse, IncomingRequest
from .session_context import SessionContext
from .token_issuer import TokenIssuer

logger = logging.getLogger(__name__)

# Client-facing messages
METHOD_NOT_ALLOWED = "Method not allowed."
FORBIDDEN = "Forbidden."
INVALID_TOKEN = "Invalid request. Please reload the page and try again."
TOO_MANY_REQUESTS = "Too many requests. Please wait a few minutes and try again."
INVALID_CHARACTERS = "Invalid characters in submission."
DELIVERY_FAILED = (
    "We could not send your message right now. Please email us directly at {fallback}."
)


class SubmissionGuard:
    """Runs a contact form POST through its checklist and sends the enquiry.

    Checks run in order and the first failure decides the response.
    Session changes (token rotation, quota count) are persisted as each
    step completes and are not rolled back by later failures.
    """

    def __init__(
        self,
        allowed_origins: AllowedOrigins,
        token_issuer: TokenIssuer,
        rate_limiter: SendWindowRateLimiter,
        composer: EnquiryComposer,
        mailer: MailerPort,
        clock: Clock,
        fallback_email: str,
        sanitizer: InputSanitizer | None = None,
        validator: SubmissionValidator | None = None,
    ) -> None:
        self._allowed_origins = allowed_origins
        self._token_issuer = token_issuer
        self._rate_limiter = rate_limiter
        self._composer = composer
        self._mailer = mailer
        self._clock = clock
        self._fallback_email = fallback_email
        self._sanitizer = sanitizer or InputSanitizer()
        self._validator = validator or SubmissionValidator()

    def handle(self, request: IncomingRequest, context: SessionContext) -> HandlerResponse:
        """Evaluate a contact submission.

        The session stays locked from acquisition until the response is
        decided, so a token is consumed by exactly one request.
        """
        with context:
            return self._evaluate(request, context)

    def _evaluate(self, request: IncomingRequest, context: SessionContext) -> HandlerResponse:
        if request.method.upper() != "POST":
            logger.info("Contact rejected method=%s", request.method)
            return HandlerResponse.error(
                405,
                METHOD_NOT_ALLOWED,
                GuardOutcome.METHOD_NOT_ALLOWED,
                headers={"Allow": "POST"},
            )

        if not self._is_same_site(request):
            logger.warning(
                "Contact rejected cross-site origin=%s referer=%s",
                request.origin,
                request.referer,
            )
            return HandlerResponse.error(403, FORBIDDEN, GuardOutcome.FORBIDDEN_ORIGIN)

        submission = SubmissionInput.from_form(request.form)

        # Bots get an ordinary success so they learn nothing
        if submission.is_bot:
            logger.info("Contact honeypot triggered, suppressing send")
            return HandlerResponse.success(GuardOutcome.BOT_SUPPRESSED)

        session = context.acquire()

        if not tokens_match(submission.csrf_token, session.csrf_token):
            logger.warning("Contact rejected invalid csrf token session_id=%s", session.session_id)
            return HandlerResponse.error(403, INVALID_TOKEN, GuardOutcome.INVALID_TOKEN)

        # Each token is good for one submission
        self._token_issuer.rotate(session)
        context.persist()

        decision = self._rate_limiter.check_and_count(session)
        context.persist()
        if not decision.allowed:
            logger.info(
                "Contact rate limited session_id=%s sends=%d retry_after=%d",
                session.session_id,
                decision.send_count,
                decision.retry_after,
            )
            return HandlerResponse.error(
                429,
                TOO_MANY_REQUESTS,
                GuardOutcome.RATE_LIMITED,
                headers={"Retry-After": str(decision.retry_after)},
            )

        clean = self._sanitizer.sanitize(submission)

        result = self._validator.validate(clean)
        if not result.ok:
            logger.info(
                "Contact validation failed session_id=%s errors=%d",
                session.session_id,
                len(result.errors),
            )
            return HandlerResponse.error(422, result.message(), GuardOutcome.VALIDATION_FAILED)

        borough = Borough.normalize(clean.borough)

        if contains_header_injection(clean.header_values()):
            logger.warning("Contact rejected header injection session_id=%s", session.session_id)
            return HandlerResponse.error(400, INVALID_CHARACTERS, GuardOutcome.INJECTION_REJECTED)

        sent_at = datetime.fromtimestamp(self._clock.now(), tz=UTC)
        message = self._composer.compose(clean, borough, sent_at)

        if not self._mailer.send(message.to, message.subject, message.body, message.headers):
            logger.error("Contact delivery failed session_id=%s", session.session_id)
            return HandlerResponse.error(
                500,
                DELIVERY_FAILED.format(fallback=self._fallback_email),
                GuardOutcome.DELIVERY_FAILED,
            )

        logger.info(
            "Contact enquiry sent session_id=%s borough=%s",
            session.session_id,
            borough.value or "-",
        )
        return HandlerResponse.success()

    def _is_same_site(self, request: IncomingRequest) -> bool:
        """Matching Origin, or a Referer under an allowed origin."""
        return self._allowed_origins.matches_origin(
            request.origin
        ) or self._allowed_origins.matches_referer(request.referer)
