"""Development mailer that logs messages instead of sending them."""

import logging

from .smtp_mailer import build_message

logger = logging.getLogger(__name__)


class LoggingMailer:
    """Writes outgoing messages to the log. Nothing is kept in memory."""

    def send(self, to: str, subject: str, body: str, headers: dict[str, str]) -> bool:
        try:
            message = build_message(to, subject, body, headers)
        except ValueError:
            logger.exception("Refusing to build message to=%s", to)
            return False
        logger.info(
            "Mail not sent (log transport) to=%s subject=%s\n%s", to, subject, message.as_string()
        )
        return True
