"""SMTP mailer."""

import logging
import smtplib
from collections.abc import Callable
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

logger = logging.getLogger(__name__)

DEFAULT_SMTP_PORT = 587
DEFAULT_SMTP_TIMEOUT = 10.0


def build_message(to: str, subject: str, body: str, headers: dict[str, str]) -> EmailMessage:
    """Build an RFC 2822 plain-text message.

    Only the given headers plus the standard envelope fields are set;
    nothing identifies the sending software.
    """
    message = EmailMessage()
    message["To"] = to
    message["Subject"] = subject
    for name, value in headers.items():
        message[name] = value
    if "Date" not in message:
        message["Date"] = formatdate(localtime=True)
    if "Message-ID" not in message:
        message["Message-ID"] = make_msgid()
    message.set_content(body, charset="utf-8", cte="8bit")
    return message


class SmtpMailer:
    """Delivers messages through an SMTP relay.

    Transport errors are logged and reported as False; they never reach
    the caller as exceptions.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_SMTP_PORT,
        username: str | None = None,
        password: str | None = None,
        starttls: bool = True,
        timeout: float = DEFAULT_SMTP_TIMEOUT,
        smtp_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._starttls = starttls
        self._timeout = timeout
        self._smtp_factory = smtp_factory

    def send(self, to: str, subject: str, body: str, headers: dict[str, str]) -> bool:
        try:
            message = build_message(to, subject, body, headers)
        except ValueError:
            logger.exception("Refusing to build message to=%s", to)
            return False

        try:
            with self._smtp_factory(self._host, self._port, timeout=self._timeout) as server:
                if self._starttls:
                    server.starttls()
                if self._username and self._password:
                    server.login(self._username, self._password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError):
            logger.exception(
                "SMTP delivery failed host=%s port=%d to=%s", self._host, self._port, to
            )
            return False

        logger.info("SMTP message delivered to=%s", to)
        return True
