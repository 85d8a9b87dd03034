"""Rental enquiry email composition."""

from dataclasses import dataclass
from datetime import datetime
from email.utils import formataddr

from ..values import Borough, OutgoingMessage
from .input_sanitizer import SanitizedSubmission

SEPARATOR = "-" * 59
LABEL_WIDTH = 19  # "Preferred Borough: " plus padding
NOT_PROVIDED = "Not provided"


def _row(label: str, value: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{value}"


@dataclass(frozen=True)
class EnquiryComposer:
    """Builds the notification email sent to the brokerage inbox.

    Reply-To points at the enquirer so staff can answer directly.
    No header identifies the software that produced the message.
    """

    site_name: str
    source_url: str
    recipient: str
    sender: str
    sender_name: str

    def subject_for(self, name: str) -> str:
        return f"New Rental Enquiry from {name} | {self.site_name}"

    def compose(
        self,
        submission: SanitizedSubmission,
        borough: Borough,
        sent_at: datetime,
    ) -> OutgoingMessage:
        """Compose the enquiry message."""
        lines = [
            f"New rental enquiry received via {self.source_url}",
            "",
            SEPARATOR,
            "CONTACT DETAILS",
            SEPARATOR,
            _row("Name", submission.name),
            _row("Email", submission.email),
            _row("Phone", submission.phone or NOT_PROVIDED),
            _row("Preferred Borough", borough.display_name()),
            SEPARATOR,
            "MESSAGE",
            SEPARATOR,
            submission.message,
            "",
            SEPARATOR,
            f"Sent:   {sent_at.strftime('%a, %d %b %Y %H:%M:%S %Z').strip()}",
            f"Source: {self.source_url}#contact",
            SEPARATOR,
            "Reply-To is set to the enquirer's email address.",
            "Just hit Reply in your email client to respond to them.",
        ]

        headers = {
            "From": formataddr((self.sender_name, self.sender)),
            "Reply-To": formataddr((submission.name, submission.email)),
        }

        return OutgoingMessage(
            to=self.recipient,
            subject=self.subject_for(submission.name),
            body="\n".join(lines) + "\n",
            headers=headers,
        )
