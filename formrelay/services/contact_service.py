"""
formrelay/services/contact_service.py

Relays contact-form messages.  Same shape as ApplicationService, minus
the attachment.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from formrelay.core.constants import CONTACT_INVALID_MESSAGE
from formrelay.core.exceptions import InvalidSubmissionError
from formrelay.core.logger import get_logger
from formrelay.models.submission_models import ContactSubmission
from formrelay.services.mail_dispatcher import MailDispatcher

logger = get_logger(__name__)

_BODY_TEMPLATE = """\
New Contact Form Submission

From: {name}
Email: {email}

Message:
{message}
"""


class ContactService:
    """Validates and relays contact messages."""

    def __init__(self, dispatcher: MailDispatcher) -> None:
        self._dispatcher = dispatcher

    async def submit(self, payload: Mapping[str, Any]) -> ContactSubmission:
        """
        Raises:
            InvalidSubmissionError: name, email or message missing or malformed.
            DeliveryError:          The SMTP relay failed.
        """
        submission = self.validate(payload)

        await self._dispatcher.deliver(
            subject=self.subject_for(submission),
            body=self.render_body(submission),
        )

        logger.info("Contact message from '%s' relayed.", submission.name)
        return submission

    @staticmethod
    def validate(payload: Mapping[str, Any]) -> ContactSubmission:
        try:
            return ContactSubmission.model_validate(dict(payload))
        except ValidationError as exc:
            logger.warning(
                "Contact message rejected — invalid field(s): %s",
                ", ".join(".".join(str(p) for p in e["loc"]) for e in exc.errors()),
            )
            raise InvalidSubmissionError(CONTACT_INVALID_MESSAGE) from exc

    @staticmethod
    def subject_for(submission: ContactSubmission) -> str:
        return f"New Contact Form Message from {submission.name}"

    @staticmethod
    def render_body(submission: ContactSubmission) -> str:
        return _BODY_TEMPLATE.format(
            name=submission.name,
            email=submission.email,
            message=submission.message,
        )
