"""
formrelay/services/application_service.py

Turns a job application into an email for the recruiter:

    form fields
      └─ validate()      → ApplicationSubmission  (or InvalidSubmissionError)
           └─ render_body() / subject_for()
                └─ MailDispatcher.deliver(..., résumé attachment)

The résumé's temporary file is owned by the caller's
``UploadHandler.store()`` block, so it is removed on every path out of
``submit()``.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from formrelay.core.constants import APPLICATION_INVALID_MESSAGE
from formrelay.core.exceptions import InvalidSubmissionError
from formrelay.core.logger import get_logger
from formrelay.models.submission_models import ApplicationSubmission
from formrelay.services.mail_dispatcher import MailDispatcher
from formrelay.services.upload_handler import StoredUpload

logger = get_logger(__name__)

_BODY_TEMPLATE = """\
New Job Application Received

Personal Information:
Full Name: {full_name}
Email: {email}
Phone: {phone}
Birth Date: {birth_date}
Marital Status: {marital_status}
Address: {address}

Education:
Diploma: {diploma}
School: {school}
Graduation Year: {grad_year}

Work Experience:
Last Job: {last_job}
Company: {company}
Job Duration: {job_duration}
Job Description: {job_description}

Position Details:
Position Wanted: {position_wanted}
Contract Type: {contract_type}
Availability: {availability}
Languages: {languages}
Has License: {has_license}

Motivation:
{motivation}
"""


class ApplicationService:
    """Validates, formats and relays job applications."""

    def __init__(self, dispatcher: MailDispatcher) -> None:
        self._dispatcher = dispatcher

    # ── Public API ─────────────────────────────────────────────────────────────

    async def submit(
        self,
        fields: Mapping[str, Any],
        resume: Optional[StoredUpload] = None,
    ) -> ApplicationSubmission:
        """
        Validate the application and send it with the optional résumé.

        Args:
            fields : Text fields from the form (camelCase keys).
            resume : The stored résumé, if one was uploaded.

        Returns:
            The validated submission.

        Raises:
            InvalidSubmissionError: A required field is missing or malformed.
            DeliveryError:          The SMTP relay failed.
        """
        submission = self.validate(fields)

        await self._dispatcher.deliver(
            subject=self.subject_for(submission),
            body=self.render_body(submission),
            attachment=resume.as_attachment() if resume is not None else None,
        )

        logger.info(
            "Application from '%s' for '%s' relayed (%s).",
            submission.full_name,
            submission.position_wanted,
            f"résumé '{resume.filename}'" if resume is not None else "no résumé",
        )
        return submission

    @staticmethod
    def validate(fields: Mapping[str, Any]) -> ApplicationSubmission:
        try:
            return ApplicationSubmission.model_validate(dict(fields))
        except ValidationError as exc:
            logger.warning(
                "Application rejected — invalid field(s): %s",
                ", ".join(".".join(str(p) for p in e["loc"]) for e in exc.errors()),
            )
            raise InvalidSubmissionError(APPLICATION_INVALID_MESSAGE) from exc

    @staticmethod
    def subject_for(submission: ApplicationSubmission) -> str:
        return f"New Job Application - {submission.full_name} for {submission.position_wanted}"

    @staticmethod
    def render_body(submission: ApplicationSubmission) -> str:
        """Every section and line is always present; missing values render empty."""
        values: Dict[str, str] = {
            name: "" if value is None else value
            for name, value in submission.model_dump().items()
        }
        return _BODY_TEMPLATE.format(**values)
