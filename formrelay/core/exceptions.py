"""
formrelay/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
"""

from formrelay.core.constants import UPLOAD_TOO_LARGE_MESSAGE


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Startup ────────────────────────────────────────────────────────────────────

class ConfigurationError(AppBaseException):
    """Raised at startup when a required setting is missing or invalid."""


# ── Upload exceptions ──────────────────────────────────────────────────────────

class UploadError(AppBaseException):
    """Base for upload-layer rejections. Carries the HTTP status to report."""

    status_code: int = 400


class UploadRejectedError(UploadError):
    """Raised for a non-PDF résumé, an unexpected file field or a bad payload."""


class UploadTooLargeError(UploadError):
    """Raised when a résumé exceeds the maximum upload size."""

    status_code = 413

    def __init__(self, message: str = UPLOAD_TOO_LARGE_MESSAGE) -> None:
        super().__init__(message)


# ── Submission exceptions ──────────────────────────────────────────────────────

class InvalidSubmissionError(AppBaseException):
    """Raised when a required form field is missing or malformed."""


# ── Delivery exceptions ────────────────────────────────────────────────────────

class DeliveryError(AppBaseException):
    """Raised when the SMTP relay cannot be reached or refuses the message."""
