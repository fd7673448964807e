"""formrelay/services/__init__.py: public API of the services package."""

from formrelay.services.application_service import ApplicationService
from formrelay.services.contact_service import ContactService
from formrelay.services.mail_dispatcher import MailDispatcher, SMTPTransport
from formrelay.services.upload_handler import StoredUpload, UploadHandler

__all__ = [
    "ApplicationService",
    "ContactService",
    "MailDispatcher",
    "SMTPTransport",
    "StoredUpload",
    "UploadHandler",
]
