"""
formrelay/api/dependencies.py

FastAPI dependency providers.

The long-lived collaborators (mail dispatcher, upload handler) are built
once in the application lifespan and parked on ``app.state``; handlers
receive them through ``Depends`` so tests can swap them via
``app.dependency_overrides`` without touching module globals.
"""

from fastapi import Depends, Request

from formrelay.services.application_service import ApplicationService
from formrelay.services.contact_service import ContactService
from formrelay.services.mail_dispatcher import MailDispatcher
from formrelay.services.upload_handler import UploadHandler


def get_mail_dispatcher(request: Request) -> MailDispatcher:
    return request.app.state.mail_dispatcher


def get_upload_handler(request: Request) -> UploadHandler:
    return request.app.state.upload_handler


def get_application_service(
    dispatcher: MailDispatcher = Depends(get_mail_dispatcher),
) -> ApplicationService:
    return ApplicationService(dispatcher)


def get_contact_service(
    dispatcher: MailDispatcher = Depends(get_mail_dispatcher),
) -> ContactService:
    return ContactService(dispatcher)
