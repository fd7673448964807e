"""
formrelay/api/contact_controller.py

Handles incoming requests to POST /api/contact.

Responses:
  200  The message was relayed by email.
  400  The body is not a JSON object, or name / email / message is
       missing or malformed.  Nothing is sent.
  500  The SMTP relay failed or an unexpected error occurred.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from formrelay.api.dependencies import get_contact_service
from formrelay.api.errors import error_response
from formrelay.core.constants import (
    CONTACT_FAILURE_MESSAGE,
    CONTACT_INVALID_MESSAGE,
    CONTACT_SUCCESS_MESSAGE,
)
from formrelay.core.exceptions import DeliveryError, InvalidSubmissionError
from formrelay.core.logger import get_logger
from formrelay.models.response_models import ErrorResponse, SuccessResponse
from formrelay.services.contact_service import ContactService

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post(
    "/contact",
    response_model=SuccessResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Send a contact message",
)
async def submit_contact(
    request: Request,
    service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """
    Accepts a JSON body:

        { "name": "Alice", "email": "alice@example.com", "message": "Hello" }

    All three fields are required text; email must look like local@domain.tld.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Contact message rejected — body is not valid JSON.")
        return error_response(CONTACT_INVALID_MESSAGE)

    if not isinstance(payload, dict):
        logger.warning("Contact message rejected — body is not a JSON object.")
        return error_response(CONTACT_INVALID_MESSAGE)

    try:
        await service.submit(payload)

    except InvalidSubmissionError as exc:
        return error_response(str(exc))

    except DeliveryError as exc:
        logger.exception("Error sending contact message: %s", exc)
        return error_response(CONTACT_FAILURE_MESSAGE, status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error sending contact message: %s", exc)
        return error_response(CONTACT_FAILURE_MESSAGE, status=500)

    return JSONResponse(status_code=200, content=SuccessResponse(message=CONTACT_SUCCESS_MESSAGE).model_dump())
