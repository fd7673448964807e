"""
formrelay/api/application_controller.py

Handles incoming requests to POST /api/applications.

This layer is responsible only for HTTP concerns:
  - Parsing the multipart form (or a JSON body, which cannot carry a file).
  - Handing the optional 'resume' file to UploadHandler, which rejects
    anything that is not a single PDF of at most 10 MiB before the text
    fields are looked at.
  - Delegating validation and delivery to ApplicationService inside the
    UploadHandler.store() block, so the temporary file is removed before
    the response is returned, whatever the outcome.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  200  The application was relayed by email.
  400  A required field is missing or malformed, the résumé is not a PDF,
       or a file was sent in an unexpected field.
  413  The résumé is larger than 10 MiB.
  500  The SMTP relay failed or an unexpected error occurred.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import FormData, UploadFile

from formrelay.api.dependencies import get_application_service, get_upload_handler
from formrelay.api.errors import error_response
from formrelay.core.constants import (
    APPLICATION_FAILURE_MESSAGE,
    APPLICATION_INVALID_MESSAGE,
    APPLICATION_SUCCESS_MESSAGE,
    UPLOAD_MALFORMED_MESSAGE,
)
from formrelay.core.exceptions import DeliveryError, InvalidSubmissionError, UploadRejectedError
from formrelay.core.logger import get_logger
from formrelay.models.response_models import ErrorResponse, SuccessResponse
from formrelay.services.application_service import ApplicationService
from formrelay.services.upload_handler import UploadHandler

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Applications"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _text_fields(form: FormData) -> Dict[str, Any]:
    """Keep only the text parts of the form; files are UploadHandler's business."""
    return {key: value for key, value in form.multi_items() if isinstance(value, str)}


async def _read_form(request: Request) -> FormData:
    try:
        return await request.form()
    except Exception as exc:
        logger.warning("Malformed application form: %s", exc)
        raise UploadRejectedError(UPLOAD_MALFORMED_MESSAGE) from exc


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.post(
    "/applications",
    response_model=SuccessResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Submit a job application",
)
async def submit_application(
    request: Request,
    uploads: UploadHandler = Depends(get_upload_handler),
    service: ApplicationService = Depends(get_application_service),
) -> JSONResponse:
    """
    Accepts multipart/form-data with the application fields and an
    optional PDF in 'resume':

      curl -F fullName="Jane Doe" -F email=jane@example.com \\
           -F positionWanted=Accountant -F resume=@cv.pdf ...

    Required: fullName, email, positionWanted.  Every other field is
    forwarded into the email as-is.
    """
    # ── 1. JSON bodies carry no file ───────────────────────────────────────────
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            logger.warning("Application rejected — body is not valid JSON.")
            return error_response(APPLICATION_INVALID_MESSAGE)
        if not isinstance(payload, dict):
            return error_response(APPLICATION_INVALID_MESSAGE)
        return await _process(service, payload, uploads, None)

    # ── 2. Multipart: the upload guard runs before the text fields ─────────────
    form = await _read_form(request)
    try:
        resume = uploads.extract_resume(form)
        return await _process(service, _text_fields(form), uploads, resume)
    finally:
        await form.close()


async def _process(
    service: ApplicationService,
    fields: Dict[str, Any],
    uploads: UploadHandler,
    resume: Optional[UploadFile],
) -> JSONResponse:
    logger.info(
        "Application received — position: '%s', résumé: %s",
        str(fields.get("positionWanted", ""))[:120],
        resume.filename if resume is not None else "none",
    )

    async with uploads.store(resume) as stored:
        try:
            await service.submit(fields, stored)

        except InvalidSubmissionError as exc:
            return error_response(str(exc))

        except DeliveryError as exc:
            logger.exception("Error processing application: %s", exc)
            return error_response(APPLICATION_FAILURE_MESSAGE, status=500)

        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error processing application: %s", exc)
            return error_response(APPLICATION_FAILURE_MESSAGE, status=500)

    return JSONResponse(status_code=200, content=SuccessResponse(message=APPLICATION_SUCCESS_MESSAGE).model_dump())
