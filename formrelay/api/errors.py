"""
formrelay/api/errors.py

Translates exceptions that escape a route into the JSON error shape
``{ "error": "..." }``.

  UploadError             → its own status (400 wrong type / field, 413 too large)
  InvalidSubmissionError  → 400
  anything else           → 500, generic message, full detail in the log
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from formrelay.core.constants import INTERNAL_ERROR_MESSAGE
from formrelay.core.exceptions import AppBaseException, InvalidSubmissionError, UploadError
from formrelay.core.logger import get_logger

logger = get_logger(__name__)


def error_response(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


async def upload_error_handler(request: Request, exc: UploadError) -> JSONResponse:
    logger.warning("Upload rejected on %s (%d): %s", request.url.path, exc.status_code, exc)
    return error_response(str(exc), status=exc.status_code)


async def invalid_submission_handler(request: Request, exc: InvalidSubmissionError) -> JSONResponse:
    logger.warning("Invalid submission on %s: %s", request.url.path, exc)
    return error_response(str(exc))


async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """Safety-net for any AppBaseException that escapes controller-level handling."""
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return error_response(INTERNAL_ERROR_MESSAGE, status=500)


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s: %s", request.url.path, exc)
    return error_response(INTERNAL_ERROR_MESSAGE, status=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UploadError, upload_error_handler)
    app.add_exception_handler(InvalidSubmissionError, invalid_submission_handler)
    app.add_exception_handler(AppBaseException, app_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
