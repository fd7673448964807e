"""
formrelay/services/upload_handler.py

Accepts the optional résumé on the application route and owns its
temporary copy on disk for the lifetime of one request.

    FormData
      └─ UploadHandler.extract_resume()   at most one PDF in field "resume"
           └─ UploadHandler.store()       streamed to upload_dir/<uuid>
                                          removed again when the block exits

Rejections (wrong type, unexpected file field, too large) are raised as
UploadError subclasses before the form fields are looked at; the error
translator maps them to 400 / 413.
"""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Optional

import aiofiles
from starlette.datastructures import FormData, UploadFile

from formrelay.core.constants import (
    ALLOWED_RESUME_CONTENT_TYPE,
    MAX_UPLOAD_BYTES,
    RESUME_FIELD,
    UPLOAD_CHUNK_SIZE,
    UPLOAD_NOT_PDF_MESSAGE,
    UPLOAD_UNEXPECTED_FIELD_MESSAGE,
)
from formrelay.core.exceptions import UploadRejectedError, UploadTooLargeError
from formrelay.core.logger import get_logger
from formrelay.models.mail_models import Attachment

logger = get_logger(__name__)


@dataclass
class StoredUpload:
    """
    An accepted upload, written to the scratch directory.

    Attributes:
        filename     : Name the submitter's browser sent (used for the attachment).
        path         : Generated scratch path; never derived from ``filename``.
        size         : Bytes written.
        content_type : MIME type reported by the client.
    """

    filename: str
    path: Path
    size: int
    content_type: str = ALLOWED_RESUME_CONTENT_TYPE

    def as_attachment(self) -> Attachment:
        return Attachment(filename=self.filename, path=self.path, content_type=self.content_type)


class UploadHandler:
    """
    Single-file upload guard for the application form.

    One instance is shared by all requests; it holds no per-request state.
    """

    def __init__(
        self,
        upload_dir: str | Path,
        max_bytes: int = MAX_UPLOAD_BYTES,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
    ) -> None:
        self._upload_dir = Path(upload_dir)
        self._max_bytes = max_bytes
        self._chunk_size = chunk_size

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    # ── Public API ─────────────────────────────────────────────────────────────

    def extract_resume(self, form: FormData) -> Optional[UploadFile]:
        """
        Return the résumé upload, or None when the form carries no file.

        A file part with an empty filename is what browsers send for an
        untouched file input, so it counts as "no file".

        Raises:
            UploadRejectedError: A file arrived in a field other than
                                 ``resume``, more than one file was sent,
                                 or the résumé is not a PDF.
        """
        resume: Optional[UploadFile] = None

        for key, value in form.multi_items():
            if not isinstance(value, UploadFile) or not value.filename:
                continue
            if key != RESUME_FIELD or resume is not None:
                logger.warning("Unexpected file field '%s' rejected.", key)
                raise UploadRejectedError(UPLOAD_UNEXPECTED_FIELD_MESSAGE)
            resume = value

        if resume is not None and resume.content_type != ALLOWED_RESUME_CONTENT_TYPE:
            logger.warning(
                "Upload '%s' rejected — content type %r is not allowed.",
                resume.filename,
                resume.content_type,
            )
            raise UploadRejectedError(UPLOAD_NOT_PDF_MESSAGE)

        return resume

    @asynccontextmanager
    async def store(self, upload: Optional[UploadFile]) -> AsyncIterator[Optional[StoredUpload]]:
        """
        Write ``upload`` to the scratch directory for the duration of the block.

        The temporary file is removed exactly once when the block exits,
        whether it completes, raises a validation error, or the email send
        fails.  ``store(None)`` simply yields None.

        Raises:
            UploadTooLargeError: The upload exceeds ``max_bytes``.  Nothing
                                 is left on disk.
        """
        if upload is None:
            yield None
            return

        stored = await self._write(upload)
        try:
            yield stored
        finally:
            self.discard(stored)

    def discard(self, stored: StoredUpload) -> None:
        """Delete a stored upload.  A file that is already gone is not an error."""
        stored.path.unlink(missing_ok=True)
        logger.debug("Removed temporary upload %s ('%s').", stored.path.name, stored.filename)

    # ── Internals ──────────────────────────────────────────────────────────────

    async def _write(self, upload: UploadFile) -> StoredUpload:
        filename = upload.filename or "resume.pdf"

        if upload.size is not None and upload.size > self._max_bytes:
            logger.warning("Upload '%s' rejected — %d bytes exceeds limit.", filename, upload.size)
            raise UploadTooLargeError()

        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / uuid.uuid4().hex
        size = 0
        completed = False

        try:
            async with aiofiles.open(path, "wb") as out:
                while True:
                    chunk = await upload.read(self._chunk_size)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self._max_bytes:
                        logger.warning("Upload '%s' rejected — exceeds %d bytes.", filename, self._max_bytes)
                        raise UploadTooLargeError()
                    await out.write(chunk)
            completed = True
        finally:
            if not completed:
                path.unlink(missing_ok=True)

        logger.info("Stored upload '%s' (%d bytes) as %s.", filename, size, path.name)
        return StoredUpload(
            filename=filename,
            path=path,
            size=size,
            content_type=upload.content_type or ALLOWED_RESUME_CONTENT_TYPE,
        )
