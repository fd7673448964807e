"""
formrelay/models/mail_models.py

Value objects passed to the Mail Dispatcher.

The envelope sender and recipient are deliberately absent: the dispatcher
always uses the configured relay account and destination address, so a
submitter-supplied email can only ever appear inside the body text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from formrelay.core.constants import ALLOWED_RESUME_CONTENT_TYPE


@dataclass(frozen=True)
class Attachment:
    """
    A file on local disk to attach to an outgoing email.

    Attributes:
        filename     : Name shown to the recipient (the submitter's original name).
        path         : Where the bytes currently live.
        content_type : MIME type, ``maintype/subtype``.
    """

    filename: str
    path: Path
    content_type: str = ALLOWED_RESUME_CONTENT_TYPE


@dataclass
class OutboundMessage:
    """A plain-text email with zero or one attachment."""

    subject: str
    body: str
    attachments: List[Attachment] = field(default_factory=list)
