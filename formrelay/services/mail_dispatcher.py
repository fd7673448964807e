"""
formrelay/services/mail_dispatcher.py

Sends plain-text emails, with at most one attachment, to the single
configured recipient through an SMTP relay using aiosmtplib.

    SMTPTransport   connection parameters, built once at startup
      └─ MailDispatcher.deliver(subject, body, attachment?)
           └─ EmailMessage  From = relay account, To = recipient

One send attempt per call.  Transport failures are raised as
DeliveryError; deciding what the end user sees is the caller's job.
"""

from __future__ import annotations

import re
from email.message import EmailMessage
from typing import Optional

import aiofiles
import aiosmtplib

from formrelay.core.config import Settings
from formrelay.core.exceptions import DeliveryError
from formrelay.core.logger import get_logger
from formrelay.models.mail_models import Attachment, OutboundMessage

logger = get_logger(__name__)

# Header values may not carry line breaks; the body keeps them verbatim.
_LINE_BREAKS = re.compile(r"[\r\n]+")


class SMTPTransport:
    """
    Immutable SMTP relay parameters.

    Every send opens its own connection, so a single instance can be
    shared by concurrent requests.  Implicit TLS (SMTPS) is used by default.
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool = True,
    ) -> None:
        self._hostname = hostname
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPTransport":
        return cls(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_pass.get_secret_value(),
        )

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def port(self) -> int:
        return self._port

    async def send(self, message: EmailMessage) -> str:
        """Send ``message`` and return the relay's final response line."""
        _, response = await aiosmtplib.send(
            message,
            hostname=self._hostname,
            port=self._port,
            username=self._username,
            password=self._password,
            use_tls=self._use_tls,
        )
        return response

    async def verify(self) -> None:
        """Connect, authenticate and quit.  Raises on any failure."""
        smtp = aiosmtplib.SMTP(hostname=self._hostname, port=self._port, use_tls=self._use_tls)
        async with smtp:
            await smtp.login(self._username, self._password)


class MailDispatcher:
    """
    Relays outbound messages to the configured recipient.

    The envelope sender is always the relay account and the recipient is
    always the configured address.  Submitter-supplied addresses only ever
    appear in the body.
    """

    def __init__(self, transport: SMTPTransport, sender: str, recipient: str) -> None:
        self._transport = transport
        self._sender = sender
        self._recipient = recipient

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailDispatcher":
        return cls(
            transport=SMTPTransport.from_settings(settings),
            sender=settings.smtp_user,
            recipient=settings.recipient_email,
        )

    @property
    def recipient(self) -> str:
        return self._recipient

    # ── Public API ─────────────────────────────────────────────────────────────

    async def deliver(
        self,
        subject: str,
        body: str,
        attachment: Optional[Attachment] = None,
    ) -> None:
        """
        Send one email.

        Args:
            subject    : Subject line.
            body       : Plain-text body.
            attachment : Optional file to attach under its original name.

        Raises:
            DeliveryError: Connection, authentication or relay rejection.
        """
        outbound = OutboundMessage(
            subject=subject,
            body=body,
            attachments=[attachment] if attachment is not None else [],
        )
        message = await self.build_message(outbound)

        try:
            response = await self._transport.send(message)
        except (aiosmtplib.SMTPException, OSError) as exc:
            raise DeliveryError(
                f"Delivery via {self._transport.hostname}:{self._transport.port} failed: {exc}"
            ) from exc

        logger.info("Email '%s' relayed to %s — %s", subject, self._recipient, response)

    async def build_message(self, outbound: OutboundMessage) -> EmailMessage:
        """Assemble the MIME message, reading any attachment from disk."""
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = self._recipient
        message["Subject"] = _LINE_BREAKS.sub(" ", outbound.subject)
        message.set_content(outbound.body)

        for attachment in outbound.attachments:
            async with aiofiles.open(attachment.path, "rb") as f:
                data = await f.read()
            maintype, _, subtype = attachment.content_type.partition("/")
            message.add_attachment(
                data,
                maintype=maintype,
                subtype=subtype or "octet-stream",
                filename=attachment.filename,
            )

        return message

    async def verify(self) -> None:
        """Check that the relay accepts our credentials."""
        await self._transport.verify()
