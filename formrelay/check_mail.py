"""
formrelay/check_mail.py

Diagnostic: ``python -m formrelay.check_mail``

Verifies that the configured SMTP relay accepts our credentials, then
sends one test email to the configured recipient.  Exit status 0 when
both steps succeed, 1 otherwise.
"""

import asyncio
import sys

from formrelay.core.config import load_settings
from formrelay.core.logger import configure_logging, get_logger
from formrelay.services.mail_dispatcher import MailDispatcher

logger = get_logger("formrelay.check_mail")

TEST_SUBJECT = "Test Email Configuration"
TEST_BODY = (
    "If you receive this email, it means your email configuration is "
    "working correctly."
)


async def check(dispatcher: MailDispatcher) -> None:
    await dispatcher.verify()
    logger.info("Server is ready to take our messages")

    await dispatcher.deliver(subject=TEST_SUBJECT, body=TEST_BODY)
    logger.info("Test email sent to %s", dispatcher.recipient)


def main() -> int:
    configure_logging()
    try:
        settings = load_settings()
        asyncio.run(check(MailDispatcher.from_settings(settings)))
    except Exception as exc:  # noqa: BLE001
        logger.error("Mail check failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
