"""
formrelay/__main__.py

``python -m formrelay``: run the API under uvicorn on the configured port.
"""

import sys

import uvicorn

from formrelay.core.config import load_settings
from formrelay.core.exceptions import ConfigurationError
from formrelay.core.logger import configure_logging, get_logger
from formrelay.main import create_app

logger = get_logger("formrelay")


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging()
        logger.error("Refusing to start: %s", exc)
        return 1

    configure_logging(settings.debug)
    logger.info("Server starting on port %d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
