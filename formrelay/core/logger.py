"""
formrelay/core/logger.py

Centralised logging configuration.
Every module should obtain its logger via:

    from formrelay.core.logger import get_logger
    logger = get_logger(__name__)

``configure_logging()`` is called once by the application factory, after
settings are loaded, so the level follows ``DEBUG``.
"""

import logging
import sys


def _build_handler(debug: bool) -> logging.StreamHandler:
    """Return a stdout handler with a structured, readable format."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if debug else logging.INFO)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(fmt)
    return handler


def configure_logging(debug: bool = False) -> None:
    """Configure the root logger once."""
    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by a test framework); leave it alone.
        return

    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.addHandler(_build_handler(debug))

    # Silence noisy third-party loggers.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    Usage
    -----
    >>> logger = get_logger(__name__)
    >>> logger.info("Service started")
    """
    return logging.getLogger(name)
