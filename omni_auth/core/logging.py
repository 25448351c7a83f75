"""Logging configuration."""

import logging
import sys

from omni_auth.core.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def configure_logging(settings: Settings) -> logging.Handler:
    """Install a single stream handler on the root logger.

    Safe to call more than once; the handler installed by a previous call
    is replaced rather than duplicated.
    """
    global _handler

    root = logging.getLogger()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    root.setLevel(level)

    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return _handler
