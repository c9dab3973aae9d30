"""Application logging helpers.

Console logging is always enabled; a rotating file handler is added when the
``LOG_FILE`` environment variable is set.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging() -> None:
    """Configure root logging from ``LOG_LEVEL`` and ``LOG_FILE``.

    Does nothing if the root logger already has handlers, so repeated settings
    imports (and pytest's own capture handlers) are left alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


__all__ = ["LOG_FORMAT", "configure_logging"]
