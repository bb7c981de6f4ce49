"""Logger setup shared by the library modules."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "FIELDOBS_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
        # Emit once, through this handler only.
        logger.propagate = False
    return logger


__all__ = ["get_logger", "LOG_LEVEL_ENV"]
