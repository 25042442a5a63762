import logging
import os
from typing import Optional, Set

_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Names handed out so far; --verbose / --quiet re-level all of them at once.
_KNOWN: Set[str] = set()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name if name else "tzmeet")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_LOG_LEVEL)
    _KNOWN.add(logger.name)
    return logger


def set_level(level: str) -> None:
    """Re-level every logger created through get_logger (and future ones)."""
    global _LOG_LEVEL
    _LOG_LEVEL = level.upper()
    for name in _KNOWN:
        logging.getLogger(name).setLevel(_LOG_LEVEL)
