# src/transcripts/logging_config.py
import logging
from typing import Optional

from .config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger once per process.

    The Lambda runtime already attaches a handler to the root logger, so only
    the level is set there. Locally (no handlers) a stream handler is added.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    root.setLevel((level or LOG_LEVEL).upper())
    # boto's wire logging is noisy at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)
    return root
