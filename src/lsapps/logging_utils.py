"""Logging setup for lsapps.

Stdout carries the listing a launcher reads, so log records only ever go to
the file named by LSAPPS_LOG_FILE. Without it, logging is disabled.
"""

from __future__ import annotations

import logging
from typing import Optional

from .constants import LOG_FILE_ENCODING, LOG_FORMAT
from .errors import LoggingSetupError


def setup_logging(log_file: Optional[str] = None) -> None:
    """Set up logging configuration."""
    if not log_file:
        logging.disable(logging.CRITICAL)
        return

    try:
        handler = logging.FileHandler(log_file, encoding=LOG_FILE_ENCODING)
    except OSError as exc:
        raise LoggingSetupError(log_file, str(exc)) from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.disable(logging.NOTSET)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
