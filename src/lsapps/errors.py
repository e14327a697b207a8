"""Custom exception types for lsapps."""

from __future__ import annotations


class LsappsError(Exception):
    """Base class for all lsapps errors."""


class LoggingSetupError(LsappsError):
    def __init__(self, log_file: str, reason: str) -> None:
        super().__init__(f"Could not open log file '{log_file}': {reason}")
