"""Minimal single-section reader for .desktop files.

Only the leading ``[Desktop Entry]`` group is read. Parsing stops at the first
other bracketed header (``[Desktop Action new-window]`` and friends), so keys
from action groups never override the entry's own ``Name`` or ``Exec``.

This is deliberately not a full Desktop Entry parser: there is no comment
handling, no localized key lookup and no whitespace trimming around ``=``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .constants import (
    DESKTOP_ENTRY_HEADER,
    DESKTOP_FILE_SUFFIX,
    KEY_VALUE_SEPARATOR,
    LINE_TERMINATORS,
    SECTION_CLOSE,
    SECTION_OPEN,
)
from .models import Descriptor

logger = logging.getLogger(__name__)


def is_desktop_file(name: str) -> bool:
    return name.endswith(DESKTOP_FILE_SUFFIX)


def parse_desktop_file(path: str | Path) -> Descriptor:
    """Return the key/value pairs of the entry section, or {} if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_desktop_lines(handle)
    except OSError as exc:
        logger.debug("Skipping unreadable file %s: %s", path, exc)
        return {}


def parse_desktop_lines(lines: Iterable[str]) -> Descriptor:
    descriptor: Descriptor = {}
    for raw_line in lines:
        line = raw_line.rstrip(LINE_TERMINATORS)
        if _is_foreign_section_header(line):
            logger.debug("Stopped at section header %r", line)
            break
        _store_pair(descriptor, line)
    return descriptor


def _is_foreign_section_header(line: str) -> bool:
    return (
        line.startswith(SECTION_OPEN)
        and line.endswith(SECTION_CLOSE)
        and line != DESKTOP_ENTRY_HEADER
    )


def _store_pair(descriptor: Descriptor, line: str) -> None:
    key, separator, value = line.partition(KEY_VALUE_SEPARATOR)
    if not separator:
        return
    if key and value:
        descriptor[key] = value
