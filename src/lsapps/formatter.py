"""Turn parsed descriptors into launcher lines."""

from __future__ import annotations

from .constants import (
    ESCAPED_RECORD_SEPARATOR,
    EXEC_PLACEHOLDERS,
    KEY_EXEC,
    KEY_NAME,
    KEY_NO_DISPLAY,
    NO_DISPLAY_TRUE,
    PATH_SEPARATOR,
    RECORD_SEPARATOR,
)
from .models import Descriptor, OutputMode


def strip_placeholders(command: str) -> str:
    """Drop the %f/%F/%u/%U field codes and trim the ends."""
    for placeholder in EXEC_PLACEHOLDERS:
        command = command.replace(placeholder, "")
    return command.strip()


def select_display_name(name: str, command: str) -> str:
    """Pick the label a launcher shows for an application.

    A command no longer than the name doubles as the label, unless it holds a
    path (``/usr/bin/foo`` makes a poor label) or an ``=`` (which would clash
    with the ``name=exec`` record format). ``=`` left in the chosen label is
    escaped as ``\\=``.
    """
    if len(name) < len(command):
        chosen = name
    elif PATH_SEPARATOR not in command and RECORD_SEPARATOR not in command:
        chosen = command
    else:
        chosen = name
    return chosen.strip().replace(RECORD_SEPARATOR, ESCAPED_RECORD_SEPARATOR)


def format_entry(descriptor: Descriptor, mode: OutputMode) -> str | None:
    """Return the output line for one descriptor, or None to skip it."""
    if not _is_listable(descriptor):
        return None

    command = strip_placeholders(descriptor[KEY_EXEC])
    if mode == OutputMode.EXEC:
        return command

    display_name = select_display_name(descriptor[KEY_NAME].lower(), command)
    if mode == OutputMode.NAMES:
        return display_name
    if mode == OutputMode.ALIASES and display_name == command:
        return None
    return f"{display_name}{RECORD_SEPARATOR}{command}"


def _is_listable(descriptor: Descriptor) -> bool:
    if not descriptor:
        return False
    if not descriptor.get(KEY_NAME):
        return False
    if not descriptor.get(KEY_EXEC):
        return False
    return descriptor.get(KEY_NO_DISPLAY) != NO_DISPLAY_TRUE
