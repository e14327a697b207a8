"""Domain models for lsapps."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class OutputMode(StrEnum):
    NAMES = "names"
    EXEC = "exec"
    ALL = "all"
    ALIASES = "aliases"


# Flat key/value view of the [Desktop Entry] section; empty when unreadable.
Descriptor = dict[str, str]


class AppConfig(BaseModel):
    """Process state captured once at startup."""

    model_config = ConfigDict(frozen=True)

    mode: OutputMode = OutputMode.NAMES
    data_dirs: tuple[str, ...] = ("",)
    home: str = ""
    log_file: str | None = None
