"""Locate application directories and the descriptor files inside them."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from .constants import APPLICATIONS_SUBDIR, LOCAL_DATA_SUBDIR
from .desktop_entry import is_desktop_file, parse_desktop_file
from .models import AppConfig, Descriptor

logger = logging.getLogger(__name__)


def candidate_dirs(config: AppConfig) -> list[str]:
    """XDG data dirs in order, then the per-user data dir, each + /applications.

    Entries are used verbatim; no deduplication, no existence check.
    """
    base_dirs = [*config.data_dirs, f"{config.home}{LOCAL_DATA_SUBDIR}"]
    return [f"{base_dir}{APPLICATIONS_SUBDIR}" for base_dir in base_dirs]


def iter_desktop_files(directory: str) -> Iterator[str]:
    try:
        names = sorted(os.listdir(directory))
    except OSError as exc:
        logger.debug("Skipping directory %s: %s", directory, exc)
        return

    for name in names:
        if is_desktop_file(name):
            yield f"{directory}/{name}"


def scan(config: AppConfig) -> Iterator[Descriptor]:
    for directory in candidate_dirs(config):
        for path in iter_desktop_files(directory):
            yield parse_desktop_file(path)
