"""CLI argument scanning and application startup."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from .constants import (
    ARG_ALL,
    ARG_EXEC,
    ARG_GEN_ALIAS,
    ARG_NAMES,
    DATA_DIRS_SEPARATOR,
    ENV_DATA_DIRS,
    ENV_HOME,
    ENV_LOG_FILE,
    STDERR_WARNING_PREFIX,
)
from .errors import LsappsError
from .formatter import format_entry
from .logging_utils import setup_logging
from .models import AppConfig, OutputMode
from .scanner import scan

logger = logging.getLogger(__name__)

_FLAG_MODES = (
    (ARG_NAMES, OutputMode.NAMES),
    (ARG_EXEC, OutputMode.EXEC),
    (ARG_ALL, OutputMode.ALL),
    (ARG_GEN_ALIAS, OutputMode.ALIASES),
)


def parse_mode(argv: list[str]) -> OutputMode:
    """Return the mode of the first recognized flag; others are ignored."""
    for arg in argv:
        for flags, mode in _FLAG_MODES:
            if arg in flags:
                return mode
    return OutputMode.NAMES


def parse_args(
    argv: list[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    args = argv if argv is not None else sys.argv[1:]
    env = environ if environ is not None else os.environ

    return AppConfig(
        mode=parse_mode(args),
        data_dirs=tuple(env.get(ENV_DATA_DIRS, "").split(DATA_DIRS_SEPARATOR)),
        home=env.get(ENV_HOME, ""),
        log_file=env.get(ENV_LOG_FILE) or None,
    )


def run(config: AppConfig, out: TextIO) -> int:
    """Write one line per listable descriptor. Returns the line count."""
    scanned = 0
    written = 0
    for descriptor in scan(config):
        scanned += 1
        line = format_entry(descriptor, config.mode)
        if line is None:
            continue
        out.write(f"{line}\n")
        written += 1

    logger.info(
        "Listed %d of %d desktop files (mode=%s)", written, scanned, config.mode
    )
    return written


def main(argv: list[str] | None = None) -> int:
    """Application entry point. Always exits 0."""
    config = parse_args(argv)

    try:
        setup_logging(config.log_file)
    except LsappsError as exc:
        print(f"{STDERR_WARNING_PREFIX} {exc}", file=sys.stderr)
        setup_logging(None)

    run(config, sys.stdout)
    return 0
