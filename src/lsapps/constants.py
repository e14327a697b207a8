"""Centralized constants for lsapps."""

from __future__ import annotations

# CLI flags, scanned in argv order; the first match wins.
ARG_NAMES = frozenset({"-n", "--names"})
ARG_EXEC = frozenset({"-e", "--exec"})
ARG_ALL = frozenset({"-a", "--all"})
ARG_GEN_ALIAS = frozenset({"-g", "--gen-alias"})

# Environment
ENV_DATA_DIRS = "XDG_DATA_DIRS"
ENV_HOME = "HOME"
ENV_LOG_FILE = "LSAPPS_LOG_FILE"
DATA_DIRS_SEPARATOR = ":"
LOCAL_DATA_SUBDIR = "/.local/share"
APPLICATIONS_SUBDIR = "/applications"

# Descriptor files
DESKTOP_FILE_SUFFIX = ".desktop"
DESKTOP_ENTRY_HEADER = "[Desktop Entry]"
SECTION_OPEN = "["
SECTION_CLOSE = "]"
KEY_VALUE_SEPARATOR = "="
LINE_TERMINATORS = "\r\n"

KEY_NAME = "Name"
KEY_EXEC = "Exec"
KEY_NO_DISPLAY = "NoDisplay"
NO_DISPLAY_TRUE = "true"

# Field codes dropped from Exec; the others are left as-is.
EXEC_PLACEHOLDERS = ("%F", "%f", "%U", "%u")

# Output
RECORD_SEPARATOR = "="
ESCAPED_RECORD_SEPARATOR = "\\="
PATH_SEPARATOR = "/"
STDERR_WARNING_PREFIX = "WARNING:"

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE_ENCODING = "utf-8"
