"""Pytest configuration and fixtures for lsapps tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_desktop(tmp_path: Path) -> Callable[..., Path]:
    """Write a .desktop file from lines; returns its path."""

    def _write(name: str, *lines: str, directory: Path | None = None) -> Path:
        target_dir = directory if directory is not None else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """setup_logging() toggles process-wide state; undo it after each test."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
