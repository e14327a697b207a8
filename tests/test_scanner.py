"""Tests for directory enumeration."""

from pathlib import Path

from lsapps.models import AppConfig
from lsapps.scanner import candidate_dirs, iter_desktop_files, scan


def test_candidate_dirs_appends_local_share_last() -> None:
    config = AppConfig(data_dirs=("/usr/local/share", "/usr/share"), home="/home/me")

    assert candidate_dirs(config) == [
        "/usr/local/share/applications",
        "/usr/share/applications",
        "/home/me/.local/share/applications",
    ]


def test_candidate_dirs_keeps_empty_entry_verbatim() -> None:
    config = AppConfig(data_dirs=("",), home="")

    assert candidate_dirs(config) == ["/applications", "/.local/share/applications"]


def test_iter_desktop_files_filters_and_sorts(tmp_path: Path) -> None:
    for name in ("zeta.desktop", "alpha.desktop", "notes.txt", "beta.desktop~"):
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "deep.desktop").write_text("", encoding="utf-8")

    assert list(iter_desktop_files(str(tmp_path))) == [
        f"{tmp_path}/alpha.desktop",
        f"{tmp_path}/zeta.desktop",
    ]


def test_iter_desktop_files_skips_missing_and_non_directories(tmp_path: Path) -> None:
    a_file = tmp_path / "plain"
    a_file.write_text("", encoding="utf-8")

    assert list(iter_desktop_files(str(tmp_path / "missing"))) == []
    assert list(iter_desktop_files(str(a_file))) == []


def test_scan_continues_past_unreadable_dirs_and_keeps_duplicates(
    tmp_path: Path, write_desktop
) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    write_desktop("app.desktop", "Name=App", "Exec=app", directory=first / "applications")
    write_desktop("app.desktop", "Name=App", "Exec=app", directory=second / "applications")
    config = AppConfig(
        data_dirs=(str(first), str(tmp_path / "missing"), str(second)),
        home=str(tmp_path / "home"),
    )

    descriptors = list(scan(config))

    assert descriptors == [
        {"Name": "App", "Exec": "app"},
        {"Name": "App", "Exec": "app"},
    ]


def test_scan_includes_user_applications(tmp_path: Path, write_desktop) -> None:
    home = tmp_path / "home"
    write_desktop(
        "mine.desktop",
        "Name=Mine",
        "Exec=mine",
        directory=home / ".local" / "share" / "applications",
    )
    config = AppConfig(data_dirs=(str(tmp_path / "none"),), home=str(home))

    assert list(scan(config)) == [{"Name": "Mine", "Exec": "mine"}]
