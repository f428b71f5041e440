import os
from datetime import datetime
from pathlib import Path

from treasurehunt.db.audit_log import append_event, format_event, refresh_link
from treasurehunt.db.hunts import HuntPaths, ensure_directory


def test_event_line_format() -> None:
    line = format_event("Listed all treasures", now=datetime(2026, 1, 31, 15, 50, 7))
    assert line == "[2026-01-31 15:50:07] Listed all treasures\n"


def test_append_event_creates_and_appends(tmp_path: Path) -> None:
    paths = _hunt(tmp_path)
    assert append_event(paths, "first", now=datetime(2026, 1, 1, 0, 0, 0))
    assert append_event(paths, "second", now=datetime(2026, 1, 1, 0, 0, 1))

    lines = paths.log_file.read_text(encoding="utf-8").splitlines()
    assert lines == ["[2026-01-01 00:00:00] first", "[2026-01-01 00:00:01] second"]


def test_append_event_failure_is_reported_not_raised(tmp_path: Path) -> None:
    paths = HuntPaths(base_dir=tmp_path, hunt_id="missing")
    assert append_event(paths, "nowhere to go") is False
    assert not paths.directory.exists()


def test_refresh_link_points_at_log(tmp_path: Path) -> None:
    paths = _hunt(tmp_path)
    append_event(paths, "hello")

    assert refresh_link(paths)
    assert paths.link_path.is_symlink()
    assert os.readlink(paths.link_path) == os.path.join("forest", "logged_hunt")
    assert "hello" in paths.link_path.read_text(encoding="utf-8")


def test_refresh_link_replaces_existing_link(tmp_path: Path) -> None:
    paths = _hunt(tmp_path)
    os.symlink("elsewhere", paths.link_path)

    assert refresh_link(paths)
    assert paths.link_path.resolve() == paths.log_file.resolve()


def _hunt(base_dir: Path) -> HuntPaths:
    paths = HuntPaths(base_dir=base_dir, hunt_id="forest")
    ensure_directory(paths)
    return paths
