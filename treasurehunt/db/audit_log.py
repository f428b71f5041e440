"""Append-only per-hunt audit log and its discoverable symlink.

Both helpers are best-effort: failures are logged and reported through the
return value, never raised, so they cannot undo the operation being logged.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from treasurehunt.db.hunts import HuntPaths

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_event(message: str, *, now: datetime | None = None) -> str:
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"[{timestamp}] {message}\n"


def append_event(
    paths: HuntPaths, message: str, *, now: datetime | None = None
) -> bool:
    line = format_event(message, now=now)
    try:
        with paths.log_file.open("a", encoding="utf-8") as handle:
            handle.write(line)
    except OSError as exc:
        logger.warning("Could not write log file %s: %s", paths.log_file, exc)
        return False
    return True


def refresh_link(paths: HuntPaths) -> bool:
    """Point ``logged_hunt-<hunt_id>`` at the hunt's log, replacing any old link."""
    try:
        paths.link_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove symbolic link %s: %s", paths.link_path, exc)
    try:
        os.symlink(paths.link_target, paths.link_path)
    except OSError as exc:
        logger.warning("Could not create symbolic link %s: %s", paths.link_path, exc)
        return False
    return True
