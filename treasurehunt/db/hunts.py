"""Hunt namespaces: on-disk paths, directory creation and removal."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from treasurehunt.core.errors import HuntRemovalError, InvalidHuntIdError

logger = logging.getLogger(__name__)

DATA_FILE_NAME = "treasures.bin"
TEMP_FILE_NAME = "treasures.tmp"
LOG_FILE_NAME = "logged_hunt"
LINK_PREFIX = "logged_hunt-"
DIRECTORY_MODE = 0o755


@dataclass(frozen=True)
class HuntPaths:
    base_dir: Path
    hunt_id: str

    @property
    def directory(self) -> Path:
        return self.base_dir / self.hunt_id

    @property
    def data_file(self) -> Path:
        return self.directory / DATA_FILE_NAME

    @property
    def temp_file(self) -> Path:
        return self.directory / TEMP_FILE_NAME

    @property
    def log_file(self) -> Path:
        return self.directory / LOG_FILE_NAME

    @property
    def link_path(self) -> Path:
        return self.base_dir / f"{LINK_PREFIX}{self.hunt_id}"

    @property
    def link_target(self) -> Path:
        # Relative to the link's own directory.
        return Path(self.hunt_id) / LOG_FILE_NAME


def validate_hunt_id(hunt_id: str) -> str:
    """Reject hunt ids that would escape the base directory."""
    if not hunt_id or hunt_id in {".", ".."}:
        raise InvalidHuntIdError(f"Invalid hunt id: {hunt_id!r}")
    if "\x00" in hunt_id or "/" in hunt_id or (os.altsep and os.altsep in hunt_id):
        raise InvalidHuntIdError(
            f"Hunt id {hunt_id!r} must not contain path separators."
        )
    return hunt_id


def ensure_directory(paths: HuntPaths) -> bool:
    if paths.directory.exists():
        return True
    try:
        paths.directory.mkdir(mode=DIRECTORY_MODE)
    except FileExistsError:
        return True
    except OSError as exc:
        logger.error("Could not create hunt directory %s: %s", paths.directory, exc)
        return False
    logger.info("Created hunt directory %s", paths.directory)
    return True


def remove_hunt(paths: HuntPaths) -> bool:
    """Delete a hunt's data, log, directory and link, in that order.

    Returns ``False`` when the hunt does not exist. Removal is not atomic: a
    failure raises ``HuntRemovalError`` and leaves whatever was not yet
    deleted in place.
    """
    if not paths.directory.exists():
        return False

    _unlink(paths.data_file, step="data file")
    _unlink(paths.log_file, step="log file")
    try:
        paths.directory.rmdir()
    except OSError as exc:
        raise HuntRemovalError(
            "directory", f"Could not delete hunt directory {paths.directory}: {exc}"
        ) from exc

    try:
        paths.link_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not delete symbolic link %s: %s", paths.link_path, exc)
    logger.info("Removed hunt %s", paths.hunt_id)
    return True


def _unlink(path: Path, *, step: str) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        raise HuntRemovalError(step, f"Could not delete {step} {path}: {exc}") from exc
