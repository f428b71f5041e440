"""Command operations: one function per CLI verb."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from treasurehunt.core.contracts import Treasure, TreasureDraft
from treasurehunt.core.errors import HuntDirectoryError, InvalidTreasureIdError
from treasurehunt.db.audit_log import append_event, refresh_link
from treasurehunt.db.hunts import HuntPaths, ensure_directory, validate_hunt_id
from treasurehunt.db.hunts import remove_hunt as remove_hunt_files
from treasurehunt.db.treasure_store import TreasureStore

logger = logging.getLogger(__name__)

BASE_DIR_ENV = "TREASURE_HUNT_DIR"
DEFAULT_BASE_DIR = Path(".")

_TREASURE_ID = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class AddedTreasure:
    treasure: Treasure
    created_hunt: bool


@dataclass(frozen=True)
class HuntListing:
    hunt_id: str
    size_bytes: int
    modified_at: datetime
    count: int
    treasures: list[Treasure]


def add_treasure(
    hunt_id: str, draft: TreasureDraft, *, base_dir: Path | None = None
) -> AddedTreasure:
    paths = _resolve_paths(hunt_id, base_dir)
    created = not paths.directory.exists()
    if not ensure_directory(paths):
        raise HuntDirectoryError(f"Could not create hunt directory {paths.directory}")

    treasure = TreasureStore.for_hunt(paths).append(draft)
    append_event(
        paths, f"Added treasure with ID {treasure.id} by user {treasure.owner}"
    )
    refresh_link(paths)
    return AddedTreasure(treasure=treasure, created_hunt=created)


def list_treasures(hunt_id: str, *, base_dir: Path | None = None) -> HuntListing | None:
    paths = _resolve_paths(hunt_id, base_dir)
    store = TreasureStore.for_hunt(paths)
    summary = store.summary()
    if summary is None:
        return None

    treasures = list(store.scan())
    append_event(paths, "Listed all treasures")
    return HuntListing(
        hunt_id=hunt_id,
        size_bytes=summary.size_bytes,
        modified_at=summary.modified_at,
        count=summary.count,
        treasures=treasures,
    )


def view_treasure(
    hunt_id: str, treasure_id: int, *, base_dir: Path | None = None
) -> Treasure | None:
    paths = _resolve_paths(hunt_id, base_dir)
    treasure = TreasureStore.for_hunt(paths).find(treasure_id)
    if treasure is not None:
        append_event(paths, f"Viewed treasure with ID {treasure_id}")
    return treasure


def remove_treasure(
    hunt_id: str, treasure_id: int, *, base_dir: Path | None = None
) -> bool:
    paths = _resolve_paths(hunt_id, base_dir)
    if not TreasureStore.for_hunt(paths).delete(treasure_id):
        return False
    append_event(paths, f"Removed treasure with ID {treasure_id}")
    refresh_link(paths)
    return True


def remove_hunt(hunt_id: str, *, base_dir: Path | None = None) -> bool:
    return remove_hunt_files(_resolve_paths(hunt_id, base_dir))


def parse_treasure_id(raw: str) -> int:
    text = raw.strip()
    if not _TREASURE_ID.fullmatch(text):
        raise InvalidTreasureIdError(f"Treasure id must be an integer: {raw!r}")
    return int(text)


def resolve_base_dir(base_dir: Path | None) -> Path:
    if base_dir is not None:
        return base_dir
    env_dir = os.getenv(BASE_DIR_ENV)
    return Path(env_dir) if env_dir else DEFAULT_BASE_DIR


def _resolve_paths(hunt_id: str, base_dir: Path | None) -> HuntPaths:
    paths = HuntPaths(
        base_dir=resolve_base_dir(base_dir), hunt_id=validate_hunt_id(hunt_id)
    )
    logger.debug("Hunt %s resolved to %s", hunt_id, paths.directory)
    return paths
