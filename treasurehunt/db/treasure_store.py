"""Sequential fixed-width treasure store backed by a single binary file."""

from __future__ import annotations

import logging
import os
from contextlib import closing, contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Iterator

from treasurehunt.core.contracts import INT32_MAX, Treasure, TreasureDraft
from treasurehunt.core.errors import ShortReadError, ShortWriteError, StoreError
from treasurehunt.db.hunts import HuntPaths
from treasurehunt.db.record_codec import RECORD_SIZE, decode_treasure, encode_treasure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreSummary:
    size_bytes: int
    modified_at: datetime
    count: int


class TreasureStore:
    """Unindexed array of treasure records.

    Records are kept in insertion order. Lookup and delete are linear scans;
    delete rewrites every other record into a sibling temp file and renames it
    over the data file.
    """

    def __init__(self, data_file: Path, *, temp_file: Path | None = None) -> None:
        self._data_file = data_file
        self._temp_file = temp_file or data_file.with_suffix(".tmp")

    @classmethod
    def for_hunt(cls, paths: HuntPaths) -> "TreasureStore":
        return cls(paths.data_file, temp_file=paths.temp_file)

    @property
    def data_file(self) -> Path:
        return self._data_file

    def next_id(self) -> int:
        try:
            handle = self._data_file.open("rb")
        except FileNotFoundError:
            return 1
        except OSError as exc:
            raise StoreError(
                f"Could not open data file {self._data_file}: {exc}"
            ) from exc
        with handle, _io_errors(f"Could not read last treasure in {self._data_file}"):
            count = _record_count(handle)
            if count == 0:
                return 1
            handle.seek((count - 1) * RECORD_SIZE)
            last = decode_treasure(_read_block(handle))
        return last.id + 1

    def append(self, draft: TreasureDraft) -> Treasure:
        treasure_id = self.next_id()
        if treasure_id > INT32_MAX:
            raise StoreError(
                f"Treasure id space exhausted in {self._data_file}: "
                f"last id is {INT32_MAX}"
            )
        treasure = Treasure.from_draft(draft, treasure_id=treasure_id)
        block = encode_treasure(treasure)
        with _io_errors(f"Could not write treasure data to {self._data_file}"):
            with self._data_file.open("ab", buffering=0) as handle:
                _write_block(handle, block)
        logger.debug("Appended treasure %d to %s", treasure.id, self._data_file)
        return treasure

    def scan(self) -> Iterator[Treasure]:
        """Yield every record in file order; each call starts a fresh scan."""
        with _io_errors(f"Could not read treasure data from {self._data_file}"):
            with self._data_file.open("rb") as handle:
                for _ in range(_record_count(handle)):
                    yield decode_treasure(_read_block(handle))

    def find(self, treasure_id: int) -> Treasure | None:
        with closing(self.scan()) as treasures:
            for treasure in treasures:
                if treasure.id == treasure_id:
                    return treasure
        return None

    def delete(self, treasure_id: int) -> bool:
        """Remove the record with ``treasure_id``; ``False`` if it is absent.

        The data file is only replaced once the rewrite finished cleanly. On
        any failure the temp file is discarded and the original is untouched.
        """
        found = False
        try:
            with _io_errors(f"Could not rewrite treasure data in {self._data_file}"):
                with self._data_file.open("rb") as source, self._temp_file.open(
                    "wb", buffering=0
                ) as target:
                    for _ in range(_record_count(source)):
                        block = _read_block(source)
                        if decode_treasure(block).id == treasure_id:
                            found = True
                            continue
                        _write_block(target, block)
            if not found:
                self._temp_file.unlink(missing_ok=True)
                return False
            with _io_errors(f"Could not update data file {self._data_file}"):
                os.replace(self._temp_file, self._data_file)
        except Exception:
            self._temp_file.unlink(missing_ok=True)
            raise
        logger.debug("Deleted treasure %d from %s", treasure_id, self._data_file)
        return True

    def summary(self) -> StoreSummary | None:
        try:
            stat = self._data_file.stat()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreError(f"Could not stat {self._data_file}: {exc}") from exc
        return StoreSummary(
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime),
            count=stat.st_size // RECORD_SIZE,
        )


@contextmanager
def _io_errors(message: str) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise StoreError(f"{message}: {exc}") from exc


def _record_count(handle: BinaryIO) -> int:
    size = os.fstat(handle.fileno()).st_size
    count, extra = divmod(size, RECORD_SIZE)
    if extra:
        logger.warning(
            "%s has %d trailing bytes that do not form a record", handle.name, extra
        )
    return count


def _read_block(handle: BinaryIO) -> bytes:
    block = handle.read(RECORD_SIZE)
    if len(block) != RECORD_SIZE:
        raise ShortReadError(
            f"Short read from {handle.name}: got {len(block)} of {RECORD_SIZE} bytes"
        )
    return block


def _write_block(handle: BinaryIO, block: bytes) -> None:
    written = handle.write(block)
    if written != len(block):
        raise ShortWriteError(
            f"Short write to {handle.name}: wrote {written} of {len(block)} bytes"
        )
