"""Fixed-width binary layout for treasure records.

Layout (little-endian, no padding):

    offset  size  field
         0     4  id         int32
         4    64  owner      UTF-8, NUL padded
        68     8  latitude   float64
        76     8  longitude  float64
        84   512  clue       UTF-8, NUL padded
       596     4  value      int32

Changing this layout invalidates every existing ``treasures.bin``.
"""

from __future__ import annotations

import struct

from pydantic import ValidationError

from treasurehunt.core.contracts import CLUE_MAX_BYTES, OWNER_MAX_BYTES, Treasure
from treasurehunt.core.errors import RecordDecodeError

_RECORD = struct.Struct(f"<i{OWNER_MAX_BYTES + 1}sdd{CLUE_MAX_BYTES + 1}si")

RECORD_SIZE = _RECORD.size


def encode_treasure(treasure: Treasure) -> bytes:
    return _RECORD.pack(
        treasure.id,
        treasure.owner.encode("utf-8"),
        treasure.latitude,
        treasure.longitude,
        treasure.clue.encode("utf-8"),
        treasure.value,
    )


def decode_treasure(block: bytes) -> Treasure:
    if len(block) != RECORD_SIZE:
        raise RecordDecodeError(
            f"Record block is {len(block)} bytes; expected {RECORD_SIZE}."
        )
    treasure_id, owner, latitude, longitude, clue, value = _RECORD.unpack(block)
    try:
        return Treasure(
            id=treasure_id,
            owner=_decode_text(owner),
            latitude=latitude,
            longitude=longitude,
            clue=_decode_text(clue),
            value=value,
        )
    except (UnicodeDecodeError, ValidationError) as exc:
        raise RecordDecodeError(f"Malformed treasure record: {exc}") from exc


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode("utf-8")
