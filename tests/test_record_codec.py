import struct

import pytest
from pydantic import ValidationError

from treasurehunt.core.contracts import Treasure, TreasureDraft
from treasurehunt.core.errors import RecordDecodeError
from treasurehunt.db.record_codec import RECORD_SIZE, decode_treasure, encode_treasure


def test_record_width_is_fixed() -> None:
    assert RECORD_SIZE == 600
    assert len(encode_treasure(_treasure())) == RECORD_SIZE
    assert len(encode_treasure(_treasure(owner="", clue=""))) == RECORD_SIZE


def test_layout_offsets_are_little_endian() -> None:
    block = encode_treasure(_treasure())

    assert struct.unpack_from("<i", block, 0)[0] == 7
    assert block[4:9] == b"alice"
    assert block[9:68] == b"\x00" * 59
    assert struct.unpack_from("<d", block, 68)[0] == 40.0
    assert struct.unpack_from("<d", block, 76)[0] == -73.0
    assert block[84:97] == b"under the oak"
    assert struct.unpack_from("<i", block, 596)[0] == 100


def test_decode_restores_every_field() -> None:
    treasure = _treasure(owner="zoë", clue="behind the café, 3 steps north")
    assert decode_treasure(encode_treasure(treasure)) == treasure


def test_decode_rejects_truncated_block() -> None:
    block = encode_treasure(_treasure())
    with pytest.raises(RecordDecodeError):
        decode_treasure(block[:-1])
    with pytest.raises(RecordDecodeError):
        decode_treasure(b"")


def test_decode_rejects_invalid_text() -> None:
    block = bytearray(encode_treasure(_treasure()))
    block[4] = 0xFF
    with pytest.raises(RecordDecodeError):
        decode_treasure(bytes(block))


def test_fields_must_fit_layout() -> None:
    TreasureDraft(owner="a" * 63, latitude=0, longitude=0, clue="c" * 511, value=0)
    with pytest.raises(ValidationError):
        TreasureDraft(owner="a" * 64, latitude=0, longitude=0, clue="", value=0)
    with pytest.raises(ValidationError):
        TreasureDraft(owner="a", latitude=0, longitude=0, clue="c" * 512, value=0)
    with pytest.raises(ValidationError):
        TreasureDraft(owner="a\x00b", latitude=0, longitude=0, clue="", value=0)
    with pytest.raises(ValidationError):
        TreasureDraft(owner="a", latitude=0, longitude=0, clue="", value=2**31)


def _treasure(*, owner: str = "alice", clue: str = "under the oak") -> Treasure:
    return Treasure(
        id=7,
        owner=owner,
        latitude=40.0,
        longitude=-73.0,
        clue=clue,
        value=100,
    )
