"""Treasure contracts and errors."""

from treasurehunt.core.contracts import (
    CLUE_MAX_BYTES,
    OWNER_MAX_BYTES,
    Treasure,
    TreasureDraft,
    check_text_field,
)
from treasurehunt.core.errors import (
    HuntDirectoryError,
    HuntRemovalError,
    InvalidHuntIdError,
    InvalidTreasureIdError,
    RecordDecodeError,
    ShortReadError,
    ShortWriteError,
    StoreError,
    TreasureHuntError,
)

__all__ = [
    "CLUE_MAX_BYTES",
    "OWNER_MAX_BYTES",
    "HuntDirectoryError",
    "HuntRemovalError",
    "InvalidHuntIdError",
    "InvalidTreasureIdError",
    "RecordDecodeError",
    "ShortReadError",
    "ShortWriteError",
    "StoreError",
    "Treasure",
    "TreasureDraft",
    "TreasureHuntError",
    "check_text_field",
]
