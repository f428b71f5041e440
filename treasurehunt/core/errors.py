"""Treasure hunt exception hierarchy."""

from __future__ import annotations


class TreasureHuntError(Exception):
    """Base exception for all treasure hunt errors."""


class InvalidHuntIdError(TreasureHuntError):
    """Raised when a hunt id cannot be used as a directory name."""


class InvalidTreasureIdError(TreasureHuntError):
    """Raised when a treasure id argument is not an integer."""


class StoreError(TreasureHuntError):
    """Raised when the treasure data file cannot be read or written."""


class ShortReadError(StoreError):
    """Raised when fewer bytes than a full record could be read."""


class ShortWriteError(StoreError):
    """Raised when fewer bytes than a full record were written."""


class RecordDecodeError(StoreError):
    """Raised when a record block does not decode to a treasure."""


class HuntDirectoryError(TreasureHuntError):
    """Raised when the hunt directory cannot be created."""


class HuntRemovalError(TreasureHuntError):
    """Raised when hunt removal stops partway through."""

    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step
