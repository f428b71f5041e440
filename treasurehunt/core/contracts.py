"""Treasure data contracts shared by the store, codec and CLI."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

OWNER_MAX_BYTES = 63
CLUE_MAX_BYTES = 511
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def check_text_field(value: str, *, limit: int, name: str) -> str:
    """Ensure text fits a NUL-terminated field of ``limit`` bytes plus terminator."""
    if "\x00" in value:
        raise ValueError(f"{name} cannot contain NUL characters")
    size = len(value.encode("utf-8"))
    if size > limit:
        raise ValueError(f"{name} is {size} bytes; at most {limit} bytes fit")
    return value


class TreasureDraft(BaseModel):
    """Treasure fields supplied by a contributor, before an id is assigned."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    owner: str
    latitude: float
    longitude: float
    clue: str
    value: int = Field(ge=INT32_MIN, le=INT32_MAX)

    @field_validator("owner")
    @classmethod
    def validate_owner(cls, value: str) -> str:
        return check_text_field(value, limit=OWNER_MAX_BYTES, name="owner")

    @field_validator("clue")
    @classmethod
    def validate_clue(cls, value: str) -> str:
        return check_text_field(value, limit=CLUE_MAX_BYTES, name="clue")


class Treasure(TreasureDraft):
    """A stored treasure record."""

    id: int = Field(ge=INT32_MIN, le=INT32_MAX)

    @classmethod
    def from_draft(cls, draft: TreasureDraft, *, treasure_id: int) -> "Treasure":
        return cls(id=treasure_id, **draft.model_dump())

    def to_draft(self) -> TreasureDraft:
        return TreasureDraft(**self.model_dump(exclude={"id"}))
