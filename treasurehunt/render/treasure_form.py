"""Interactive prompts for the fields of a new treasure."""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.prompt import FloatPrompt, IntPrompt, Prompt

from treasurehunt.core.contracts import (
    CLUE_MAX_BYTES,
    INT32_MAX,
    INT32_MIN,
    OWNER_MAX_BYTES,
    TreasureDraft,
    check_text_field,
)


def prompt_treasure_draft(
    console: Console | None = None, *, stream: TextIO | None = None
) -> TreasureDraft:
    console = console or Console()
    owner = _ask_text(
        console, "Enter username", limit=OWNER_MAX_BYTES, name="username", stream=stream
    )
    latitude = FloatPrompt.ask("Enter latitude", console=console, stream=stream)
    longitude = FloatPrompt.ask("Enter longitude", console=console, stream=stream)
    clue = _ask_text(
        console,
        "Enter clue text",
        limit=CLUE_MAX_BYTES,
        name="clue",
        allow_empty=True,
        stream=stream,
    )
    value = _ask_value(console, stream=stream)
    return TreasureDraft(
        owner=owner, latitude=latitude, longitude=longitude, clue=clue, value=value
    )


def _ask_text(
    console: Console,
    prompt: str,
    *,
    limit: int,
    name: str,
    allow_empty: bool = False,
    stream: TextIO | None,
) -> str:
    while True:
        answer = Prompt.ask(prompt, console=console, stream=stream).strip()
        if not answer and not allow_empty:
            console.print(f"[prompt.invalid]The {name} cannot be empty")
            continue
        try:
            return check_text_field(answer, limit=limit, name=name)
        except ValueError as exc:
            console.print(f"[prompt.invalid]{exc}")


def _ask_value(console: Console, *, stream: TextIO | None) -> int:
    while True:
        value = IntPrompt.ask("Enter value", console=console, stream=stream)
        if INT32_MIN <= value <= INT32_MAX:
            return value
        console.print(
            f"[prompt.invalid]Value must be between {INT32_MIN} and {INT32_MAX}"
        )
