"""Module entry point for `python -m treasurehunt`."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from treasurehunt.app import (
    add_treasure,
    list_treasures,
    parse_treasure_id,
    remove_hunt,
    remove_treasure,
    view_treasure,
)
from treasurehunt.core.errors import TreasureHuntError
from treasurehunt.render.treasure_form import prompt_treasure_draft
from treasurehunt.render.treasure_view import render_listing, render_treasure

LOG_LEVEL_ENV = "TREASURE_HUNT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


class UsageParser(argparse.ArgumentParser):
    """Argument parser that prints usage to stdout and exits with status 1."""

    def error(self, message: str) -> NoReturn:
        print(f"{self.prog}: {message}", file=sys.stdout)
        self.print_usage(sys.stdout)
        raise SystemExit(1)


def build_parser() -> UsageParser:
    parser = UsageParser(
        prog="treasurehunt", description="Manage treasure hunts and their treasures."
    )
    verbs = parser.add_mutually_exclusive_group(required=True)
    verbs.add_argument(
        "--add",
        metavar="HUNT_ID",
        help="Add a treasure to a hunt (prompts for its fields).",
    )
    verbs.add_argument(
        "--list", metavar="HUNT_ID", help="List every treasure in a hunt."
    )
    verbs.add_argument(
        "--view",
        nargs=2,
        metavar=("HUNT_ID", "TREASURE_ID"),
        help="Show one treasure.",
    )
    verbs.add_argument(
        "--remove_treasure",
        nargs=2,
        metavar=("HUNT_ID", "TREASURE_ID"),
        help="Remove one treasure from a hunt.",
    )
    verbs.add_argument(
        "--remove_hunt", metavar="HUNT_ID", help="Remove a hunt and all its files."
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory holding the hunts (defaults to $TREASURE_HUNT_DIR or cwd).",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug diagnostics on stderr."
    )
    return parser


def configure_logging(*, verbose: bool = False) -> None:
    level = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    console = Console()
    try:
        _dispatch(args, console)
    except TreasureHuntError as exc:
        Console(stderr=True).print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc


def _dispatch(args: argparse.Namespace, console: Console) -> None:
    root = args.root
    if args.add is not None:
        _run_add(console, args.add, root)
    elif args.list is not None:
        _run_list(console, args.list, root)
    elif args.view is not None:
        _run_view(console, *args.view, root)
    elif args.remove_treasure is not None:
        _run_remove_treasure(console, *args.remove_treasure, root)
    else:
        _run_remove_hunt(console, args.remove_hunt, root)


def _run_add(console: Console, hunt_id: str, root: Path | None) -> None:
    draft = prompt_treasure_draft(console)
    added = add_treasure(hunt_id, draft, base_dir=root)
    if added.created_hunt:
        console.print(f"Created a new hunt directory: {escape(hunt_id)}")
    console.print(f"Treasure has been added with ID: {added.treasure.id}")


def _run_list(console: Console, hunt_id: str, root: Path | None) -> None:
    listing = list_treasures(hunt_id, base_dir=root)
    if listing is None:
        console.print(f"Hunt {escape(hunt_id)} has no treasures or doesn't exist.")
        return
    console.print(render_listing(listing))


def _run_view(console: Console, hunt_id: str, raw_id: str, root: Path | None) -> None:
    treasure_id = parse_treasure_id(raw_id)
    treasure = view_treasure(hunt_id, treasure_id, base_dir=root)
    if treasure is None:
        console.print(
            f"Treasure with ID {treasure_id} not found in hunt {escape(hunt_id)}."
        )
        return
    console.print(render_treasure(treasure))


def _run_remove_treasure(
    console: Console, hunt_id: str, raw_id: str, root: Path | None
) -> None:
    treasure_id = parse_treasure_id(raw_id)
    if remove_treasure(hunt_id, treasure_id, base_dir=root):
        console.print(
            f"Treasure with ID {treasure_id} removed from hunt {escape(hunt_id)}."
        )
    else:
        console.print(
            f"Treasure with ID {treasure_id} not found in hunt {escape(hunt_id)}."
        )


def _run_remove_hunt(console: Console, hunt_id: str, root: Path | None) -> None:
    if remove_hunt(hunt_id, base_dir=root):
        console.print(f"Hunt {escape(hunt_id)} has been removed.")
    else:
        console.print(f"Hunt {escape(hunt_id)} doesn't exist.")


if __name__ == "__main__":
    main()
