"""Rich rendering for treasures and hunt listings."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from treasurehunt.app import HuntListing
from treasurehunt.core.contracts import Treasure

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_treasure(
    treasure: Treasure, *, title: str = "Treasure Details"
) -> RenderableType:
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Treasure ID", str(treasure.id))
    table.add_row("Username", Text(treasure.owner))
    table.add_row("Location", f"{treasure.latitude:.6f}, {treasure.longitude:.6f}")
    table.add_row("Clue", Text(treasure.clue))
    table.add_row("Value", str(treasure.value))
    return Panel(table, title=title)


def render_listing(listing: HuntListing) -> RenderableType:
    header = Table(show_header=False, box=None)
    header.add_column("Field", style="bold")
    header.add_column("Value")
    header.add_row("Hunt", Text(listing.hunt_id))
    header.add_row("File size", f"{listing.size_bytes} bytes")
    header.add_row("Last modified", listing.modified_at.strftime(TIME_FORMAT))
    header.add_row("Number of treasures", str(listing.count))

    items: list[RenderableType] = [header]
    for index, treasure in enumerate(listing.treasures, start=1):
        items.append(render_treasure(treasure, title=f"Treasure {index}"))
    if not listing.treasures:
        items.append(Text("No treasures in this hunt."))
    return Group(*items)
