"""Rich components for the CLI.

Kept apart from the commands so tables and panels can be reused by several
of them.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Anime, CatalogItem, Movie, Show


def print_banner(console: Console) -> None:
    title = Text("popcorn-catalog", style="bold cyan")
    subtitle = Text("Shows • Anime • Movies", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _rating(item: CatalogItem) -> str:
    if item.rating.percentage is None:
        return "-"
    return f"{item.rating.percentage}%"


def build_items_table(items: Iterable[CatalogItem], *, title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Year", style="green")
    table.add_column("Rating", style="yellow")
    table.add_column("Genres", style="magenta")
    for item in items:
        table.add_row(
            item.id,
            item.title or "-",
            item.year or "-",
            _rating(item),
            ", ".join(item.genres[:3]),
        )
    return table


def build_details_panel(item: CatalogItem) -> Panel:
    """Panel with the fields worth reading for one item."""

    header = f"{item.title or item.id}"
    if item.year:
        header += f" ({item.year})"

    body = Text()
    if item.synopsis:
        body.append(item.synopsis.strip() + "\n\n")
    if item.genres:
        body.append("Genres: ", style="bold")
        body.append(", ".join(item.genres) + "\n")
    body.append("Rating: ", style="bold")
    body.append(_rating(item) + "\n")

    if isinstance(item, (Show, Anime)):
        if item.status:
            body.append("Status: ", style="bold")
            body.append(f"{item.status}\n")
        if item.num_seasons is not None:
            body.append("Seasons: ", style="bold")
            body.append(f"{item.num_seasons}\n")
        if item.episodes:
            body.append("Episodes: ", style="bold")
            body.append(f"{len(item.episodes)}\n")

    if isinstance(item, Movie):
        if item.runtime:
            body.append("Runtime: ", style="bold")
            body.append(f"{item.runtime} min\n")
        best = item.best_torrent()
        if best is not None and best.url:
            body.append("Best torrent: ", style="bold")
            body.append(f"{best.filesize or '?'} ({best.seed or 0} seeds)\n")

    body.append(f"\nID: {item.id}", style="dim")
    return Panel(body, title=Text(header, style="bold yellow"), border_style="yellow")
