"""`popcorn` command line interface.

Each catalog operation maps to one command; `--json` prints the raw model
dump instead of Rich tables so the output can be piped.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, TypeVar

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.catalog_client import TABS, CatalogClient
from adapters.json_exporter import export_items_json, items_payload
from adapters.routes import SORT_OPTIONS, CatalogPayloadError, RouteController
from cli import doctor
from cli.ui_components import build_details_panel, build_items_table
from core.config import AppSettings
from core.logging_setup import setup_logging

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Browse the popcorn media catalog (shows, anime, movies).")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def build_catalog_client() -> CatalogClient:
    return CatalogClient(AppSettings())


def _route(tab: str) -> RouteController[Any]:
    try:
        return build_catalog_client().route(tab)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="TAB") from exc


def _run(coro: Awaitable[T]) -> T:
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except (httpx.HTTPError, ValidationError, ValueError, CatalogPayloadError) as exc:
        _err_console.print(f"[red]Request failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))


def _export(items: list[Any], export: Path | None) -> None:
    if export is None:
        return
    path = export_items_json(items=items, output_path=export)
    _console.print(f"[green]Exported {len(items)} item(s) to:[/green] {path}")


@app.callback()
def main(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING or ERROR (defaults to POPCORN_LOG_LEVEL).",
    ),
) -> None:
    setup_logging(log_level or AppSettings().log_level)


@app.command()
def pages(
    tab: str = typer.Argument(..., help=f"One of: {', '.join(TABS)}."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON."),
) -> None:
    """Number of pages in a tab."""

    route = _route(tab)
    count = _run(route.pages())
    if as_json:
        _print_json({"tab": route.tab, "pages": count})
        return
    _console.print(f"[cyan]{route.tab}[/cyan]: {count} page(s)")


@app.command()
def search(
    tab: str = typer.Argument(..., help=f"One of: {', '.join(TABS)}."),
    page: int = typer.Option(1, "--page", "-p", min=1),
    sort: str = typer.Option("trending", "--sort", help=f"Usually one of: {', '.join(SORT_OPTIONS)}."),
    order: int = typer.Option(-1, "--order", help="-1 descending, 1 ascending."),
    genre: str = typer.Option("all", "--genre"),
    query: str = typer.Option(None, "--query", "-q", help="Keywords to search for."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON."),
    export: Path = typer.Option(None, "--export", help="Also write the results to a JSON file."),
) -> None:
    """Search a tab."""

    route = _route(tab)
    items = _run(route.search(page=page, sort=sort, order=order, genre=genre, query=query))
    if as_json:
        _print_json(items_payload(items))
    else:
        _console.print(build_items_table(items, title=f"{route.tab} • page {page}"))
    _export(items, export)


@app.command()
def random(
    tab: str = typer.Argument(..., help=f"One of: {', '.join(TABS)}."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON."),
    export: Path = typer.Option(None, "--export", help="Also write the item to a JSON file."),
) -> None:
    """A random item from a tab."""

    route = _route(tab)
    item = _run(route.random())
    if as_json:
        _print_json(items_payload([item])[0])
    else:
        _console.print(build_details_panel(item))
    _export([item], export)


@app.command()
def get(
    tab: str = typer.Argument(..., help=f"One of: {', '.join(TABS)}."),
    item_id: str = typer.Argument(..., metavar="ID", help="Catalog id (IMDb id for shows/movies)."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON."),
    export: Path = typer.Option(None, "--export", help="Also write the item to a JSON file."),
) -> None:
    """Full details of one item."""

    route = _route(tab)
    item = _run(route.get(item_id))
    if as_json:
        _print_json(items_payload([item])[0])
    else:
        _console.print(build_details_panel(item))
    _export([item], export)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
