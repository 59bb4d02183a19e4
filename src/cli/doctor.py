"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.base_url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the active configuration and check the catalog is reachable."""

    settings = AppSettings()
    print_banner(_console)

    table = Table(title="popcorn-catalog doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "MISSING", str(env_file))

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("Catalog connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="set-base-url")
def set_base_url(url: str = typer.Argument(..., help="Catalog API base URL.")) -> None:
    """Store the catalog base URL in the user config .env."""

    url = url.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("URL must start with http:// or https://")

    env_path = write_user_env_vars({"POPCORN_BASE_URL": url})
    _console.print(f"[green]Saved base URL to:[/green] {env_path}")
