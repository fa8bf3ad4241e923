"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from typing import Callable

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(invoke_without_command=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Tests replace this to point the connectivity check at an `httpx.MockTransport`.
http_client_factory: Callable[[AppSettings], httpx.AsyncClient] = build_async_client


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with http_client_factory(settings) as client:
            response = await client.get("autocomplete?term=a")
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.callback()
def run() -> None:
    """Show the effective settings and check connectivity to the API."""

    settings = AppSettings()

    table = Table(title="urbandict doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=3)
