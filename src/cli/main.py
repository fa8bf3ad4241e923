"""CLI entry point (Typer).

Each command builds a `DictionaryClient`, runs one operation with
`asyncio.run` and renders the result with Rich. Domain failures exit with
code 1, invalid input with 2 and transport failures with 3.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.http_client import TransportError
from cli import doctor
from cli.ui_components import (
    build_definition_panel,
    build_definitions_table,
    build_error_panel,
    build_vote_panel,
)
from core.config import AppSettings
from core.domain.models import VoteDirection
from core.exceptions import DictionaryError, InvalidArgumentError
from core.logging import setup_logging
from core.services.dictionary_client import DictionaryClient

T = TypeVar("T")

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Urban Dictionary from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

# Tests replace this to inject a client backed by a fake transport.
client_factory: Callable[[AppSettings], DictionaryClient] = DictionaryClient.from_settings


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level (default from settings)."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(build_error_panel(f"Invalid configuration: {exc}"))
        raise typer.Exit(code=2) from exc

    level = (log_level or settings.log_level).strip().upper()
    if level not in logging.getLevelNamesMapping():
        _console.print(build_error_panel(f"Unknown log level: {log_level}"))
        raise typer.Exit(code=2)
    setup_logging(level)


def _run(operation: Callable[[DictionaryClient], Awaitable[T]]) -> T:
    async def _with_client() -> T:
        async with client_factory(AppSettings()) as client:
            return await operation(client)

    try:
        return asyncio.run(_with_client())
    except InvalidArgumentError as exc:
        _console.print(build_error_panel(str(exc)))
        raise typer.Exit(code=2) from exc
    except DictionaryError as exc:
        _console.print(build_error_panel(str(exc)))
        raise typer.Exit(code=1) from exc
    except TransportError as exc:
        _console.print(build_error_panel(f"API unavailable: {exc}"))
        raise typer.Exit(code=3) from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def define(
    term: str = typer.Argument(..., help="Term to look up"),
    limit: int = typer.Option(5, "--limit", min=1, help="Maximum definitions to show"),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Look up the definitions of a term."""

    result = _run(lambda client: client.lookup_by_term(term))
    if json_out:
        _echo_json(result.model_dump(mode="json", by_alias=True))
        return
    _console.print(build_definitions_table(f"Definitions for: {term!r}", result.entries[:limit]))


@app.command()
def defid(
    definition_id: int = typer.Argument(..., help="Numeric definition id"),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Look up a definition by its numeric id."""

    result = _run(lambda client: client.lookup_by_id(definition_id))
    if json_out:
        _echo_json(result.model_dump(mode="json", by_alias=True))
        return
    _console.print(build_definitions_table(f"Definition {definition_id}", result.entries))


@app.command()
def random(
    show_all: bool = typer.Option(False, "--all", help="Show every entry returned by the API"),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of Rich output"),
) -> None:
    """Show a random definition."""

    if show_all:
        records = _run(lambda client: client.random_entries())
        if json_out:
            _echo_json([r.model_dump(mode="json") for r in records])
            return
        _console.print(build_definitions_table("Random definitions", records))
        return

    record = _run(lambda client: client.random_entry())
    if json_out:
        _echo_json(record.model_dump(mode="json"))
        return
    _console.print(build_definition_panel(record))


@app.command()
def autocomplete(
    term: str = typer.Argument(..., help="Prefix to complete"),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of plain lines"),
) -> None:
    """List suggestions for a prefix, in server order."""

    suggestions = _run(lambda client: client.autocomplete(term))
    if json_out:
        _echo_json(suggestions)
        return
    for suggestion in suggestions:
        typer.echo(suggestion)


@app.command()
def vote(
    definition_id: int = typer.Argument(..., help="Numeric definition id"),
    direction: str = typer.Argument(..., help="up or down"),
) -> None:
    """Vote a definition up or down."""

    result = _run(lambda client: client.vote_on_definition(definition_id, VoteDirection.parse(direction)))
    _console.print(build_vote_panel(definition_id, result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
