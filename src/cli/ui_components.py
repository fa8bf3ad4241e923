"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import DefinitionRecord, VoteResult


def _one_line(text: str, limit: int = 160) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[: limit - 1] + "…"


def build_definitions_table(title: str, records: Iterable[DefinitionRecord]) -> Table:
    """Tabla Rich con una fila por definición."""

    table = Table(title=Text(title))
    table.add_column("#", justify="right", style="bold")
    table.add_column("Word", style="cyan", no_wrap=True)
    table.add_column("Definition", style="white")
    table.add_column("Author", style="magenta")
    table.add_column("👍", justify="right", style="green")
    table.add_column("👎", justify="right", style="red")
    table.add_column("Id", justify="right", style="dim")

    for i, record in enumerate(records, start=1):
        table.add_row(
            str(i),
            Text(record.word),
            Text(_one_line(record.definition)),
            Text(record.author),
            str(record.thumbs_up),
            str(record.thumbs_down),
            str(record.defid),
        )
    return table


def build_definition_panel(record: DefinitionRecord) -> Panel:
    """Panel con una definición completa (usado por `random`)."""

    body = Text()
    body.append(record.definition.strip() + "\n")
    if record.example.strip():
        body.append("\n" + record.example.strip() + "\n", style="italic")
    body.append(f"\nby {record.author or 'unknown'}", style="dim")
    body.append(f"  👍 {record.thumbs_up}  👎 {record.thumbs_down}", style="dim")
    if record.permalink:
        body.append(f"\n{record.permalink}", style="dim")

    return Panel(body, title=Text(record.word, style="bold cyan"), border_style="cyan")


def build_vote_panel(defid: int, result: VoteResult) -> Panel:
    body = Text()
    body.append(f"Status: {result.status}\n", style="bold green")
    if result.up is not None:
        body.append(f"👍 {result.up}  ")
    if result.down is not None:
        body.append(f"👎 {result.down}")
    return Panel(body, title=Text(f"Vote on {defid}"), border_style="green")


def build_error_panel(message: str) -> Panel:
    return Panel.fit(Text(message, style="bold red"), border_style="red")
