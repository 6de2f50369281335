"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from gemtrans.core.interface.models import (
    CanonicalMessage,
    DecodeError,
    DecodeResult,
    MessageDelta,
)

console = Console()


def print_payload(payload: dict[str, Any]) -> None:
    """Print a request payload as JSON."""
    click.echo(json.dumps(payload, indent=2))


def print_results(results: list[DecodeResult], *, as_json: bool = False) -> None:
    """Pretty-print decode results as a table, or as a JSON list."""
    if as_json:
        data = [{"kind": _kind(r), **r.model_dump(mode="json")} for r in results]
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Decoded Candidates")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Status")
    table.add_column("Content")

    for position, result in enumerate(results):
        if isinstance(result, DecodeError):
            table.add_row(str(position), "error", "-", f"[red]{result.message}[/red]")
            continue
        index = "-" if result.index is None else str(result.index)
        table.add_row(index, _kind(result), result.status or "-", _summary(result))

    console.print(table)


def _kind(result: DecodeResult) -> str:
    if isinstance(result, DecodeError):
        return "error"
    if isinstance(result, CanonicalMessage):
        return "message"
    return "delta"


def _summary(result: CanonicalMessage | MessageDelta) -> str:
    if isinstance(result, CanonicalMessage):
        calls = [f"{tc.name}({json.dumps(tc.arguments)})" for tc in result.tool_calls or []]
        return _truncate(" ".join([result.text, *calls]).strip())
    return _truncate(result.content)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
