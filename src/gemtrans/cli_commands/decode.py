"""``gemtrans decode`` — decode a saved Gemini response body."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from gemtrans.cli_commands._output import console, print_results


@click.command("decode")
@click.argument("response_file", type=click.Path(exists=True))
@click.option("--delta", is_flag=True, help="Decode candidates as streaming deltas.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def decode_cmd(response_file: str, delta: bool, as_json: bool) -> None:
    """Decode RESPONSE_FILE, a raw generateContent response body.

    Exits with status 1 when any candidate (or the whole response) failed
    to decode.
    """
    from gemtrans.core.interface.models import CanonicalMessage, DecodeError, MessageDelta
    from gemtrans.core.interface.transpilers.gemini import decode

    try:
        raw = Path(response_file).read_bytes()
    except OSError as exc:
        console.print(f"[red]Error reading response:[/red] {exc}")
        sys.exit(1)

    results = decode(raw, MessageDelta if delta else CanonicalMessage)
    print_results(results, as_json=as_json)

    if any(isinstance(r, DecodeError) for r in results):
        sys.exit(1)
