"""``gemtrans encode`` — build a Gemini request from a conversation file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from gemtrans.cli_commands._output import console, print_payload


@click.command("encode")
@click.argument("conversation", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="Model config file; overrides the conversation's config section.",
)
@click.option("--telemetry", is_flag=True, help="Enable telemetry.")
def encode_cmd(conversation: str, config_file: str | None, telemetry: bool) -> None:
    """Encode the conversation in CONVERSATION into a generateContent body.

    CONVERSATION is a YAML or JSON file with ``messages``, optional ``tools``
    and an optional ``config`` section.
    """
    from gemtrans.core.interface.errors import EncodeError
    from gemtrans.core.interface.transpilers.gemini import encode
    from gemtrans.sdk.loader import ConversationLoader, load_config
    from gemtrans.sdk.models import TelemetrySettings
    from gemtrans.utils.telemetry import configure_telemetry

    try:
        spec = ConversationLoader(Path(conversation)).load()
        if config_file:
            spec.config = load_config(Path(config_file))
    except Exception as exc:
        console.print(f"[red]Error loading conversation:[/red] {exc}")
        sys.exit(1)

    if telemetry:
        spec.telemetry = TelemetrySettings(enabled=True)
    if spec.telemetry and spec.telemetry.enabled:
        configure_telemetry(export_to_console=False, otlp_endpoint=spec.telemetry.otlp_endpoint)

    try:
        payload = encode(spec.config, spec.messages, spec.tools)
    except EncodeError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    print_payload(payload)
