"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from gemtrans.cli_commands.decode import decode_cmd
    from gemtrans.cli_commands.encode import encode_cmd

    cli.add_command(encode_cmd)
    cli.add_command(decode_cmd)
