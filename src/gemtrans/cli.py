"""gemtrans CLI entrypoint."""

from __future__ import annotations

import logging

import click

from gemtrans import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gemtrans")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """gemtrans — translate chat conversations to and from Gemini payloads."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
from gemtrans.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
