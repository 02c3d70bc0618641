"""Start command."""

import asyncio
import logging
import sys

import click

from . import cli
from .shared import console


@cli.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def start(debug):
    """Start the Telegram bot."""
    from leakbot.config import ConfigError
    from leakbot.main import run, setup_logging

    setup_logging(logging.DEBUG if debug else logging.INFO)

    console.print("[bold blue]Starting leakbot...[/bold blue]")
    try:
        asyncio.run(run())
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/dim]")
