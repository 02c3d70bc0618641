"""leakbot command line interface."""

import sys

import click

from leakbot import __version__
from .shared import console


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="leakbot")
@click.pass_context
def cli(ctx):
    """leakbot — Telegram front end for LeakOSINT"""
    if ctx.invoked_subcommand is None:
        _show_help()


def _show_help():
    """Show all available commands."""
    console.print(f"[bold]leakbot v{__version__}[/bold] — Telegram front end for LeakOSINT\n")

    commands = [
        ("start", "Start the Telegram bot"),
        ("search QUERY", "Run one search and print the formatted result"),
    ]
    for name, desc in commands:
        console.print(f"    [bold]leakbot {name:16s}[/bold] {desc}")
    console.print()

    console.print("[dim]Run 'leakbot <command> --help' for details on a specific command.[/dim]")


# Import all command modules (registers commands onto cli group)
from . import cmd_start  # noqa: E402, F401
from . import cmd_search  # noqa: E402, F401


@cli.command(name="help", hidden=True)
def help_cmd():
    """Show all available commands."""
    _show_help()


def main():
    """CLI entry point."""
    try:
        cli(standalone_mode=False)
    except click.UsageError as e:
        if e.ctx:
            click.echo(e.ctx.command.get_usage(e.ctx), err=True)
        click.echo("Try 'leakbot help' for help.\n", err=True)
        click.echo(f"Error: {e.format_message()}", err=True)
        sys.exit(2)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.exceptions.Exit as e:
        sys.exit(e.code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
