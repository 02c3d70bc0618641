"""One-shot search from the terminal."""

import asyncio
import sys

import click
import httpx
from rich.panel import Panel
from rich.text import Text

from . import cli
from .shared import console


async def _search(query: str, lang: str | None, limit: int | None) -> list[str]:
    from leakbot.communication.formatting import format_search_result
    from leakbot.config import load_settings
    from leakbot.search import LeakOsintClient

    settings = load_settings(require_telegram=False)
    client = LeakOsintClient.from_settings(settings)
    if limit:
        client.limit = limit
    result = await client.search(query, lang or settings.leakosint_lang)
    return format_search_result(result, limit=settings.message_limit)


@cli.command()
@click.argument("query")
@click.option("--lang", type=click.Choice(["ru", "en"]), default=None, help="Result language (default: LEAKOSINT_LANG)")
@click.option("--limit", type=int, default=None, help="Max results (default: LEAKOSINT_LIMIT)")
def search(query, lang, limit):
    """Run one LeakOSINT search and print the formatted blocks."""
    from leakbot.communication.errors import classify_error
    from leakbot.config import ConfigError
    from leakbot.search import SearchError

    try:
        blocks = asyncio.run(_search(query, lang, limit))
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except (SearchError, httpx.HTTPError) as e:
        console.print(f"[red]Unable to fetch LeakOSINT data: {classify_error(e)}[/red]")
        sys.exit(1)

    for i, block in enumerate(blocks, 1):
        # Blocks are Telegram HTML; print raw so escaping is visible
        console.print(Panel(Text(block), title=f"{i}/{len(blocks)}", expand=False))
