"""Search result to Telegram HTML renderer.

Telegram supports a limited HTML subset:
  <b>bold</b>, <i>italic</i>, <u>underline</u>, <s>strikethrough</s>,
  <code>inline code</code>, <pre>code block</pre>

Only <b> and <code> are emitted here. Every piece of API text is escaped
exactly once before it is embedded; the tags we insert are never escaped.
"""

import html as _html

from ..search.provider import DatabaseEntry, Scalar, SearchResult
from .outbound import DEFAULT_MAX_CHUNKS, DEFAULT_MESSAGE_LIMIT, chunk_message

NO_RESULTS_TEXT = "No results found."


def escape_html(text: str) -> str:
    """Escape &, < and > for Telegram HTML. Ampersand goes first."""
    return _html.escape(text, quote=False)


def render_value(value: Scalar) -> str:
    """String form of a record value as shown to the user."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _render_entry(name: str, entry: DatabaseEntry) -> str:
    """Render one database as a single HTML text block (not yet chunked)."""
    lines = [f"<b>{escape_html(name)}</b>"]

    if entry.summary:
        lines.append(escape_html(entry.summary))

    for record in entry.records:
        for column, value in record.items():
            lines.append(f"<b>{escape_html(str(column))}</b>: {escape_html(render_value(value))}")
        lines.append("")

    return "\n".join(lines).rstrip()


def format_search_result(
    result: SearchResult,
    limit: int = DEFAULT_MESSAGE_LIMIT,
    max_blocks: int = DEFAULT_MAX_CHUNKS,
) -> list[str]:
    """Turn a successful SearchResult into chat-ready HTML blocks.

    Each database is rendered and chunked on its own; the combined list is
    then capped at ``max_blocks``. Blocks past the cap are dropped without
    notice.

    The caller is responsible for rejecting failed results (error_code set)
    before calling this.
    """
    if not result.entries:
        return [NO_RESULTS_TEXT]

    blocks: list[str] = []
    for name, entry in result.entries.items():
        blocks.extend(chunk_message(_render_entry(name, entry), limit=limit))

    return blocks[:max_blocks]
