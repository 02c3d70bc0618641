"""Communication sub-core: channel-agnostic message handling.

This package holds all outbound text logic:
- Formatting: search result → escaped Telegram HTML blocks
- Outbound: message chunking and the attribution watermark
- Errors: search failures → short user-facing reasons
- Telegram: transport adapter (imported directly, not re-exported here)
"""

from .errors import classify_error
from .formatting import NO_RESULTS_TEXT, escape_html, format_search_result, render_value
from .outbound import TRUNCATION_MARKER, chunk_message, with_watermark

__all__ = [
    # Formatting
    "NO_RESULTS_TEXT",
    "escape_html",
    "format_search_result",
    "render_value",
    # Outbound
    "TRUNCATION_MARKER",
    "chunk_message",
    "with_watermark",
    # Errors
    "classify_error",
]
