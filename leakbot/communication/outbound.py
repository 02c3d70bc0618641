"""Outbound message processing: universal post-processing before delivery.

Handles:
- Message chunking for platform length limits
- Attribution watermark

These operations are channel-agnostic. Every outgoing message passes
through ``with_watermark``; long rendered blocks pass through
``chunk_message`` first.
"""

DEFAULT_MESSAGE_LIMIT = 3500
DEFAULT_MAX_CHUNKS = 10

# Only cut at a newline if it sits within this many chars of the limit
LINE_BREAK_WINDOW = 500

TRUNCATION_MARKER = "\n\n…truncated…"


# ============================================================
# MESSAGE CHUNKING
# ============================================================

def chunk_message(
    text: str,
    limit: int = DEFAULT_MESSAGE_LIMIT,
    max_chunks: int = DEFAULT_MAX_CHUNKS,
) -> list[str]:
    """Split a long message into chunks respecting platform length limits.

    Prefers cutting at the last newline inside the window, as long as that
    newline is no more than LINE_BREAK_WINDOW chars before the limit;
    otherwise hard-cuts at ``limit``. Every chunk except the last carries
    TRUNCATION_MARKER. Anything past ``max_chunks`` is dropped.

    Args:
        text: Message text to split
        limit: Maximum length per chunk, excluding the marker
        max_chunks: Maximum number of chunks returned

    Returns:
        List of message chunks
    """
    if len(text) <= limit:
        return [text]

    chunks = []
    remaining = text

    while remaining and len(chunks) < max_chunks:
        if len(remaining) <= limit:
            chunks.append(remaining)
            break

        head = remaining[:limit]
        safe_break = head.rfind("\n")
        if safe_break > 0 and safe_break >= limit - LINE_BREAK_WINDOW:
            cut = safe_break
        else:
            # Hard cut
            cut = limit

        chunks.append(head[:cut] + TRUNCATION_MARKER)
        remaining = remaining[cut:]

    return chunks


# ============================================================
# WATERMARK
# ============================================================

def with_watermark(text: str, watermark: str) -> str:
    """Append the attribution line after a blank line."""
    return f"{text}\n\n— {watermark}"
