"""Tests for message chunking and watermarking."""

from leakbot.communication.outbound import (
    TRUNCATION_MARKER,
    chunk_message,
    with_watermark,
)


def _body(chunk: str) -> str:
    if chunk.endswith(TRUNCATION_MARKER):
        return chunk[: -len(TRUNCATION_MARKER)]
    return chunk


class TestChunkMessage:
    def test_short_text_single_chunk(self):
        assert chunk_message("hello", limit=3500) == ["hello"]

    def test_exact_limit_single_chunk(self):
        text = "x" * 3500
        assert chunk_message(text, limit=3500) == [text]

    def test_empty_text(self):
        assert chunk_message("", limit=3500) == [""]

    def test_marker_literal(self):
        assert TRUNCATION_MARKER == "\n\n…truncated…"

    def test_line_every_100_chars(self):
        """10,000 chars with a newline every 100 → three pieces on line boundaries."""
        text = ("x" * 99 + "\n") * 100
        chunks = chunk_message(text, limit=3500)

        assert len(chunks) == 3
        for chunk in chunks:
            assert len(chunk) <= 3500 + len(TRUNCATION_MARKER)
        assert chunks[0].endswith(TRUNCATION_MARKER)
        assert chunks[1].endswith(TRUNCATION_MARKER)
        assert not chunks[2].endswith(TRUNCATION_MARKER)

        bodies = [_body(c) for c in chunks]
        # Nothing lost, and every cut lands right before a newline
        assert "".join(bodies) == text
        offset = 0
        for body in bodies[:-1]:
            offset += len(body)
            assert text[offset] == "\n"
            assert body.split("\n")[-1] == "x" * 99

    def test_hard_cut_without_newlines(self):
        text = "a" * 8000
        chunks = chunk_message(text, limit=3500)
        assert [len(_body(c)) for c in chunks] == [3500, 3500, 1000]
        assert "".join(_body(c) for c in chunks) == text

    def test_hard_cut_when_newline_too_early(self):
        # Only newline is 600 chars before the limit → outside the window
        text = "a" * 2900 + "\n" + "b" * 5000
        chunks = chunk_message(text, limit=3500)
        assert len(_body(chunks[0])) == 3500

    def test_newline_at_window_edge_is_used(self):
        # Newline at index limit - 500 is still inside the window
        text = "a" * 3000 + "\n" + "b" * 5000
        chunks = chunk_message(text, limit=3500)
        assert _body(chunks[0]) == "a" * 3000

    def test_capped_at_ten_chunks(self):
        text = "z" * 100_000
        chunks = chunk_message(text, limit=3500)
        assert len(chunks) == 10
        # Every one of them was cut, so every one carries the marker
        assert all(c.endswith(TRUNCATION_MARKER) for c in chunks)

    def test_custom_max_chunks(self):
        chunks = chunk_message("q" * 1000, limit=100, max_chunks=3)
        assert len(chunks) == 3

    def test_small_limit_does_not_loop_on_leading_newline(self):
        text = "\n" + "c" * 300
        chunks = chunk_message(text, limit=100)
        assert all(len(_body(c)) > 0 for c in chunks)
        assert "".join(_body(c) for c in chunks) == text


class TestWatermark:
    def test_appended_after_blank_line(self):
        assert with_watermark("body", "made by me") == "body\n\n— made by me"

    def test_keeps_html(self):
        assert with_watermark("<b>x</b>", "wm").startswith("<b>x</b>\n\n")
