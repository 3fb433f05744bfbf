"""Selection of the text considered for a completion query."""

from __future__ import annotations

import re

from luau_props_lsp.constants import MAX_LOOKBACK

# Lines split the way LSP clients count them: \n, \r\n or a lone \r
_re_line = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


def extract_window(text: str, offset: int, max_lookback: int = MAX_LOOKBACK) -> str:
    """Return the text before ``offset``, limited to its last ``max_lookback`` characters.

    An offset outside the document is treated as the end of the document.
    Call sites that start before the window are not seen, which bounds the
    work done per keystroke on large files.
    """
    if offset < 0 or offset > len(text):
        offset = len(text)
    before_cursor = text[:offset]
    if len(before_cursor) > max_lookback:
        before_cursor = before_cursor[len(before_cursor) - max_lookback :]
    return before_cursor


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, keeping their line breaks."""
    return _re_line.findall(text)


def offset_at(text: str, line: int, character: int) -> int:
    """Convert a zero-based line/character position into an offset into ``text``.

    A line past the last one maps to the end of the document, and a
    character past the end of its line is clamped to the line end.
    """
    if line < 0:
        return len(text)

    lines = split_lines(text)
    if line >= len(lines):
        return len(text)

    offset = sum(len(previous) for previous in lines[:line])
    current = lines[line].rstrip("\r\n")
    return offset + min(max(character, 0), len(current))
