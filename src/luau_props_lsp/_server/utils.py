"""Utility mixin for document bookkeeping shared across LSP features."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lsprotocol.types import Position
from pygls.workspace import PositionCodec

from luau_props_lsp._engine import offset_at, split_lines

from .base import LSPServerBase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lsprotocol.types import TextDocumentContentChangeEvent

logger = logging.getLogger(__name__)


def client_offset(content: str, position: Position, codec: PositionCodec) -> int:
    """Convert a client position into an offset into ``content``.

    ``position.character`` is counted in the client's code units (UTF-16
    unless negotiated otherwise). Positions past the end of a line or of
    the document are left to ``offset_at`` to clamp.
    """
    lines = split_lines(content)
    line, character = position.line, position.character
    if 0 <= line < len(lines) and character <= codec.client_num_units(
        lines[line].rstrip("\r\n")
    ):
        # The codec may modify the position it is given
        position = codec.position_from_client_units(
            lines, Position(line=line, character=character)
        )
        character = position.character
    return offset_at(content, line, character)


def apply_content_changes(
    content: str,
    changes: Sequence[TextDocumentContentChangeEvent],
    codec: PositionCodec | None = None,
) -> str:
    """Apply incremental or full-document changes to ``content`` in order."""
    codec = codec or PositionCodec()
    for change in changes:
        change_range = getattr(change, "range", None)
        if change_range is None:
            content = change.text
            continue

        start = client_offset(content, change_range.start, codec)
        end = client_offset(content, change_range.end, codec)
        content = content[:start] + change.text + content[max(start, end) :]
    return content


class DocumentUtilsMixin(LSPServerBase):
    """Keeps ``document_cache`` in sync with the client's open documents."""

    def _open_document(self, uri: str, content: str, language_id: str | None = None) -> None:
        self.document_cache[uri] = {"content": content, "language_id": language_id}
        logger.info(f"Opened document: {uri}")

    def _change_document(self, uri: str, changes: Sequence[TextDocumentContentChangeEvent]):
        """Apply changes to a cached document; unknown documents are ignored."""
        if uri not in self.document_cache:
            logger.debug(f"Change for unopened document: {uri}")
            return
        document = self.document_cache[uri]
        document["content"] = apply_content_changes(
            document["content"], changes, self._position_codec()
        )

    def _close_document(self, uri: str) -> None:
        self.document_cache.pop(uri, None)
        logger.info(f"Closed document: {uri}")
