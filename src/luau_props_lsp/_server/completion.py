"""Completion mixin for providing property autocompletion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lsprotocol.types import CompletionItem, CompletionItemKind, InsertTextFormat

from .base import LSPServerBase
from .utils import client_offset

if TYPE_CHECKING:
    from lsprotocol.types import Position

    from luau_props_lsp.models import PropertyCompletion

logger = logging.getLogger(__name__)


class CompletionMixin(LSPServerBase):
    """Provides autocompletion of element properties for the LSP server."""

    def _get_props_completions(self, uri: str, position: Position) -> list[CompletionItem]:
        """Get property completions for the cursor position in a cached document."""
        if not self._is_supported_document(uri):
            return []

        content = self.document_cache[uri]["content"]
        offset = client_offset(content, position, self._position_codec())
        completions = self.engine.complete(content, offset, self.settings.props)
        if completions:
            logger.debug(f"{len(completions)} property completions at {uri}:{position.line}")
        return [self._to_completion_item(completion) for completion in completions]

    def _to_completion_item(self, completion: PropertyCompletion) -> CompletionItem:
        return CompletionItem(
            label=completion.label,
            kind=CompletionItemKind.Property,
            detail=completion.detail,
            insert_text=completion.insert_text,
            insert_text_format=InsertTextFormat.Snippet,
        )
