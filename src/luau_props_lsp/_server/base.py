"""Base class for LSP server with interface for mixins."""

from __future__ import annotations

from typing import Any
from urllib.parse import unquote, urlsplit

from pygls.server import LanguageServer
from pygls.workspace import PositionCodec

from luau_props_lsp.config import PropsSettings
from luau_props_lsp.constants import SUPPORTED_FILE_SUFFIXES, SUPPORTED_LANGUAGE_IDS
from luau_props_lsp.engine import PropsCompletionEngine


class LSPServerBase(LanguageServer):
    """Base class defining the interface needed by mixins.

    Holds the state shared between features: open documents, the latest
    client settings and the completion engine.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.workspace_root: str | None = None
        self.engine = PropsCompletionEngine()
        self.settings = PropsSettings()
        self.document_cache: dict[str, dict[str, Any]] = {}
        self._default_position_codec = PositionCodec()

    def _uri_to_path(self, uri: str) -> str:
        """Convert URI to file path."""
        return unquote(urlsplit(uri).path)

    def _position_codec(self) -> PositionCodec:
        """Codec for the position encoding negotiated with the client.

        Falls back to UTF-16, the protocol default, before initialization.
        """
        try:
            return self.workspace.position_codec
        except RuntimeError:
            return self._default_position_codec

    def _is_supported_document(self, uri: str) -> bool:
        """Check whether completions should be offered for a cached document."""
        document = self.document_cache.get(uri)
        if document is None:
            return False

        if document.get("language_id") in SUPPORTED_LANGUAGE_IDS:
            return True
        # Unknown or generic language ids fall back to the file extension
        return self._uri_to_path(uri).endswith(SUPPORTED_FILE_SUFFIXES)
