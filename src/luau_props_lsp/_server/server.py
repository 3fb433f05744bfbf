from __future__ import annotations

import logging
from typing import Any

from lsprotocol.types import (
    CompletionList,
    CompletionOptions,
    CompletionParams,
    DidChangeConfigurationParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    InitializeParams,
    TextDocumentSyncKind,
)

from luau_props_lsp import __version__
from luau_props_lsp.config import PropsSettings
from luau_props_lsp.constants import TRIGGER_CHARACTERS

from .completion import CompletionMixin
from .utils import DocumentUtilsMixin

logger = logging.getLogger(__name__)


class PropsLanguageServer(DocumentUtilsMixin, CompletionMixin):
    """Language Server offering React-Luau element property completions."""

    def _initialize(self, params: InitializeParams) -> None:
        # Capture workspace root for logging only; nothing is read from disk
        if params.workspace_folders:
            self.workspace_root = self._uri_to_path(params.workspace_folders[0].uri)
        elif params.root_uri:
            self.workspace_root = self._uri_to_path(params.root_uri)
        elif params.root_path:
            self.workspace_root = params.root_path

        logger.info(f"Workspace root: {self.workspace_root}")
        self._update_settings(params.initialization_options)

    def _update_settings(self, settings: Any) -> None:
        """Replace the current settings with a client payload."""
        if settings is None:
            return
        self.settings = PropsSettings.from_client_settings(settings)
        configured = sorted(self.settings.props or {})
        logger.info(f"User properties configured for: {configured or 'no classes'}")

    def _completion(self, params: CompletionParams) -> CompletionList:
        items = self._get_props_completions(params.text_document.uri, params.position)
        return CompletionList(is_incomplete=False, items=items)


def create_server() -> PropsLanguageServer:
    """Create a language server with all features registered."""
    server = PropsLanguageServer(
        "luau-props-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Incremental
    )

    @server.feature("initialize")
    def initialize(params: InitializeParams) -> None:
        """Initialize the language server."""
        logger.info("Initializing Luau Props LSP server")
        server._initialize(params)

    @server.feature("textDocument/didOpen")
    def did_open(params: DidOpenTextDocumentParams):
        """Handle document open event."""
        document = params.text_document
        server._open_document(document.uri, document.text, document.language_id)

    @server.feature("textDocument/didChange")
    def did_change(params: DidChangeTextDocumentParams):
        """Handle document change event."""
        server._change_document(params.text_document.uri, params.content_changes)

    @server.feature("textDocument/didClose")
    def did_close(params: DidCloseTextDocumentParams):
        """Handle document close event."""
        server._close_document(params.text_document.uri)

    @server.feature("workspace/didChangeConfiguration")
    def did_change_configuration(params: DidChangeConfigurationParams):
        """Pick up new user settings."""
        server._update_settings(params.settings)

    @server.feature(
        "textDocument/completion", CompletionOptions(trigger_characters=TRIGGER_CHARACTERS)
    )
    def completion(params: CompletionParams) -> CompletionList:
        """Provide completion suggestions."""
        return server._completion(params)

    return server
