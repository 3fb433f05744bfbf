"""Entry point module for the language server."""

from __future__ import annotations

from ._server.server import PropsLanguageServer, create_server

__all__ = ["PropsLanguageServer", "create_server"]
