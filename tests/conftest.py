from __future__ import annotations

import pytest

from luau_props_lsp.engine import PropsCompletionEngine
from luau_props_lsp.server import create_server

CURSOR = "<|>"


@pytest.fixture
def engine():
    return PropsCompletionEngine()


@pytest.fixture
def server():
    return create_server()


@pytest.fixture
def cursor():
    """Split source text at the ``<|>`` marker into (text, offset)."""

    def split(source: str) -> tuple[str, int]:
        offset = source.index(CURSOR)
        return source[:offset] + source[offset + len(CURSOR) :], offset

    return split
