"""Data models for luau-props-lsp."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CallSite:
    """A ``createElement``-style call found in the scanned text.

    Offsets are relative to the text that was scanned, not the document.
    """

    start: int
    brace: int
    class_name: str


@dataclass(frozen=True)
class PropertyCompletion:
    """A single property suggestion for an element class."""

    label: str
    insert_text: str
    detail: str
