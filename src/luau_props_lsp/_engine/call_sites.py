"""Detection of element-constructing calls in plain text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from luau_props_lsp.constants import CALL_TOKENS
from luau_props_lsp.models import CallSite

if TYPE_CHECKING:
    from collections.abc import Iterator

# React.createElement("TextLabel", {   e('Frame', {   e(ImageLabel, {
_re_call_site = re.compile(
    r"\b(?:" + "|".join(re.escape(token) for token in CALL_TOKENS) + r")"
    r"\s*\(\s*"
    r"(?:([\"'])([A-Za-z0-9_]+)\1|([A-Za-z0-9_]+))"
    r"\s*,\s*\{"
)


def iter_call_sites(text: str) -> Iterator[CallSite]:
    """Yield every call site in ``text`` from left to right.

    This is a lexical match only: calls inside strings or comments are
    reported too, and nothing checks that the call is ever closed.
    """
    for match in _re_call_site.finditer(text):
        class_name = match.group(2) or match.group(3)
        yield CallSite(start=match.start(), brace=match.end() - 1, class_name=class_name)


def find_enclosing_class_name(text: str) -> str | None:
    """Return the class name of the last call site in ``text``, if any.

    The textually last call is used as a stand-in for the innermost open
    call; no scope analysis is done.
    """
    class_name = None
    for call_site in iter_call_sites(text):
        class_name = call_site.class_name
    return class_name
