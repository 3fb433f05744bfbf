"""Construction of completion candidates from property names."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from luau_props_lsp.constants import COMPLETION_DETAIL
from luau_props_lsp.models import PropertyCompletion

if TYPE_CHECKING:
    from collections.abc import Sequence

_re_snippet_special = re.compile(r"([\\$}])")


def _escape_snippet(text: str) -> str:
    return _re_snippet_special.sub(r"\\\1", text)


def build_completions(class_name: str, properties: Sequence[str]) -> list[PropertyCompletion]:
    """Build one ``Name = `` completion per property, keeping the given order.

    The insert text is snippet syntax with the final cursor (``$0``) placed
    right after the assignment.
    """
    detail = COMPLETION_DETAIL.format(class_name=class_name)
    return [
        PropertyCompletion(
            label=name,
            insert_text=f"{_escape_snippet(name)} = $0",
            detail=detail,
        )
        for name in properties
    ]
