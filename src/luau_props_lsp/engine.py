"""
React-Luau props completion engine.

Works on plain text only: finds the ``React.createElement``/``e`` call
the cursor is in, checks that its props table is still open and offers
the known properties of the element class.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._engine import (
    build_completions,
    extract_window,
    find_enclosing_class_name,
    is_inside_props_object,
    offset_at,
    resolve_properties,
)
from .constants import DEFAULT_PROPS, MAX_LOOKBACK

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .models import PropertyCompletion

logger = logging.getLogger(__name__)


class PropsCompletionEngine:
    """Suggests element properties for the cursor position in a document.

    The engine keeps no per-query state; user settings are passed to every
    call and never stored.
    """

    def __init__(
        self,
        default_props: Mapping[str, Sequence[str]] = DEFAULT_PROPS,
        max_lookback: int = MAX_LOOKBACK,
    ):
        self.default_props = default_props
        self.max_lookback = max_lookback

    def complete(
        self,
        text: str,
        offset: int,
        user_props: Mapping[str, Sequence[str]] | None = None,
    ) -> list[PropertyCompletion]:
        """Get property completions for the cursor at ``offset`` in ``text``."""
        window = extract_window(text, offset, self.max_lookback)

        class_name = find_enclosing_class_name(window)
        if class_name is None:
            logger.debug("No element call before the cursor")
            return []

        properties = resolve_properties(class_name, user_props, self.default_props)
        if not properties:
            logger.debug(f"No properties known for {class_name}")
            return []

        if not is_inside_props_object(window, class_name):
            logger.debug(f"Cursor is outside the props table of {class_name}")
            return []

        return build_completions(class_name, properties)

    def complete_at(
        self,
        text: str,
        line: int,
        character: int,
        user_props: Mapping[str, Sequence[str]] | None = None,
    ) -> list[PropertyCompletion]:
        """Get property completions for a zero-based line/character position."""
        return self.complete(text, offset_at(text, line, character), user_props)
