"""Lookup of the property names offered for a class."""

from __future__ import annotations

from typing import TYPE_CHECKING

from luau_props_lsp.constants import DEFAULT_PROPS

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def resolve_properties(
    class_name: str,
    user_props: Mapping[str, Sequence[str]] | None = None,
    default_props: Mapping[str, Sequence[str]] = DEFAULT_PROPS,
) -> list[str] | None:
    """Get the property names for ``class_name``.

    The user's entry wins when it exists and is non-empty; otherwise the
    built-in entry for the same class is used. Returns None when neither
    knows the class.
    """
    if user_props:
        user_entry = user_props.get(class_name)
        if user_entry:
            return list(user_entry)

    default_entry = default_props.get(class_name)
    if default_entry is None:
        return None
    return list(default_entry)
