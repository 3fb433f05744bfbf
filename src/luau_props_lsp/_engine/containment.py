"""Brace matching for the props table of a call site."""

from __future__ import annotations

from .call_sites import iter_call_sites


def is_inside_props_object(text: str, class_name: str) -> bool:
    """Check whether the props table of the last ``class_name`` call is still open.

    ``text`` ends at the cursor. Starting at the opening ``{`` of the last
    matching call site, braces are counted until the depth returns to
    zero. If that happens the table was closed before the cursor.

    Braces inside string literals and comments are counted like any other,
    so an unbalanced brace in a string value throws the count off.
    """
    props_start = -1
    for call_site in iter_call_sites(text):
        if call_site.class_name == class_name:
            props_start = call_site.brace

    if props_start == -1:
        return False

    depth = 0
    for index in range(props_start, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0 and index > props_start:
                return False

    return True
