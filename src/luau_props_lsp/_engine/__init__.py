"""
Engine package - the text-scanning steps behind ``PropsCompletionEngine``.

Each step is a plain function over the text before the cursor so it can
be tested, and later replaced, on its own.
"""

from __future__ import annotations

from .builder import build_completions
from .call_sites import find_enclosing_class_name, iter_call_sites
from .containment import is_inside_props_object
from .properties import resolve_properties
from .window import extract_window, offset_at, split_lines

__all__ = [
    "build_completions",
    "extract_window",
    "find_enclosing_class_name",
    "is_inside_props_object",
    "iter_call_sites",
    "offset_at",
    "resolve_properties",
    "split_lines",
]
