"""Mixins for the Luau Props Language Server."""

from __future__ import annotations

from .completion import CompletionMixin
from .utils import DocumentUtilsMixin

__all__ = ["CompletionMixin", "DocumentUtilsMixin"]
