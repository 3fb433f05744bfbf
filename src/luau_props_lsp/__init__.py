"""Property completions for React-Luau ``createElement`` calls."""

from __future__ import annotations

from .__version import __version__
from .engine import PropsCompletionEngine

__all__ = ["PropsCompletionEngine", "__version__"]
