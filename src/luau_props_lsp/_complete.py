"""Complete command implementation for one-shot completions from the shell."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from .config import normalize_props
from .engine import PropsCompletionEngine


def load_props_file(path_str: str) -> dict[str, list[str]] | None:
    """Read a JSON property map, exiting with an error message if it is unusable."""
    path = Path(path_str)
    try:
        raw_props: Any = json.loads(path.read_text())
    except OSError as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {path}: {e}", file=sys.stderr)
        sys.exit(1)

    return normalize_props(raw_props)


def run_complete(file: str, line: int, column: int, props_file: str | None = None) -> None:
    """Print the completions for a 1-based line/column in ``file``."""
    path = Path(file)
    try:
        content = path.read_text()
    except OSError as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        sys.exit(1)

    user_props = load_props_file(props_file) if props_file else None

    engine = PropsCompletionEngine()
    # Convert to 0-indexed
    completions = engine.complete_at(content, line - 1, column - 1, user_props)
    for completion in completions:
        print(f"{completion.label}\t{completion.detail}")
