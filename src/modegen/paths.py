"""Mode directory and output path resolution.

Uses environment variables when available, falls back to the current
working directory.

Environment variables:
    MODEGEN_MODES_DIR — directory holding *-mode.md files (default: cwd)
    MODEGEN_OUTPUT — generated config path (default: <modes dir>/.roomodes)
"""

from __future__ import annotations

import os
from pathlib import Path

from modegen.mode_config import OUTPUT_FILENAME


def modes_dir() -> Path:
    """Return the directory scanned for mode documents."""
    env = os.environ.get("MODEGEN_MODES_DIR")
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def output_path(base: Path | str | None = None) -> Path:
    """Return the path the generated configuration is written to."""
    env = os.environ.get("MODEGEN_OUTPUT")
    if env:
        return Path(env).expanduser()
    root = Path(base) if base else modes_dir()
    return root / OUTPUT_FILENAME
