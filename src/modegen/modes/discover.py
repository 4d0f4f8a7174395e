"""Discover *-mode.md files in the modes directory."""

from pathlib import Path

from modegen.mode_config import MODE_SUFFIX
from modegen.paths import modes_dir as _default_modes_dir


def discover_modes(modes_dir: Path | str | None = None) -> list[Path]:
    """List mode documents directly inside a directory.

    Only files whose name ends with ``-mode.md`` are returned;
    subdirectories are not searched.

    Args:
        modes_dir: Directory to scan. Defaults to MODEGEN_MODES_DIR or cwd.

    Returns:
        Paths sorted by filename.

    Raises:
        OSError: If the directory is missing or unreadable.
    """
    root = Path(modes_dir) if modes_dir else _default_modes_dir()
    return sorted(
        (p for p in root.iterdir() if p.name.endswith(MODE_SUFFIX) and p.is_file()),
        key=lambda p: p.name,
    )
