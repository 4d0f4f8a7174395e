"""Modes module — discover, assemble, and write mode documents as .roomodes."""

from modegen.modes.assembler import AssemblyResult, assemble_modes
from modegen.modes.discover import discover_modes
from modegen.modes.writer import build_config, generate, write_config

__all__ = [
    "AssemblyResult",
    "assemble_modes",
    "discover_modes",
    "build_config",
    "generate",
    "write_config",
]
