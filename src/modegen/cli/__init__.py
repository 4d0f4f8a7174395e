"""Command-line interface for modegen.

Usage:
    modegen generate [--modes-dir DIR] [--output PATH] [--format json|yaml] [--dry-run]
    modegen list [--modes-dir DIR]
    modegen validate [--modes-dir DIR]
"""

import argparse
import sys

from modegen import __version__
from modegen.cli.generate import cmd_generate, cmd_list, cmd_validate
from modegen.mode_config import OUTPUT_FORMATS


def _add_modes_dir(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--modes-dir", default=None,
        help="Directory containing *-mode.md files (default: $MODEGEN_MODES_DIR or cwd)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modegen",
        description="Generate the .roomodes configuration from mode documents",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help="Write the .roomodes configuration")
    _add_modes_dir(gen)
    gen.add_argument(
        "--output", default=None,
        help="Output file path (default: $MODEGEN_OUTPUT or <modes-dir>/.roomodes)",
    )
    gen.add_argument(
        "--format", default="json", choices=OUTPUT_FORMATS,
        help="Output format (default: json)",
    )
    gen.add_argument(
        "--dry-run", action="store_true",
        help="Report without writing",
    )

    ls = sub.add_parser("list", help="List modes that would be generated")
    _add_modes_dir(ls)

    val = sub.add_parser("validate", help="Check every mode document parses")
    _add_modes_dir(val)

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "generate": cmd_generate,
        "list": cmd_list,
        "validate": cmd_validate,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
