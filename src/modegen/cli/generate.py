"""Mode generation CLI commands."""

import argparse
import sys


def cmd_generate(args: argparse.Namespace) -> int:
    from modegen.modes.writer import generate

    def _found(paths):
        print(f"Found {len(paths)} mode files")

    def _progress(path):
        print(f"Processing {path.name}...")

    try:
        result = generate(
            modes_dir=args.modes_dir,
            output=args.output,
            fmt=args.format,
            dry_run=args.dry_run,
            on_discover=_found,
            on_file=_progress,
        )
    except OSError as e:
        print(f"ERROR: Error generating modes configuration: {e}", file=sys.stderr)
        return 1

    for e in result["errors"]:
        print(f"Error parsing {e['path']}: {e['error']}", file=sys.stderr)

    modes = result["modes"]
    verb = "Would generate" if result["dry_run"] else "Successfully generated"
    print(
        f"{verb} {result['output']} configuration "
        f"with {len(modes)} modes ({result['action']})"
    )
    if modes:
        print("\nGenerated modes:")
        for mode in modes:
            print(f"  - {mode.name} ({mode.slug})")

    if result["dry_run"]:
        print("\n[DRY RUN] No files were modified.")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    from modegen.modes.assembler import assemble_modes
    from modegen.modes.discover import discover_modes
    from modegen.modes.writer import sort_modes

    try:
        paths = discover_modes(args.modes_dir)
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    result = assemble_modes(paths)
    for e in result.errors:
        print(f"Error parsing {e['path']}: {e['error']}", file=sys.stderr)

    modes = sort_modes(result.modes)
    print(f"Found {len(modes)} modes:\n")
    for mode in modes:
        extra = "" if mode.custom_instructions is None else "  [+instructions]"
        print(f"  {mode.name} ({mode.slug}){extra}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    from modegen.modes.assembler import assemble_modes
    from modegen.modes.discover import discover_modes

    try:
        paths = discover_modes(args.modes_dir)
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    result = assemble_modes(paths)
    failed = {e["path"]: e["error"] for e in result.errors}
    for path in paths:
        if path.name in failed:
            print(f"  FAIL {path.name}: {failed[path.name]}")
        else:
            print(f"  PASS {path.name}")

    print(f"\n{len(paths) - len(failed)} passed, {len(failed)} failed")
    return 1 if failed else 0
