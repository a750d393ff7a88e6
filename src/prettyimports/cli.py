"""
prettyimports CLI Entry Point.
"""

import argparse
import dataclasses
import sys
from pathlib import Path

from prettyimports.support.config import SORT_METHODS, OrganizeImportsConfig, load_config
from prettyimports.support.file_operations import apply_edit, read_file, unified_diff
from prettyimports.support.logging_config import setup_logging
from prettyimports.core.discovery import discover_files
from prettyimports.dispatch import Trigger, handle_trigger
from prettyimports.watch import watch_project
from prettyimports import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="prettyimports: group and sort the imports of JavaScript and TypeScript files."
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to organize. Use '-' to read from stdin and write to stdout.",
    )

    parser.add_argument(
        "--config", help="Path to a .prettyimports.toml or pyproject.toml configuration file."
    )

    parser.add_argument(
        "--sort-method",
        choices=SORT_METHODS,
        help="Override the configured sort method.",
    )

    parser.add_argument(
        "--version", action="version", version=f"prettyimports {__version__}"
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write files; exit with 1 if any file would change.",
    )

    parser.add_argument(
        "--diff",
        action="store_true",
        help="Print a unified diff of the changes instead of writing files.",
    )

    parser.add_argument(
        "--dry-run", action="store_true", help="Report changes without writing files."
    )

    parser.add_argument(
        "--stdin-filename",
        default="stdin.ts",
        help="File name used to pick the grammar when reading from stdin (default: stdin.ts).",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output."
    )

    parser.add_argument(
        "--watch",
        action="store_true",
        help="Watch the given directory (default: current directory) and organize files on save.",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> OrganizeImportsConfig:
    """Load configuration and apply command line overrides."""
    config = load_config(Path(args.config) if args.config else None)
    if args.sort_method:
        config = dataclasses.replace(config, sort_method=args.sort_method)
    return config


def process_file(source_path: Path, config: OrganizeImportsConfig, args, trigger=Trigger.MANUAL) -> dict:
    """
    Organize a single file.
    Returns a dict with action results.
    """
    result = {
        "source": source_path,
        "status": "unchanged",
        "diff": None,
        "error": None,
    }

    try:
        text = read_file(source_path)
        edit = handle_trigger(trigger, text, str(source_path), config)

        if not edit.changed:
            return result

        if args.diff:
            result["diff"] = unified_diff(text, edit.apply(text), str(source_path))

        if args.check or args.diff or args.dry_run:
            result["status"] = "would-change"
            return result

        apply_edit(source_path, text, edit)
        result["status"] = "organized"
        if args.verbose:
            print(f"Organized imports in {source_path}")
        return result

    except (OSError, UnicodeDecodeError) as e:
        result["status"] = "error"
        result["error"] = str(e)
        if args.verbose:
            print(f"Error processing {source_path}: {e}")
        return result


def print_summary(results: list[dict], args):
    """Print the batch summary."""
    organized = [r for r in results if r["status"] == "organized"]
    pending = [r for r in results if r["status"] == "would-change"]
    unchanged = [r for r in results if r["status"] == "unchanged"]
    errors = [r for r in results if r["error"]]

    print("\nprettyimports Summary")
    print("─────────────────────")
    print(f"Processed {len(results)} files")
    if args.check or args.diff or args.dry_run:
        print(f"Would change: {len(pending)} files")
    else:
        print(f"Organized:    {len(organized)} files")
    print(f"Unchanged:    {len(unchanged)} files")
    if errors:
        print(f"Errors:       {len(errors)} files failed")
        print("\nFailures:")
        for r in errors:
            print(f"  ✗ {r['source']}: {r['error']}")


def run_stdin(config: OrganizeImportsConfig, args: argparse.Namespace) -> int:
    """Formatter mode: organize stdin and write the result to stdout."""
    text = sys.stdin.read()
    edit = handle_trigger(Trigger.FORMAT, text, args.stdin_filename, config)

    if args.check:
        return 1 if edit.changed else 0

    if args.diff:
        if edit.changed:
            sys.stdout.write(unified_diff(text, edit.apply(text), args.stdin_filename))
        return 0

    sys.stdout.write(edit.apply(text))
    return 0


def run(args: argparse.Namespace) -> int:
    """Main command logic.
    Returns exit code (0 for success, non-zero for error).
    """
    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    # Handle watch mode
    if args.watch:
        root = Path(args.paths[0]) if args.paths else Path.cwd()
        try:
            def process_changed_file(file_path: Path):
                """Process a single changed file."""
                result = process_file(file_path, config, args, trigger=Trigger.WATCH)
                if result["error"]:
                    raise OSError(result["error"])
                return result["status"] == "organized"

            watch_project(root.resolve(), config, process_changed_file)
            return 0
        except KeyboardInterrupt:
            return 0
        except Exception as e:
            print(f"Error in watch mode: {e}")
            return 1

    if args.paths == ["-"]:
        return run_stdin(config, args)

    if "-" in args.paths:
        print("Error: '-' cannot be combined with other paths.")
        return 1

    if not args.paths:
        print("Error: You must provide at least one file or directory, '-' or --watch.")
        return 1

    # Determine files to process
    files_to_process = []
    for raw_path in args.paths:
        target_path = Path(raw_path)
        if not target_path.exists():
            print(f"Error: Path not found: {target_path}")
            return 1
        files_to_process.extend(discover_files(target_path, config))

    if not files_to_process:
        print("No files found to process.")
        return 0

    if args.verbose:
        print(f"Found {len(files_to_process)} files to process.")

    results = []
    for src in files_to_process:
        res = process_file(src, config, args)
        results.append(res)

        if res["diff"]:
            print(res["diff"], end="")
        elif res["status"] == "would-change":
            print(f"Would reorganize imports in {src}")

    print_summary(results, args)

    if any(r["error"] for r in results):
        return 1

    if args.check and any(r["status"] == "would-change" for r in results):
        return 1

    return 0


def main():
    """Entry point for console script."""
    sys.exit(run(parse_args()))


if __name__ == "__main__":
    main()
