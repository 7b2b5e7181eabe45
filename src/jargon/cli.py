#!/usr/bin/env python3
"""Command-line interface for writing iOS strings files.

Reads translations from a JSON document and writes
``<project>/<lang>.lproj/Localizable.strings`` files plus a ``Base`` copy.

Usage:
    jargon-strings write strings.json --project MyApp
    jargon-strings write strings.json --project MyApp --base-lang fr
    jargon-strings preview strings.json fr
    jargon-strings config --project MyApp --output-root build/
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .core import Translation, TranslationFormatError, load_translations
from .localization import OperationResult, StringsOperations
from .utils.preferences import (
    DEFAULT_PREFERENCES,
    get_preferences_path,
    load_preferences,
    resolve_settings,
    save_preferences,
)

COMMANDS = ("write", "preview", "config")


def print_result(result: OperationResult) -> None:
    """Print an operation result, errors going to stderr.

    Args:
        result: The operation result to display.
    """
    status = "SUCCESS" if result.success else "FAILED"
    print(f"\n[{result.name.upper()}] {status}")

    if result.logs:
        print("\nLogs:")
        for log in result.logs:
            print(f" {log}")

    if result.errors:
        print("\nErrors:", file=sys.stderr)
        for error in result.errors:
            print(f" {error}", file=sys.stderr)


def _read_input(path: Path) -> Optional[List[Translation]]:
    try:
        return load_translations(path)
    except (OSError, TranslationFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def cmd_write(args: argparse.Namespace, preferences: dict) -> int:
    """Write strings files for every language in the input.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        settings = resolve_settings(
            preferences,
            project=args.project,
            base_lang=args.base_lang,
            output_root=args.output_root,
        )
    except ValueError as e:
        print(f"Error: {e}. Use --project.", file=sys.stderr)
        return 1

    translations = _read_input(args.input)
    if translations is None:
        return 1

    result = StringsOperations(settings).write(translations)
    print_result(result)
    return 0 if result.success else 1


def cmd_preview(args: argparse.Namespace) -> int:
    """Print the rendered strings file for one language.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    translations = _read_input(args.input)
    if translations is None:
        return 1

    result = StringsOperations().preview(translations, args.lang)
    if not result.success:
        print_result(result)
        return 1
    print(result.details["contents"])
    return 0


def cmd_config(args: argparse.Namespace, preferences: dict, path: Path) -> int:
    """Show or update stored defaults.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    updates = {
        key: value
        for key, value in (
            ("project", args.project),
            ("base_lang", args.base_lang),
            ("output_root", args.output_root),
        )
        if value is not None
    }

    if updates:
        preferences.update(updates)
        try:
            save_preferences(preferences, path)
        except OSError as e:
            print(f"Error: could not save {path}: {e}", file=sys.stderr)
            return 1
        print(f"Saved preferences to {path}")

    for key in DEFAULT_PREFERENCES:
        print(f"  {key}: {preferences.get(key, '')!r}")
    return 0


def _add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--project", help="Project folder name")
    parser.add_argument(
        "--base-lang",
        help='Language copied to Base.lproj; "default" uses the first language',
    )
    parser.add_argument(
        "--output-root",
        help="Directory the project folder is created in (default: cwd)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="jargon-strings",
        description="Write iOS Localizable.strings files from translations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s write strings.json --project MyApp     Write all languages + Base
  %(prog)s write strings.json --base-lang fr      Use French for Base.lproj
  %(prog)s preview strings.json de                Print the German file
  %(prog)s config --project MyApp                 Store a default project
        """,
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Preferences file (default: $JARGON_STRINGS_CONFIG or ~/.jargon_strings.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    write_parser = subparsers.add_parser(
        "write",
        help="Write Localizable.strings files",
    )
    write_parser.add_argument("input", type=Path, help="JSON translations file")
    _add_settings_arguments(write_parser)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Print one language's strings file without writing it",
    )
    preview_parser.add_argument("input", type=Path, help="JSON translations file")
    preview_parser.add_argument("lang", help="Language to render")

    config_parser = subparsers.add_parser(
        "config",
        help="Show or update stored defaults",
    )
    _add_settings_arguments(config_parser)

    help_parser = subparsers.add_parser(
        "help",
        help="Show help for a command",
    )
    help_parser.add_argument(
        "help_command",
        nargs="?",
        choices=COMMANDS,
        help="Command to get help for",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point.

    Args:
        argv: Command-line arguments; uses sys.argv if None.

    Returns:
        Exit code for the process.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    config_path = args.config or get_preferences_path()
    preferences = load_preferences(config_path)

    if args.command == "write":
        return cmd_write(args, preferences)
    elif args.command == "preview":
        return cmd_preview(args)
    elif args.command == "config":
        return cmd_config(args, preferences, config_path)
    elif args.command == "help":
        if args.help_command:
            build_parser().parse_args([args.help_command, "--help"])
        else:
            parser.print_help()
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
