#!/usr/bin/env python3
"""Unified command-line interface for billzy.

Usage:
    billzy parse <text_file>...
    billzy scan <image>... [--ocr-url URL]
    billzy split <split.toml> [--breakdown]
"""

import argparse
import logging
from collections.abc import Callable, Sequence

from billzy.runtime import DEFAULT_OCR_URL, set_log_level


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Run a command handler that may call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt parsing and bill splitting CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse <text_file>...       Parse OCR text files ("-" reads stdin)
  scan <image>...            OCR receipt images, then parse them
  split <split.toml>         Split item charges between people

Environment:
  BILLZY_HOME       config directory holding parser.toml (default ~/.config/billzy)
  BILLZY_LOG_LEVEL  DEBUG, INFO, WARNING or ERROR
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse OCR text files")
    parse_parser.add_argument("text_files", nargs="+", help='OCR text files ("-" for stdin)')
    parse_parser.add_argument("--settings", default=None, help="Parser settings TOML (default: $BILLZY_HOME/parser.toml)")

    # scan command
    scan_parser = subparsers.add_parser("scan", help="Scan receipt images")
    scan_parser.add_argument("images", nargs="+", help="Paths to receipt images")
    scan_parser.add_argument(
        "--ocr-url", default=DEFAULT_OCR_URL, help=f"OCR service URL (default: {DEFAULT_OCR_URL})"
    )
    scan_parser.add_argument("--settings", default=None, help="Parser settings TOML (default: $BILLZY_HOME/parser.toml)")

    # split command
    split_parser = subparsers.add_parser("split", help="Split item charges between people")
    split_parser.add_argument("split_file", help="TOML file with [[people]] and [[items]]")
    split_parser.add_argument("--breakdown", action="store_true", help="Show per-person item breakdown")

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        from billzy.cli.receipt import cmd_parse

        return _run_command(cmd_parse, args)
    elif args.command == "scan":
        from billzy.cli.receipt import cmd_scan

        return _run_command(cmd_scan, args)
    elif args.command == "split":
        from billzy.cli.split import cmd_split

        return _run_command(cmd_split, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
