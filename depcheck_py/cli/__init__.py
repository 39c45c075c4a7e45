"""CLI entry points for the depcheck package."""

import sys
import argparse
from typing import List, Optional

from ..errors import ScannerError
from .scan import create_scan_parser, run_scan, create_check_parser, run_check


def create_main_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="depcheck-py",
        description="OWASP dependency-check scanner for Java, Kotlin and Scala builds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  scan    Scan build artifacts and report vulnerable dependencies
  check   Report whether the scanner applies to a project

Examples:
  # Scan a maven project after `mvn package`
  depcheck-py scan --target ./my-service

  # Write the findings as JSON and fail on HIGH or above
  depcheck-py scan --target . --output findings.json --fail-on high

  # Show the dependency-check command without running it
  depcheck-py scan --target . --dry-run
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    create_scan_parser(subparsers)
    create_check_parser(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    command_handlers = {
        "scan": run_scan,
        "check": run_check,
    }

    handler = command_handlers.get(args.command)
    if handler:
        try:
            return handler(args)
        except KeyboardInterrupt:
            print("\n\nOperation cancelled by user", file=sys.stderr)
            return 130
        except ScannerError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        parser.print_help()
        return 1


__all__ = ["main", "create_main_parser"]
