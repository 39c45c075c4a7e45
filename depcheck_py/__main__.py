"""
Main entry point for the depcheck package.

Usage:
    python -m depcheck_py scan [OPTIONS]
    python -m depcheck_py check [OPTIONS]
"""

import sys


def main() -> int:
    """Main entry point."""
    from .cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
