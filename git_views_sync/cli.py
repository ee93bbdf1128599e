#!/usr/bin/env python3
"""
Command-line interface for git-views-sync.
"""

import argparse
import sys
from typing import Optional

from .app import run_sync, setup_logging
from .config import load_configuration
from .errors import ConfigurationError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="git-views-sync",
        description="Copy GitHub repository view statistics into kintone"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sync_parser = subparsers.add_parser("sync", help="Synchronize view statistics from GitHub")
    sync_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the days that would be posted without writing them"
    )
    sync_parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)"
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command != "sync":
        parser.print_help()
        return 1

    try:
        config = load_configuration()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.log_level)
    try:
        ok, message = run_sync(config, dry_run=args.dry_run)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1

    if not ok:
        print(f"Sync error: {message}", file=sys.stderr)
        return 1
    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
