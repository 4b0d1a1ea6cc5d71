"""Argument handling shared by the scripts."""

import argparse
from pathlib import Path

from userstore.config import Settings


def build_parser(description: str) -> argparse.ArgumentParser:
    """Create a parser with the options every script accepts."""
    parser = argparse.ArgumentParser(description=description)

    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help="Database path (default: from config)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config)",
    )

    return parser


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if args.db:
        settings.database.path = Path(args.db)

    if args.log_level:
        settings.logging.level = args.log_level

    return settings
