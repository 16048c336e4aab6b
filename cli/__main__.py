#!/usr/bin/env python3
"""
Sales tracker CLI - record categorized sales and aggregate them.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Manage categories
    items        Manage items (sales records)
    analytics    Sum, average, count, median and 90th percentile of amounts
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli categories create Groceries
    python -m cli items create --category-id 1 --type expense --amount 12.50
    python -m cli items list --from 2024-01-01 --to 2024-01-31 --type expense
    python -m cli analytics median --category-id 1
"""

import sys
import argparse
from cli import analytics, categories, items, migrate
from cli.common import describe_error
from config import load_config
from errors import SalesTrackerError
from services.base import Services
from db.manager import DatabaseManager
from logger import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with every command registered."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Sales tracker - categorized sales records and analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    items.setup_parser(subparsers)
    analytics.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def run(args, services) -> int:
    """Execute a parsed data command and map failures to an exit code.

    Returns:
        0 on success, otherwise the exit code for the error kind.
    """
    try:
        args.func(args, services)
    except SalesTrackerError as e:
        code, message = describe_error(e)
        get_logger().debug(f"{args.command} {args.subcommand} failed: {e}")
        get_logger().error(f"Error: {message}")
        return code
    return 0


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    try:
        config = load_config()
    except (OSError, ValueError) as e:
        print(f"Error: could not load configuration: {e}")
        sys.exit(1)

    setup_logging(config)

    if args.command == "migrate":
        # Migrate commands need db_manager for raw database operations
        try:
            args.func(args, DatabaseManager(config))
        except Exception as e:
            get_logger().error(f"Error: {e}")
            sys.exit(1)
        return

    sys.exit(run(args, Services(config)))


if __name__ == "__main__":
    main()
