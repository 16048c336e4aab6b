#!/usr/bin/env python3

from cli.common import (
    add_filter_arguments,
    add_timeout_argument,
    deadline_from_args,
    filter_from_args,
    print_json,
)
from logger import get_logger

logger = get_logger()

# subcommand -> (AnalyticsService method, label)
AGGREGATE_COMMANDS = {
    "sum": ("sum", "Sum"),
    "avg": ("average", "Average"),
    "count": ("count", "Count"),
    "median": ("median", "Median"),
    "percentile": ("percentile_90", "90th percentile"),
}


def cmd_aggregate(args, services):
    """Print one aggregate over the filtered items."""
    method, label = AGGREGATE_COMMANDS[args.subcommand]
    compute = getattr(services.analytics, method)
    value = compute(filter_from_args(args), deadline=deadline_from_args(args))
    logger.info(f"{label}: {value}")


def cmd_summary(args, services):
    """Print all aggregates over the filtered items."""
    summary = services.analytics.summary(
        filter_from_args(args), deadline=deadline_from_args(args)
    )

    if args.json:
        print_json(summary)
        return

    logger.info("\nSummary:")
    logger.info("=" * 80)
    logger.info(f"Count: {summary.count}")
    logger.info(f"Sum: {summary.sum:.2f}")
    logger.info(f"Average: {summary.average:.2f}")
    logger.info(f"Median: {summary.median:.2f}")
    logger.info(f"90th percentile: {summary.percentile_90:.2f}")


def setup_parser(subparsers):
    """Setup analytics subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "analytics",
        help="Aggregate item amounts",
        description="Sum, average, count, median and 90th percentile of amounts",
    )

    analytics_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available aggregates",
        dest="subcommand",
        required=True,
    )

    for name, (_, label) in AGGREGATE_COMMANDS.items():
        aggregate_parser = analytics_subparsers.add_parser(name, help=label)
        add_filter_arguments(aggregate_parser)
        add_timeout_argument(aggregate_parser)
        aggregate_parser.set_defaults(func=cmd_aggregate)

    summary_parser = analytics_subparsers.add_parser(
        "summary", help="All aggregates at once"
    )
    add_filter_arguments(summary_parser)
    summary_parser.add_argument("--json", action="store_true", help="Print JSON")
    add_timeout_argument(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)
