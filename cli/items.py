#!/usr/bin/env python3

from cli.common import (
    add_filter_arguments,
    add_timeout_argument,
    deadline_from_args,
    filter_from_args,
    print_json,
)
from dto import parse
from dto.item import CreateItem, UpdateItem
from logger import get_logger

logger = get_logger()


def _payload_data(args) -> dict:
    return {
        "category_id": args.category_id,
        "type": args.item_type,
        "amount": args.amount,
        "description": args.description,
        "transaction_date": args.date,
    }


def _log_item(item) -> None:
    logger.info(f"ID: {item.id}")
    logger.info(f"Date: {item.transaction_date:%Y-%m-%d %H:%M:%S}")
    logger.info(f"Category ID: {item.category_id}")
    logger.info(f"Type: {item.type}")
    logger.info(f"Amount: {item.amount:.2f}")
    if item.description:
        logger.info(f"Description: {item.description}")


def cmd_list(args, services):
    """List items matching the filter flags, newest first."""
    item_filter = filter_from_args(args)
    items = services.items.list(item_filter, deadline=deadline_from_args(args))

    if args.json:
        print_json(items)
        return

    if not items:
        logger.info("No items found.")
        return

    logger.info("\nItems:")
    logger.info("=" * 80)
    for item in items:
        _log_item(item)
        logger.info("-" * 80)

    logger.info(f"\nTotal items: {len(items)}")


def cmd_get(args, services):
    """Show one item."""
    item = services.items.get(args.item_id, deadline=deadline_from_args(args))

    if args.json:
        print_json(item)
        return

    _log_item(item)


def cmd_create(args, services):
    """Create an item. Without --date the current time is used."""
    payload = parse(CreateItem, _payload_data(args))
    item_id = services.items.create(payload, deadline=deadline_from_args(args))
    logger.info(f"✓ Item created with ID: {item_id}")


def cmd_update(args, services):
    """Replace all fields of an item. Without --date the current time is used."""
    payload = parse(UpdateItem, _payload_data(args))
    services.items.update(args.item_id, payload, deadline=deadline_from_args(args))
    logger.info(f"✓ Item {args.item_id} updated")


def cmd_delete(args, services):
    """Delete an item by ID."""
    services.items.delete(args.item_id, deadline=deadline_from_args(args))
    logger.info(f"✓ Item {args.item_id} deleted")


def _add_payload_arguments(parser) -> None:
    parser.add_argument("--category-id", required=True, help="Category of the item")
    parser.add_argument(
        "--type", dest="item_type", required=True, help="Type tag, e.g. income"
    )
    parser.add_argument("--amount", required=True, help="Signed amount")
    parser.add_argument("--description", default="", help="Free-text description")
    parser.add_argument(
        "--date", default=None, help="Transaction date (YYYY-MM-DD or ISO datetime)"
    )


def setup_parser(subparsers):
    """Setup items subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "items",
        help="Manage items",
        description="Create, list, update and delete sales records",
    )

    items_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available item commands",
        dest="subcommand",
        required=True,
    )

    list_parser = items_subparsers.add_parser("list", help="List items")
    add_filter_arguments(list_parser)
    list_parser.add_argument("--json", action="store_true", help="Print JSON")
    add_timeout_argument(list_parser)
    list_parser.set_defaults(func=cmd_list)

    get_parser = items_subparsers.add_parser("get", help="Show an item")
    get_parser.add_argument("item_id", type=int, help="ID of the item")
    get_parser.add_argument("--json", action="store_true", help="Print JSON")
    add_timeout_argument(get_parser)
    get_parser.set_defaults(func=cmd_get)

    create_parser = items_subparsers.add_parser("create", help="Create an item")
    _add_payload_arguments(create_parser)
    add_timeout_argument(create_parser)
    create_parser.set_defaults(func=cmd_create)

    update_parser = items_subparsers.add_parser("update", help="Replace an item")
    update_parser.add_argument("item_id", type=int, help="ID of the item")
    _add_payload_arguments(update_parser)
    add_timeout_argument(update_parser)
    update_parser.set_defaults(func=cmd_update)

    delete_parser = items_subparsers.add_parser("delete", help="Delete an item")
    delete_parser.add_argument("item_id", type=int, help="ID of the item")
    add_timeout_argument(delete_parser)
    delete_parser.set_defaults(func=cmd_delete)
