#!/usr/bin/env python3

from cli.common import add_timeout_argument, deadline_from_args, print_json
from dto import parse
from dto.category import CreateCategory, UpdateCategory
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all categories, newest first."""
    categories = services.categories.list(deadline=deadline_from_args(args))

    if args.json:
        print_json(categories)
        return

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        logger.info(f"Created: {category.created_at:%Y-%m-%d %H:%M:%S}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_get(args, services):
    """Show one category."""
    category = services.categories.get(
        args.category_id, deadline=deadline_from_args(args)
    )

    if args.json:
        print_json(category)
        return

    logger.info(f"ID: {category.id}")
    logger.info(f"Name: {category.name}")
    logger.info(f"Created: {category.created_at:%Y-%m-%d %H:%M:%S}")


def cmd_create(args, services):
    """Create a new category."""
    payload = parse(CreateCategory, {"name": args.name})
    category_id = services.categories.create(payload, deadline=deadline_from_args(args))
    logger.info(f"✓ Category '{payload.name}' created with ID: {category_id}")


def cmd_rename(args, services):
    """Rename a category."""
    payload = parse(UpdateCategory, {"name": args.name})
    services.categories.rename(
        args.category_id, payload, deadline=deadline_from_args(args)
    )
    logger.info(f"✓ Category {args.category_id} renamed to '{payload.name}'")


def cmd_delete(args, services):
    """Delete a category by ID."""
    deadline = deadline_from_args(args)
    category = services.categories.get(args.category_id, deadline=deadline)

    if not args.yes:
        logger.info("\nCategory to delete:")
        logger.info(f"  ID: {category.id}")
        logger.info(f"  Name: {category.name}")

        confirm = (
            input("\nAre you sure you want to delete this category? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    services.categories.delete(args.category_id, deadline=deadline)
    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, rename and delete item categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.add_argument("--json", action="store_true", help="Print JSON")
    add_timeout_argument(list_parser)
    list_parser.set_defaults(func=cmd_list)

    get_parser = categories_subparsers.add_parser("get", help="Show a category")
    get_parser.add_argument("category_id", type=int, help="ID of the category")
    get_parser.add_argument("--json", action="store_true", help="Print JSON")
    add_timeout_argument(get_parser)
    get_parser.set_defaults(func=cmd_get)

    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument("name", help="Category name (e.g., Groceries)")
    add_timeout_argument(create_parser)
    create_parser.set_defaults(func=cmd_create)

    rename_parser = categories_subparsers.add_parser(
        "rename", help="Rename a category"
    )
    rename_parser.add_argument("category_id", type=int, help="ID of the category")
    rename_parser.add_argument("name", help="New category name")
    add_timeout_argument(rename_parser)
    rename_parser.set_defaults(func=cmd_rename)

    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    delete_parser.add_argument(
        "category_id",
        type=int,
        help="ID of the category to delete",
    )
    delete_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    add_timeout_argument(delete_parser)
    delete_parser.set_defaults(func=cmd_delete)
