#!/usr/bin/env python3

from models.transaction import TRANSACTION_TYPES
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all categories in the database."""
    categories = services.categories.find_all()

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"{category.id:>4}  {category.name:<30} {category.kind}")

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_upsert(args, services):
    """Create a category or update the kind of an existing one."""
    category = services.categories.upsert(args.name.strip(), args.kind)

    logger.info(f"✓ Category saved with ID: {category.id}")
    logger.info(f"  Name: {category.name}")
    logger.info(f"  Kind: {category.kind}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="List and upsert transaction categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    # categories upsert
    upsert_parser = categories_subparsers.add_parser(
        "upsert", help="Create a category or change its kind"
    )
    upsert_parser.add_argument("name", help="Category name")
    upsert_parser.add_argument(
        "--kind", required=True, choices=TRANSACTION_TYPES, help="INCOME or EXPENSE"
    )
    upsert_parser.set_defaults(func=cmd_upsert)
