#!/usr/bin/env python3

import sys
from services.accounts import AccountInUseError
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all accounts in the database."""
    accounts = services.accounts.find_all()

    if not accounts:
        logger.info("No accounts found.")
        return

    logger.info("\nAccounts:")
    logger.info("=" * 80)
    for account in accounts:
        logger.info(f"ID: {account.id}")
        logger.info(f"Name: {account.name}")
        logger.info(f"Type: {account.type}")
        logger.info("-" * 80)

    logger.info(f"\nTotal accounts: {len(accounts)}")


def cmd_create(args, services):
    """Create a new account."""
    name = args.name.strip()
    account_type = args.type.strip()
    if not name or not account_type:
        logger.error("Account name and type are required.")
        sys.exit(1)

    if services.accounts.find_by_name(name):
        logger.error(f"Account '{name}' already exists.")
        sys.exit(1)

    account = services.accounts.create(name, account_type)

    logger.info(f"✓ Account created successfully with ID: {account.id}")
    logger.info(f"  Name: {account.name}")
    logger.info(f"  Type: {account.type}")


def cmd_delete(args, services):
    """Delete an account that has no transactions."""
    try:
        deleted = services.accounts.delete(args.account_id)
    except AccountInUseError:
        logger.error(
            "Could not delete the account. Check whether it still has transactions."
        )
        sys.exit(1)

    if not deleted:
        logger.error(f"Account with ID {args.account_id} not found.")
        sys.exit(1)

    logger.info(f"✓ Account {args.account_id} deleted")


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Manage accounts",
        description="Create, list and delete accounts",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts list
    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)

    # accounts create
    create_parser = accounts_subparsers.add_parser("create", help="Create a new account")
    create_parser.add_argument("--name", required=True, help="Account name (unique)")
    create_parser.add_argument(
        "--type", default="corrente", help="Account type label (default: corrente)"
    )
    create_parser.set_defaults(func=cmd_create)

    # accounts delete
    delete_parser = accounts_subparsers.add_parser(
        "delete", help="Delete an account without transactions"
    )
    delete_parser.add_argument("account_id", type=int, help="Account ID")
    delete_parser.set_defaults(func=cmd_delete)
