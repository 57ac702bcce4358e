#!/usr/bin/env python3

import sys
import csv
from pathlib import Path
from pydantic import ValidationError
from analytics import Filters, Period
from analytics.formatting import format_brl, format_date
from analytics.period import TYPE_FILTERS, filter_period
from models.transaction import TRANSACTION_TYPES, DEFAULT_ACCOUNT, DEFAULT_CATEGORY
from models.transaction_input import TransactionInput
from logger import get_logger

logger = get_logger()


def _parse_period(value):
    """Parse a --month argument (YYYY/MM), exiting on bad input."""
    try:
        return Period.parse(value)
    except ValueError as e:
        logger.error(f"Invalid month '{value}': {e}")
        logger.error("Use YYYY/MM format for --month")
        sys.exit(1)


def cmd_add(args, services):
    """Record a new transaction and mirror it to the spreadsheet.

    Args:
        args: Parsed command-line arguments with the transaction fields
        services: Services container with the ledger service
    """
    try:
        transaction_input = TransactionInput(
            date=args.date,
            description=args.description,
            amount=args.amount,
            type=args.type,
            category=args.category,
            account=args.account,
        )
    except ValidationError as e:
        logger.error("Invalid transaction:")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            logger.error(f"  {field}: {error['msg']}")
        sys.exit(1)

    transaction = services.ledger.record(transaction_input)

    logger.info(f"✓ Transaction recorded with ID: {transaction.id}")
    logger.info(f"  {format_date(transaction.date)}  {transaction.description}")
    logger.info(f"  {transaction.type}  {format_brl(transaction.amount)}")
    logger.info(f"  Category: {transaction.category}  Account: {transaction.account}")


def cmd_list(args, services):
    """List transactions, optionally restricted to a month and filters."""
    transactions = services.transactions.find_all()

    if args.month:
        period = _parse_period(args.month)
        transactions = filter_period(
            transactions, period, Filters(text=args.search or "", type=args.type)
        )
    else:
        filters = Filters(text=args.search or "", type=args.type)
        transactions = [t for t in transactions if filters.matches(t)]

    if not transactions:
        logger.info("No transactions found for the specified criteria.")
        return

    for t in transactions:
        logger.info(
            f"{t.id:>6}  {format_date(t.date)}  {t.description[:40]:<40} "
            f"{format_brl(t.amount):>14}  {t.category or DEFAULT_CATEGORY}  "
            f"{t.account or ''}"
        )

    logger.info(f"\nTotal transactions: {len(transactions)}")


def cmd_delete(args, services):
    """Delete a transaction from the database and the spreadsheet."""
    result = services.ledger.remove(args.transaction_id)

    if not result.deleted:
        logger.error(f"Transaction with ID {args.transaction_id} not found.")
        sys.exit(1)

    logger.info(f"✓ Transaction {args.transaction_id} deleted")
    if services.ledger.mirror is not None and not result.sheet_deleted:
        logger.warning("  Row was not removed from the spreadsheet")


def cmd_export(args, services):
    """Export transactions to CSV.

    Args:
        args: Parsed command-line arguments
        services: Services container with the transaction service
    """
    if args.month:
        period = _parse_period(args.month)
        logger.info(f"Exporting transactions for {period.label}")
        transactions = services.transactions.get_transactions_by_month(
            period.year, period.month
        )
    else:
        transactions = services.transactions.find_all()

    if not transactions:
        logger.info("No transactions found for the specified criteria.")
        sys.exit(0)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(
            ["id", "date", "description", "amount", "type", "category", "account"]
        )
        for t in transactions:
            writer.writerow(
                [
                    t.id,
                    t.date.isoformat(),
                    t.description,
                    float(t.amount),
                    t.type,
                    t.category or "",
                    t.account or "",
                ]
            )

    logger.info(f"✓ Exported {len(transactions)} transaction(s) to {output_path}")


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Record and manage transactions",
        description="Add, list, delete and export transactions",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions add
    add_parser = transactions_subparsers.add_parser("add", help="Record a transaction")
    add_parser.add_argument("--date", required=True, help="Date (YYYY-MM-DD)")
    add_parser.add_argument("--description", required=True, help="Description")
    add_parser.add_argument(
        "--amount", required=True, help="Amount; comma decimals accepted (e.g. 12,50)"
    )
    add_parser.add_argument("--type", required=True, choices=TRANSACTION_TYPES)
    add_parser.add_argument(
        "--category", default=DEFAULT_CATEGORY, help=f"Category (default: {DEFAULT_CATEGORY})"
    )
    add_parser.add_argument(
        "--account", default=DEFAULT_ACCOUNT, help=f"Account (default: {DEFAULT_ACCOUNT})"
    )
    add_parser.set_defaults(func=cmd_add)

    # transactions list
    list_parser = transactions_subparsers.add_parser("list", help="List transactions")
    list_parser.add_argument("--month", help="Month to list (YYYY/MM)")
    list_parser.add_argument("--search", help="Case-insensitive description filter")
    list_parser.add_argument("--type", choices=TYPE_FILTERS, default="ALL")
    list_parser.set_defaults(func=cmd_list)

    # transactions delete
    delete_parser = transactions_subparsers.add_parser(
        "delete", help="Delete a transaction"
    )
    delete_parser.add_argument("transaction_id", type=int, help="Transaction ID")
    delete_parser.set_defaults(func=cmd_delete)

    # transactions export
    export_parser = transactions_subparsers.add_parser(
        "export", help="Export transactions to CSV"
    )
    export_parser.add_argument("--output", "-o", required=True, help="Output CSV file")
    export_parser.add_argument("--month", help="Month to export (YYYY/MM)")
    export_parser.set_defaults(func=cmd_export)
