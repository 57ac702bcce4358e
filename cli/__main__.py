#!/usr/bin/env python3
"""
Gastos CLI - Command-line interface for recording transactions and viewing the dashboard.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    accounts     Manage accounts
    categories   Manage categories
    transactions Record and manage transactions
    dashboard    Show monthly aggregates
    sheets       Spreadsheet mirror
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli transactions add --date 2024-01-05 --description Mercado --amount 50,00 --type EXPENSE
    python -m cli transactions list --month 2024/01
    python -m cli dashboard show --month 2024/01
    python -m cli dashboard watch --interval 8
"""

import sys
import argparse
from cli import accounts, categories, dashboard, migrate, sheets, transactions
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging

SERVICE_COMMANDS = ("accounts", "categories", "transactions", "dashboard", "sheets")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gastos",
        description="Gastos - Personal finance tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    accounts.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    dashboard.setup_parser(subparsers)
    sheets.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Commands that use services get the container,
            # migrate needs the db_manager for raw database operations
            if args.command in SERVICE_COMMANDS:
                args.func(args, Services(config))
            elif args.command == "migrate":
                args.func(args, DatabaseManager(config))
            else:
                args.func(args)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
