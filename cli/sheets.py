#!/usr/bin/env python3

import sys
from logger import get_logger

logger = get_logger()


def cmd_check(args, services):
    """Append a diagnostic row to verify spreadsheet access."""
    if services.ledger.mirror is None:
        logger.error("Spreadsheet mirroring is disabled.")
        logger.info("Enable it in the [sheets] section of ~/.config/gastos.toml")
        sys.exit(1)

    try:
        result = services.ledger.diagnose_sheet()
    except Exception as e:
        logger.error(f"Spreadsheet check failed: {e}")
        sys.exit(1)

    logger.info(f"✓ Diagnostic row written to {result.updated_range} (row {result.row_number})")


def setup_parser(subparsers):
    """Setup sheets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "sheets",
        help="Spreadsheet mirror",
        description="Check the spreadsheet mirror configuration",
    )

    sheets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available spreadsheet commands",
        dest="subcommand",
        required=True,
    )

    # sheets check
    check_parser = sheets_subparsers.add_parser(
        "check", help="Append a diagnostic row to the spreadsheet"
    )
    check_parser.set_defaults(func=cmd_check)
