#!/usr/bin/env python3

from db.migrator import migration_status
from logger import get_logger

logger = get_logger()


def cmd_status(args, db_manager):
    """Show migration status."""
    db_path = db_manager.get_db_path()

    if not db_path.exists():
        logger.info(
            "Database does not exist. Run 'python -m cli migrate apply' to create it."
        )
        return

    with db_manager.connect() as conn:
        status = migration_status(conn, db_manager.get_migrations_dir())

    logger.info("Migration Status:")
    logger.info("================")

    if not status:
        logger.info("No migrations found.")
        return

    for migration, applied in status:
        logger.info(f"{migration}: {'APPLIED' if applied else 'PENDING'}")

    applied_count = len([m for m, applied in status if applied])
    logger.info(f"\nTotal migrations: {len(status)}")
    logger.info(f"Applied: {applied_count}")
    logger.info(f"Pending: {len(status) - applied_count}")


def cmd_apply(args, db_manager):
    """Apply pending migrations."""
    applied = db_manager.ensure_schema()

    if not applied:
        logger.info("No pending migrations.")
        return

    logger.info(f"Successfully applied {len(applied)} migration(s).")


def setup_parser(subparsers):
    """Setup migrate subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "migrate",
        help="Database migrations",
        description="Manage database schema migrations",
    )

    migrate_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available migration commands",
        dest="subcommand",
        required=True,
    )

    # migrate status
    status_parser = migrate_subparsers.add_parser(
        "status", help="Show migration status"
    )
    status_parser.set_defaults(func=cmd_status)

    # migrate apply
    apply_parser = migrate_subparsers.add_parser(
        "apply", help="Apply pending migrations"
    )
    apply_parser.set_defaults(func=cmd_apply)
