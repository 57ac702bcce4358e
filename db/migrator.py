"""Ordered SQL migrations tracked in a schema_migrations table."""

from pathlib import Path
from typing import List, Tuple
from logger import get_logger

logger = get_logger()


def init_schema_migrations_table(conn):
    conn.execute("""
        CREATE TABLE IF NOT EXISTS schema_migrations (
            migration_file TEXT PRIMARY KEY,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.commit()


def get_applied_migrations(conn):
    cursor = conn.execute(
        "SELECT migration_file FROM schema_migrations ORDER BY migration_file"
    )
    return {row[0] for row in cursor.fetchall()}


def get_available_migrations(migrations_dir: Path) -> List[str]:
    if not migrations_dir.exists():
        return []
    return sorted(path.name for path in migrations_dir.glob("*.sql"))


def apply_migration(conn, migrations_dir: Path, migration_file: str) -> None:
    sql = (migrations_dir / migration_file).read_text(encoding="utf-8")

    try:
        conn.executescript(sql)
        conn.execute(
            "INSERT INTO schema_migrations (migration_file) VALUES (?)",
            (migration_file,),
        )
        conn.commit()
        logger.info(f"Applied migration: {migration_file}")
    except Exception as e:
        conn.rollback()
        logger.error(f"Error applying migration {migration_file}: {e}")
        raise


def migration_status(conn, migrations_dir: Path) -> List[Tuple[str, bool]]:
    """List available migrations with whether each one is applied."""
    init_schema_migrations_table(conn)
    applied = get_applied_migrations(conn)
    return [(m, m in applied) for m in get_available_migrations(migrations_dir)]


def apply_pending(conn, migrations_dir: Path) -> List[str]:
    """Apply every migration not yet recorded, in filename order.

    Returns:
        Names of the migrations applied by this call.
    """
    pending = [m for m, applied in migration_status(conn, migrations_dir) if not applied]
    for migration in pending:
        apply_migration(conn, migrations_dir, migration)
    return pending
