"""SQLite connection handling for the ledger database."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import List
from config import Config, get_migrations_dir
from db.migrator import apply_pending
from logger import get_logger

logger = get_logger()


class DatabaseManager:
    """Opens connections to the ledger database and keeps its schema current.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Open a connection, closing it when the block exits.

        The parent directory is created on first use. Foreign keys are
        switched on for every connection: SQLite leaves them off by default,
        and the schema relies on them to keep accounts with transactions.

        Yields:
            sqlite3.Connection: Database connection.
        """
        db_path = self.get_db_path()
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        try:
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
        finally:
            conn.close()

    def ensure_schema(self) -> List[str]:
        """Apply pending migrations.

        Returns:
            Names of the migrations applied (empty when already current).
        """
        with self.connect() as conn:
            applied = apply_pending(conn, self.get_migrations_dir())
        if applied:
            logger.debug(f"Schema updated: {', '.join(applied)}")
        return applied

    def get_db_path(self) -> Path:
        return self.config.db_path

    def get_migrations_dir(self) -> Path:
        return get_migrations_dir()
