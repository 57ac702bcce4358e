import sqlite3
import pytest
from datetime import date

from db.manager import DatabaseManager


class TestDatabaseManager:
    """Tests for DatabaseManager against a file database."""

    def test_ensure_schema_creates_database(self, test_config):
        manager = DatabaseManager(test_config)

        applied = manager.ensure_schema()

        assert test_config.db_path.exists()
        assert "001_initial_schema.sql" in applied
        assert manager.ensure_schema() == []

    def test_foreign_keys_enforced(self, test_config):
        manager = DatabaseManager(test_config)
        manager.ensure_schema()

        with manager.connect() as conn:
            with pytest.raises(sqlite3.IntegrityError):
                conn.execute(
                    "INSERT INTO transactions (date, description, amount, type, account_id) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (date(2024, 1, 5).isoformat(), "Pix", -10.0, "EXPENSE", 9999),
                )
