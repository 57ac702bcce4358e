"""Account service for database operations."""

import sqlite3
from typing import List, Optional
from models.account import Account

DEFAULT_ACCOUNT_TYPE = "corrente"


class AccountInUseError(Exception):
    """Raised when deleting an account that still has transactions."""

    def __init__(self, account_id: int):
        super().__init__(
            f"Account {account_id} cannot be deleted: it still has transactions"
        )
        self.account_id = account_id


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db_manager):
        """Initialize the account service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[Account]:
        """Get all accounts from the database.

        Returns:
            List of Account objects, ordered by name.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT id, name, type FROM accounts ORDER BY name")
            rows = cursor.fetchall()

            return [Account(id=row[0], name=row[1], type=row[2]) for row in rows]

    def find(self, account_id: int) -> Optional[Account]:
        """Get a single account by ID.

        Args:
            account_id: The account ID to find.

        Returns:
            Account object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, type FROM accounts WHERE id = ?",
                (account_id,),
            )
            row = cursor.fetchone()

            if row:
                return Account(id=row[0], name=row[1], type=row[2])
            return None

    def find_by_name(self, name: str) -> Optional[Account]:
        """Get a single account by name (case-sensitive).

        Args:
            name: The account name to find.

        Returns:
            Account object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, type FROM accounts WHERE name = ?",
                (name,),
            )
            row = cursor.fetchone()

            if row:
                return Account(id=row[0], name=row[1], type=row[2])
            return None

    def create(self, name: str, account_type: str) -> Account:
        """Create a new account.

        Args:
            name: Account name (must be unique).
            account_type: Free-form label, e.g. "corrente" or "cartao".

        Returns:
            The created Account object with id populated.

        Raises:
            sqlite3.IntegrityError: If an account with this name already exists.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO accounts (name, type) VALUES (?, ?)",
                (name, account_type),
            )
            conn.commit()

            return Account(id=cursor.lastrowid, name=name, type=account_type)

    def upsert(self, name: str, account_type: str = DEFAULT_ACCOUNT_TYPE) -> Account:
        """Return the account with this name, creating it if needed.

        An existing account keeps its type.

        Args:
            name: Account name.
            account_type: Type used only when the account is created.

        Returns:
            The existing or newly created Account.
        """
        with self.db_manager.connect() as conn:
            conn.execute(
                "INSERT INTO accounts (name, type) VALUES (?, ?) "
                "ON CONFLICT(name) DO NOTHING",
                (name, account_type),
            )
            conn.commit()
            row = conn.execute(
                "SELECT id, name, type FROM accounts WHERE name = ?", (name,)
            ).fetchone()

            return Account(id=row[0], name=row[1], type=row[2])

    def delete(self, account_id: int) -> bool:
        """Delete an account by ID.

        Args:
            account_id: The account ID to delete.

        Returns:
            True if account was deleted, False if not found.

        Raises:
            AccountInUseError: If transactions still reference the account.
        """
        with self.db_manager.connect() as conn:
            try:
                cursor = conn.execute(
                    "DELETE FROM accounts WHERE id = ?", (account_id,)
                )
                conn.commit()
            except sqlite3.IntegrityError as e:
                conn.rollback()
                raise AccountInUseError(account_id) from e
            return cursor.rowcount > 0
