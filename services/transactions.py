"""Transaction service for database operations."""

from typing import List, Optional
from datetime import date
from decimal import Decimal
from dateutil.relativedelta import relativedelta
from models.transaction import Transaction, TRANSACTION_TYPES

# Transactions are always read joined with their category and account names
_TRANSACTION_SELECT = """
    SELECT t.id, t.date, t.description, t.amount, t.type,
           c.name, a.name, t.category_id, t.account_id
    FROM transactions t
    LEFT JOIN categories c ON c.id = t.category_id
    LEFT JOIN accounts a ON a.id = t.account_id
"""

_TRANSACTION_ORDER = " ORDER BY t.date DESC, t.id DESC"


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db_manager):
        """Initialize the transaction service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def create(
        self,
        transaction_date: date,
        description: str,
        amount: Decimal,
        transaction_type: str,
        *,
        category_id: Optional[int] = None,
        account_id: Optional[int] = None,
    ) -> Transaction:
        """Create a single transaction in the database.

        The amount is stored as given; sign normalization belongs to the caller.

        Args:
            transaction_date: Calendar date of the transaction.
            description: Free-text label.
            amount: Signed amount (negative for expenses).
            transaction_type: "INCOME" or "EXPENSE".
            category_id: Optional category reference.
            account_id: Optional account reference.

        Returns:
            The created Transaction, with category and account names resolved.

        Raises:
            ValueError: If transaction_type is unknown.
            sqlite3.IntegrityError: If a referenced account or category does not exist.
        """
        if transaction_type not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid transaction type: {transaction_type}")

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO transactions
                    (date, description, amount, type, category_id, account_id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    transaction_date.isoformat(),
                    description,
                    float(amount),
                    transaction_type,
                    category_id,
                    account_id,
                ),
            )
            conn.commit()
            transaction_id = cursor.lastrowid

        return self.find(transaction_id)

    def find(self, transaction_id: int) -> Optional[Transaction]:
        """Get a single transaction by ID.

        Args:
            transaction_id: The transaction ID.

        Returns:
            Transaction object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                _TRANSACTION_SELECT + " WHERE t.id = ?", (transaction_id,)
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_transaction(row)
            return None

    def find_all(self) -> List[Transaction]:
        """Get the full transaction history.

        Returns:
            List of Transaction objects ordered by date (newest first).
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(_TRANSACTION_SELECT + _TRANSACTION_ORDER)
            return [self._row_to_transaction(row) for row in cursor.fetchall()]

    def get_transactions_by_month(
        self,
        year: int,
        month: int,
    ) -> List[Transaction]:
        """Get transactions for a specific month.

        Uses the half-open interval [first day of month, first day of next month).

        Args:
            year: Year (e.g., 2025).
            month: Month (1-12).

        Returns:
            List of Transaction objects ordered by date (newest first).
        """
        start_date = date(year, month, 1)
        end_date = start_date + relativedelta(months=1)

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                _TRANSACTION_SELECT
                + " WHERE t.date >= ? AND t.date < ?"
                + _TRANSACTION_ORDER,
                (start_date.isoformat(), end_date.isoformat()),
            )
            return [self._row_to_transaction(row) for row in cursor.fetchall()]

    def delete(self, transaction_id: int) -> bool:
        """Delete a transaction by ID.

        Args:
            transaction_id: The transaction ID to delete.

        Returns:
            True if the transaction was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "DELETE FROM transactions WHERE id = ?", (transaction_id,)
            )
            conn.commit()
            return cursor.rowcount > 0

    def _row_to_transaction(self, row: tuple) -> Transaction:
        """Convert a database row to a Transaction object."""
        return Transaction(
            id=row[0],
            date=date.fromisoformat(row[1]),
            description=row[2],
            amount=Decimal(str(row[3])),
            type=row[4],
            category=row[5],
            account=row[6],
            category_id=row[7],
            account_id=row[8],
        )
