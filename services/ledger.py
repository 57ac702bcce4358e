"""Ledger flows: record and remove transactions, mirroring them to a spreadsheet.

The database is the source of truth. The spreadsheet mirror is best-effort:
its failures are logged and never undo or block a database write.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from models.transaction import INCOME, Transaction
from models.transaction_input import TransactionInput
from sheets.providers.base import AppendResult, SheetMirror
from logger import get_logger

logger = get_logger()


@dataclass
class RemovalResult:
    """Outcome of removing a transaction."""

    deleted: bool
    sheet_deleted: bool = False


class LedgerService:
    """Coordinates transaction writes across the store and the sheet mirror.

    Args:
        transactions: TransactionService instance.
        categories: CategoryService instance.
        accounts: AccountService instance.
        mirror: Optional SheetMirror; None disables mirroring.
    """

    def __init__(self, transactions, categories, accounts, mirror: Optional[SheetMirror] = None):
        self.transactions = transactions
        self.categories = categories
        self.accounts = accounts
        self.mirror = mirror

    def record(self, transaction_input: TransactionInput) -> Transaction:
        """Persist a new transaction and append it to the spreadsheet.

        The sign of the amount is forced by the type, the category is upserted
        with the transaction type as its kind and the account is upserted.

        Args:
            transaction_input: Validated input.

        Returns:
            The stored Transaction.
        """
        category = self.categories.upsert(
            transaction_input.category, transaction_input.type
        )
        account = self.accounts.upsert(transaction_input.account)

        transaction = self.transactions.create(
            transaction_input.date,
            transaction_input.description,
            transaction_input.signed_amount(),
            transaction_input.type,
            category_id=category.id,
            account_id=account.id,
        )
        logger.info(
            f"Recorded transaction {transaction.id}: {transaction.description} "
            f"({transaction.amount})"
        )

        if self.mirror is not None:
            try:
                result = self.mirror.append(transaction.to_sheet_row())
                logger.debug(f"Mirrored transaction {transaction.id} to row {result.row_number}")
            except Exception as e:
                logger.warning(
                    f"Sheet append failed for transaction {transaction.id} "
                    f"(database write kept): {e}"
                )

        return transaction

    def remove(self, transaction_id: int) -> RemovalResult:
        """Delete a transaction from the store, then from the spreadsheet.

        Args:
            transaction_id: ID of the transaction to delete.

        Returns:
            RemovalResult; deleted is False when the transaction does not exist.
        """
        if not self.transactions.delete(transaction_id):
            return RemovalResult(deleted=False)

        logger.info(f"Deleted transaction {transaction_id}")

        if self.mirror is None:
            return RemovalResult(deleted=True)

        try:
            sheet_deleted = self.mirror.delete_by_key(str(transaction_id))
        except Exception as e:
            logger.warning(
                f"Sheet delete failed for transaction {transaction_id} "
                f"(database delete kept): {e}"
            )
            sheet_deleted = False

        if not sheet_deleted:
            logger.debug(f"Transaction {transaction_id} not removed from sheet")

        return RemovalResult(deleted=True, sheet_deleted=sheet_deleted)

    def diagnose_sheet(self) -> AppendResult:
        """Append a fixed diagnostic row to check spreadsheet access.

        Raises:
            ValueError: If no mirror is configured.
            Exception: Whatever the mirror raises.
        """
        if self.mirror is None:
            raise ValueError("Spreadsheet mirroring is not configured")

        probe = Transaction(
            id=99999,
            date=date.today(),
            description="DIAG TEST",
            amount=Decimal("1.23"),
            type=INCOME,
        )
        return self.mirror.append(probe.to_sheet_row(datetime.now(timezone.utc)))
