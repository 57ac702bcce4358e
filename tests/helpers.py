"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal
from itertools import count
from typing import List, Optional

from models.transaction import EXPENSE, INCOME, Transaction
from sheets.providers.base import AppendResult, SheetMirror

_ids = count(1)


def make_transaction(
    day: date,
    amount,
    type: str = EXPENSE,
    description: str = "Compra",
    category: Optional[str] = None,
    account: Optional[str] = None,
    id: Optional[int] = None,
) -> Transaction:
    """Build a Transaction snapshot without touching the database.

    Amounts are taken as given, so unsigned expenses can be tested too.
    """
    return Transaction(
        id=id if id is not None else next(_ids),
        date=day,
        description=description,
        amount=Decimal(str(amount)),
        type=type,
        category=category,
        account=account,
    )


def expense(day: date, amount, description: str = "Compra", category: Optional[str] = None, **kwargs) -> Transaction:
    return make_transaction(day, -abs(Decimal(str(amount))), EXPENSE, description, category, **kwargs)


def income(day: date, amount, description: str = "Salário", category: Optional[str] = None, **kwargs) -> Transaction:
    return make_transaction(day, abs(Decimal(str(amount))), INCOME, description, category, **kwargs)


class FakeSheetMirror(SheetMirror):
    """Keeps rows in a list; can be told to fail."""

    def __init__(self, fail: bool = False):
        self.rows: List[List] = []
        self.fail = fail

    def append(self, row: List) -> AppendResult:
        if self.fail:
            raise ConnectionError("sheet unavailable")
        self.rows.append(list(row))
        row_number = len(self.rows)
        return AppendResult(updated_range=f"'Lancamentos'!A{row_number}:H{row_number}", row_number=row_number)

    def find_row_by_key(self, key: str) -> Optional[int]:
        if self.fail:
            raise ConnectionError("sheet unavailable")
        for index, row in enumerate(self.rows, start=1):
            if str(row[0]) == key:
                return index
        return None

    def delete_row(self, row_number: int) -> None:
        del self.rows[row_number - 1]
