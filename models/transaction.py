from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional

INCOME = "INCOME"
EXPENSE = "EXPENSE"
TRANSACTION_TYPES = (INCOME, EXPENSE)

DEFAULT_CATEGORY = "Outros"
DEFAULT_ACCOUNT = "Conta Corrente"
NO_DESCRIPTION = "Sem descrição"


@dataclass
class Transaction:
    id: int
    date: date
    description: str
    amount: Decimal  # signed: expenses are stored negative
    type: str  # 'INCOME' or 'EXPENSE'
    category: Optional[str] = None  # category name, for display
    account: Optional[str] = None  # account name, for display
    category_id: Optional[int] = None
    account_id: Optional[int] = None

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @property
    def magnitude(self) -> Decimal:
        """Absolute amount, safe against unsigned expense input."""
        return abs(self.amount)

    def to_dict(self) -> dict:
        """Convert transaction to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": float(self.amount),
            "type": self.type,
            "category": self.category,
            "account": self.account,
        }

    def to_sheet_row(self, created_at: Optional[datetime] = None) -> List:
        """Build the spreadsheet row mirrored for this transaction.

        Column A holds the id so the row can be found again on delete.
        """
        created_at = created_at or datetime.now(timezone.utc)
        return [
            str(self.id),
            created_at.isoformat(),
            self.date.isoformat(),
            self.description,
            float(self.amount),
            self.type,
            self.account or DEFAULT_ACCOUNT,
            self.category or DEFAULT_CATEGORY,
        ]
