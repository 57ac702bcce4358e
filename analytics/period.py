"""Period selection, filtering and totals."""

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, List

from dateutil.relativedelta import relativedelta

from models.transaction import EXPENSE, INCOME, Transaction

ALL = "ALL"
TYPE_FILTERS = (ALL, INCOME, EXPENSE)


@dataclass(frozen=True)
class Period:
    """A calendar month used as the aggregation window."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def of(cls, day: date) -> "Period":
        return cls(day.year, day.month)

    @classmethod
    def parse(cls, value: str) -> "Period":
        """Parse "YYYY/MM" or "YYYY-MM"."""
        year, month = value.replace("-", "/").split("/")
        return cls(int(year), int(month))

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        """First day of the following month (exclusive bound)."""
        return self.start + relativedelta(months=1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        return f"{self.month:02d}/{self.year}"

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end

    def shifted(self, months: int) -> "Period":
        return Period.of(self.start + relativedelta(months=months))

    def previous(self) -> "Period":
        return self.shifted(-1)


@dataclass(frozen=True)
class Filters:
    """Free-text and type filters applied on top of the period."""

    text: str = ""
    type: str = ALL

    def __post_init__(self):
        if self.type not in TYPE_FILTERS:
            raise ValueError(f"Invalid type filter: {self.type}")

    def matches(self, transaction: Transaction) -> bool:
        needle = self.text.strip().lower()
        if needle and needle not in (transaction.description or "").lower():
            return False
        return self.type == ALL or transaction.type == self.type


@dataclass
class Totals:
    income: Decimal
    expense: Decimal  # signed, <= 0 under the sign invariant
    balance: Decimal
    total_expense_abs: Decimal
    count: int


def filter_period(
    transactions: Iterable[Transaction], period: Period, filters: Filters
) -> List[Transaction]:
    """Transactions of the period that pass the filters, newest first."""
    selected = [
        t for t in transactions if period.contains(t.date) and filters.matches(t)
    ]
    return sorted(selected, key=lambda t: (t.date, t.id), reverse=True)


def in_period(transactions: Iterable[Transaction], period: Period) -> List[Transaction]:
    """Unfiltered transactions of the period, in input order."""
    return [t for t in transactions if period.contains(t.date)]


def compute_totals(transactions: Iterable[Transaction]) -> Totals:
    income = Decimal("0")
    expense = Decimal("0")
    count = 0
    for t in transactions:
        count += 1
        if t.type == INCOME:
            income += t.amount
        elif t.type == EXPENSE:
            expense += t.amount

    return Totals(
        income=income,
        expense=expense,
        balance=income + expense,
        total_expense_abs=abs(expense),
        count=count,
    )


def expenses_of(transactions: Iterable[Transaction]) -> List[Transaction]:
    return [t for t in transactions if t.type == EXPENSE]
