"""Month highlights: the priciest day and the largest expenses."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from analytics.period import expenses_of
from models.transaction import Transaction

TOP_EXPENSES = 3


@dataclass
class DayTotal:
    date: date
    total: Decimal


@dataclass
class Highlights:
    priciest_day: Optional[DayTotal] = None
    top_expenses: List[Transaction] = field(default_factory=list)


def highlights(transactions: Sequence[Transaction], limit: int = TOP_EXPENSES) -> Highlights:
    """Highlights of an already period-filtered transaction list.

    Ties on the priciest day go to the earliest date; ties among top
    expenses keep the order of the input list.
    """
    expenses = expenses_of(transactions)
    if not expenses:
        return Highlights()

    by_day: Dict[date, Decimal] = {}
    for t in expenses:
        by_day[t.date] = by_day.get(t.date, Decimal("0")) + t.magnitude

    day, total = min(by_day.items(), key=lambda item: (-item[1], item[0]))
    top = sorted(expenses, key=lambda t: t.magnitude, reverse=True)[:limit]

    return Highlights(priciest_day=DayTotal(date=day, total=total), top_expenses=top)
