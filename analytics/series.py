"""Time series: daily running balance and six-month income/expense bars."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Sequence

from analytics.period import Period
from models.transaction import EXPENSE, INCOME, Transaction

BAR_MONTHS = 6


@dataclass
class BalancePoint:
    day: int
    label: str  # "01".."31"
    balance: Decimal


@dataclass
class MonthBar:
    key: str  # "YYYY-MM"
    label: str  # "MM/YY"
    income: Decimal
    expense: Decimal  # absolute value


def daily_balance_series(
    transactions: Sequence[Transaction], period: Period
) -> List[BalancePoint]:
    """Running balance for each day of the period.

    Seeded with the balance of the whole history before the period, so the
    first point already carries everything that happened earlier. An empty
    history yields an empty series; an empty period yields a flat line.
    """
    if not transactions:
        return []

    balance_before = sum(
        (t.amount for t in transactions if t.date < period.start), Decimal("0")
    )

    daily_net: Dict[date, Decimal] = defaultdict(Decimal)
    for t in transactions:
        if period.contains(t.date):
            daily_net[t.date] += t.amount

    points = []
    running = balance_before
    for day in range(1, period.days_in_month + 1):
        running += daily_net.get(date(period.year, period.month, day), Decimal("0"))
        points.append(BalancePoint(day=day, label=f"{day:02d}", balance=running))
    return points


def monthly_totals(transactions: Sequence[Transaction]) -> Dict[str, MonthBar]:
    """Income and absolute expense per calendar month, keyed "YYYY-MM"."""
    bars: Dict[str, MonthBar] = {}
    for t in transactions:
        period = Period.of(t.date)
        bar = bars.get(period.key)
        if bar is None:
            bar = bars[period.key] = _empty_bar(period)
        if t.type == INCOME:
            bar.income += t.amount
        elif t.type == EXPENSE:
            bar.expense += t.magnitude
    return bars


def six_month_bars(
    transactions: Sequence[Transaction], period: Period
) -> List[MonthBar]:
    """The six months ending at the selected period, oldest first.

    Months without data are emitted with zero totals.
    """
    totals = monthly_totals(transactions)
    bars = []
    for offset in range(-(BAR_MONTHS - 1), 1):
        month = period.shifted(offset)
        bars.append(totals.get(month.key) or _empty_bar(month))
    return bars


def _empty_bar(period: Period) -> MonthBar:
    return MonthBar(
        key=period.key,
        label=f"{period.month:02d}/{period.year % 100:02d}",
        income=Decimal("0"),
        expense=Decimal("0"),
    )
