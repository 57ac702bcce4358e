"""Recurring expense detection.

An expense is recurring when its normalized description shows up at least
three times within the trailing six months. Groups are ranked by their total
spend, so a cheap but frequent charge can outrank an occasional pricey one.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

from dateutil.relativedelta import relativedelta

from models.transaction import NO_DESCRIPTION, Transaction

WINDOW_MONTHS = 6
MIN_OCCURRENCES = 3
TOP_RECURRING = 6


@dataclass
class RecurringExpense:
    name: str  # trimmed description of the newest occurrence
    average: Decimal
    count: int
    total: Decimal


def normalize_description(description: str) -> str:
    return (description or "").strip().lower() or NO_DESCRIPTION.lower()


def recurring_expenses(
    transactions: Sequence[Transaction],
    today: date,
    limit: int = TOP_RECURRING,
) -> List[RecurringExpense]:
    """Find the costliest recurring expenses, relative to today.

    The result does not depend on the input order: each group is named after
    its newest occurrence (latest date, then highest id) and equal totals are
    ordered by the normalized description.
    """
    threshold = today - relativedelta(months=WINDOW_MONTHS)

    groups: Dict[str, RecurringExpense] = {}
    newest: Dict[str, Tuple[date, int]] = {}
    for t in transactions:
        if not t.is_expense or t.date < threshold:
            continue
        key = normalize_description(t.description)
        group = groups.get(key)
        if group is None:
            group = groups[key] = RecurringExpense(
                name="", average=Decimal("0"), count=0, total=Decimal("0")
            )
        group.total += t.magnitude
        group.count += 1

        stamp = (t.date, t.id)
        if key not in newest or stamp > newest[key]:
            newest[key] = stamp
            group.name = (t.description or "").strip() or NO_DESCRIPTION

    recurring = [(key, g) for key, g in groups.items() if g.count >= MIN_OCCURRENCES]
    for _, group in recurring:
        group.average = group.total / group.count

    recurring.sort(key=lambda item: (-item[1].total, item[0]))
    return [group for _, group in recurring[:limit]]
