"""Categorical rankings over the period's expenses."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional

from analytics.period import expenses_of
from models.transaction import DEFAULT_CATEGORY, NO_DESCRIPTION, Transaction

TOP_CATEGORIES = 6
TOP_PLACES = 8
WEEKDAY_LABELS = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb")


@dataclass
class RankedItem:
    name: str
    total: Decimal


@dataclass
class WeekdayBucket:
    weekday: int  # 0 = Sunday
    label: str
    total: Decimal


def category_name(transaction: Transaction) -> str:
    return transaction.category or DEFAULT_CATEGORY


def place_name(transaction: Transaction) -> str:
    return (transaction.description or "").strip() or NO_DESCRIPTION


def rank_expenses(
    transactions: Iterable[Transaction],
    key: Callable[[Transaction], str],
    limit: Optional[int],
) -> List[RankedItem]:
    """Sum absolute expense per key and keep the largest.

    Equal totals are ordered alphabetically by name. A limit of None keeps
    every key.
    """
    sums: Dict[str, Decimal] = {}
    for t in expenses_of(transactions):
        name = key(t)
        sums[name] = sums.get(name, Decimal("0")) + t.magnitude

    ranked = sorted(sums.items(), key=lambda item: (-item[1], item[0]))
    return [RankedItem(name=name, total=total) for name, total in ranked[:limit]]


def top_categories(
    transactions: Iterable[Transaction], limit: int = TOP_CATEGORIES
) -> List[RankedItem]:
    return rank_expenses(transactions, category_name, limit)


def category_breakdown(transactions: Iterable[Transaction]) -> List[RankedItem]:
    """Every expense category of the period with its absolute total."""
    return rank_expenses(transactions, category_name, None)


def top_places(
    transactions: Iterable[Transaction], limit: int = TOP_PLACES
) -> List[RankedItem]:
    return rank_expenses(transactions, place_name, limit)


def weekday_histogram(transactions: Iterable[Transaction]) -> List[WeekdayBucket]:
    """Absolute expense per day of week, Sunday first."""
    sums = [Decimal("0")] * 7
    for t in expenses_of(transactions):
        # date.weekday() is Monday=0; shift so Sunday is bucket 0
        sums[(t.date.weekday() + 1) % 7] += t.magnitude

    return [
        WeekdayBucket(weekday=index, label=label, total=sums[index])
        for index, label in enumerate(WEEKDAY_LABELS)
    ]
