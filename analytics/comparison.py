"""Month-over-month comparison and end-of-month projection."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from analytics.period import Period, Totals, compute_totals, in_period
from models.transaction import Transaction


@dataclass
class MonthComparison:
    previous: Period
    previous_income: Decimal
    previous_expense_abs: Decimal
    income_pct: Optional[Decimal]  # None when the previous income is not positive
    expense_pct: Optional[Decimal]  # None when the previous expense is zero


@dataclass
class Projection:
    is_current_month: bool
    days_in_month: int
    days_elapsed: int
    days_remaining: int
    avg_daily_expense: Decimal
    net_per_day: Decimal
    projected_end_balance: Decimal


def percent_change(current: Decimal, previous: Decimal) -> Optional[Decimal]:
    """Relative change in percent, or None without a positive base."""
    if previous <= 0:
        return None
    return (current - previous) / previous * 100


def month_comparison(
    transactions: Sequence[Transaction], period: Period, current: Totals
) -> MonthComparison:
    """Compare the period totals against the previous calendar month.

    The previous month is taken from the full history, unfiltered.
    """
    previous = period.previous()
    previous_totals = compute_totals(in_period(transactions, previous))

    return MonthComparison(
        previous=previous,
        previous_income=previous_totals.income,
        previous_expense_abs=previous_totals.total_expense_abs,
        income_pct=percent_change(current.income, previous_totals.income),
        expense_pct=percent_change(
            current.total_expense_abs, previous_totals.total_expense_abs
        ),
    )


def projection(period: Period, totals: Totals, today: date) -> Projection:
    """Extrapolate the period balance to the end of the month.

    Only the live month is partial; any other month counts as complete.
    """
    is_current_month = Period.of(today) == period
    days_in_month = period.days_in_month
    days_elapsed = today.day if is_current_month else days_in_month

    if days_elapsed > 0:
        avg_daily_expense = totals.total_expense_abs / days_elapsed
        net_per_day = totals.balance / days_elapsed
    else:
        avg_daily_expense = Decimal("0")
        net_per_day = Decimal("0")

    days_remaining = max(days_in_month - days_elapsed, 0)

    return Projection(
        is_current_month=is_current_month,
        days_in_month=days_in_month,
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
        avg_daily_expense=avg_daily_expense,
        net_per_day=net_per_day,
        projected_end_balance=totals.balance + net_per_day * days_remaining,
    )
