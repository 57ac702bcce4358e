"""Dashboard aggregation entry point.

build_dashboard() recomputes every metric from the full transaction history
on each call. It performs no I/O and keeps no state, so calling it twice with
the same inputs gives the same bundle.
"""

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from analytics.comparison import MonthComparison, Projection, month_comparison, projection
from analytics.highlights import Highlights, highlights
from analytics.insights import build_insights
from analytics.period import Filters, Period, Totals, compute_totals, filter_period
from analytics.rankings import (
    RankedItem,
    WeekdayBucket,
    category_breakdown,
    top_categories,
    top_places,
    weekday_histogram,
)
from analytics.recurring import RecurringExpense, recurring_expenses
from analytics.series import BalancePoint, MonthBar, daily_balance_series, six_month_bars
from models.transaction import Transaction


@dataclass
class Dashboard:
    period: Period
    filters: Filters
    transactions: List[Transaction]  # period-filtered, newest first
    totals: Totals
    daily_balance: List[BalancePoint]
    six_month_bars: List[MonthBar]
    top_categories: List[RankedItem]
    category_breakdown: List[RankedItem]  # every expense category, untruncated
    top_places: List[RankedItem]
    weekday_histogram: List[WeekdayBucket]
    month_comparison: Optional[MonthComparison]
    projection: Projection
    recurring_expenses: List[RecurringExpense]
    highlights: Highlights
    insights: List[str]
    years: List[int]

    def to_dict(self) -> dict:
        """Convert the bundle to JSON-friendly primitives."""
        return {
            "period": {"year": self.period.year, "month": self.period.month},
            "filters": {"text": self.filters.text, "type": self.filters.type},
            "transactions": [t.to_dict() for t in self.transactions],
            "totals": _plain(asdict(self.totals)),
            "daily_balance": [_plain(asdict(p)) for p in self.daily_balance],
            "six_month_bars": [_plain(asdict(b)) for b in self.six_month_bars],
            "top_categories": [_plain(asdict(i)) for i in self.top_categories],
            "category_breakdown": [_plain(asdict(i)) for i in self.category_breakdown],
            "top_places": [_plain(asdict(i)) for i in self.top_places],
            "weekday_histogram": [_plain(asdict(b)) for b in self.weekday_histogram],
            "month_comparison": (
                _plain(asdict(self.month_comparison)) if self.month_comparison else None
            ),
            "projection": _plain(asdict(self.projection)),
            "recurring_expenses": [_plain(asdict(r)) for r in self.recurring_expenses],
            "highlights": {
                "priciest_day": (
                    _plain(asdict(self.highlights.priciest_day))
                    if self.highlights.priciest_day
                    else None
                ),
                "top_expenses": [t.to_dict() for t in self.highlights.top_expenses],
            },
            "insights": list(self.insights),
            "years": list(self.years),
        }


def available_years(transactions: Iterable[Transaction], today: date) -> List[int]:
    """Years present in the history plus the current one, newest first."""
    return sorted({t.date.year for t in transactions} | {today.year}, reverse=True)


def build_dashboard(
    transactions: Iterable[Transaction],
    period: Period,
    filters: Optional[Filters] = None,
    today: Optional[date] = None,
) -> Dashboard:
    """Compute every dashboard metric for the selected period.

    Args:
        transactions: Full transaction history, in any order.
        period: Selected month.
        filters: Optional text and type filters (applied to the period list only).
        today: Wall-clock date; defaults to date.today(). Drives the live-month
               projection and the recurring-expense window.

    Returns:
        Dashboard bundle.
    """
    history = list(transactions)
    filters = filters or Filters()
    today = today or date.today()

    filtered = filter_period(history, period, filters)
    totals = compute_totals(filtered)
    categories = top_categories(filtered)
    places = top_places(filtered)
    month_highlights = highlights(filtered)
    comparison = month_comparison(history, period, totals) if history else None
    month_projection = projection(period, totals, today)

    return Dashboard(
        period=period,
        filters=filters,
        transactions=filtered,
        totals=totals,
        daily_balance=daily_balance_series(history, period),
        six_month_bars=six_month_bars(history, period),
        top_categories=categories,
        category_breakdown=category_breakdown(filtered),
        top_places=places,
        weekday_histogram=weekday_histogram(filtered),
        month_comparison=comparison,
        projection=month_projection,
        recurring_expenses=recurring_expenses(history, today),
        highlights=month_highlights,
        insights=build_insights(
            period,
            totals,
            categories,
            places,
            month_highlights,
            comparison,
            month_projection,
        ),
        years=available_years(history, today),
    )


def _plain(value):
    """Recursively turn Decimals, dates and periods into JSON primitives."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value
