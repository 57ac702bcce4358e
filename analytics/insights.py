"""Human-readable summary sentences for the dashboard."""

from typing import List, Optional

from analytics.comparison import MonthComparison, Projection
from analytics.formatting import format_brl, format_date, format_pct
from analytics.highlights import Highlights
from analytics.period import Period, Totals
from analytics.rankings import RankedItem

FALLBACK_INSIGHT = "Registre mais lançamentos para ver um resumo inteligente do mês."


def build_insights(
    period: Period,
    totals: Totals,
    top_categories: List[RankedItem],
    top_places: List[RankedItem],
    highlights: Highlights,
    comparison: Optional[MonthComparison],
    projection: Projection,
) -> List[str]:
    """Sentences in a fixed order, each only when its figures are available."""
    insights = []
    has_expense = totals.total_expense_abs > 0

    if top_categories and has_expense:
        top = top_categories[0]
        insights.append(
            f"Sua categoria com maior gasto foi {top.name}, somando "
            f"{format_brl(top.total)} em {period.label}."
        )

    if top_places and has_expense:
        insights.append(f'Você gastou mais em "{top_places[0].name}" neste mês.')

    if highlights.priciest_day is not None:
        day = highlights.priciest_day
        insights.append(
            f"Seu dia mais caro foi {format_date(day.date)}, com "
            f"{format_brl(day.total)} em despesas."
        )

    if comparison is not None:
        if comparison.income_pct is not None:
            direction = "positivamente" if comparison.income_pct >= 0 else "negativamente"
            insights.append(
                f"Suas receitas variaram {direction} em "
                f"{format_pct(comparison.income_pct)} em relação a "
                f"{comparison.previous.label}."
            )
        if comparison.expense_pct is not None:
            direction = "para cima" if comparison.expense_pct >= 0 else "para baixo"
            insights.append(
                f"Suas despesas variaram {direction} em "
                f"{format_pct(comparison.expense_pct)} em relação ao mês anterior."
            )

    if projection.is_current_month and projection.projected_end_balance != totals.balance:
        insights.append(
            "Se mantiver o ritmo atual, você deve terminar o mês com saldo "
            f"próximo de {format_brl(projection.projected_end_balance)}."
        )

    return insights or [FALLBACK_INSIGHT]
