"""Dashboard controller: fetch the history, aggregate, render, refresh."""

import sqlite3
import time
from datetime import date
from typing import Callable, List, Optional

from analytics import Dashboard, Filters, Period, build_dashboard
from analytics.formatting import format_brl, format_date, format_pct
from logger import get_logger

logger = get_logger()


def load_dashboard(
    services,
    period: Period,
    filters: Optional[Filters] = None,
    today: Optional[date] = None,
) -> Dashboard:
    """Fetch the full history and build the dashboard for a period.

    A storage failure is logged and the dashboard is built from an empty
    history, so every metric degrades to zeros and empty series.

    Args:
        services: Services container with the transaction service.
        period: Selected month.
        filters: Optional text and type filters.
        today: Optional wall-clock override.

    Returns:
        Dashboard bundle.
    """
    try:
        transactions = services.transactions.find_all()
    except sqlite3.Error as e:
        logger.error(f"Could not load transactions: {e}")
        transactions = []

    logger.debug(f"Building dashboard for {period.label} from {len(transactions)} transactions")
    return build_dashboard(transactions, period, filters, today=today)


def render_dashboard(dashboard: Dashboard) -> List[str]:
    """Render the dashboard as plain text lines."""
    totals = dashboard.totals
    lines = [
        f"Dashboard {dashboard.period.label}",
        "=" * 60,
        f"Receitas:        {format_brl(totals.income)}",
        f"Despesas:        {format_brl(totals.total_expense_abs)}",
        f"Saldo:           {format_brl(totals.balance)}",
        f"Gasto médio/dia: {format_brl(dashboard.projection.avg_daily_expense)}",
        f"Lançamentos:     {totals.count}",
    ]

    comparison = dashboard.month_comparison
    if comparison is not None:
        income_pct = format_pct(comparison.income_pct) if comparison.income_pct is not None else "n/a"
        expense_pct = format_pct(comparison.expense_pct) if comparison.expense_pct is not None else "n/a"
        lines.append(
            f"Vs. {comparison.previous.label}: receitas {income_pct}, despesas {expense_pct}"
        )

    if dashboard.projection.is_current_month:
        lines.append(
            f"Saldo projetado: {format_brl(dashboard.projection.projected_end_balance)}"
        )

    if dashboard.daily_balance:
        last = dashboard.daily_balance[-1]
        lines.append(f"Saldo acumulado no dia {last.label}: {format_brl(last.balance)}")

    lines.append("")
    lines.append("Receitas x Despesas (6 meses)")
    for bar in dashboard.six_month_bars:
        lines.append(f"  {bar.label}  +{format_brl(bar.income)}  -{format_brl(bar.expense)}")

    _append_ranking(lines, "Top categorias", dashboard.top_categories)
    _append_ranking(lines, "Despesas por categoria", dashboard.category_breakdown)
    _append_ranking(lines, "Top locais", dashboard.top_places)

    lines.append("")
    lines.append("Despesas por dia da semana")
    lines.append(
        "  " + "  ".join(f"{b.label} {format_brl(b.total)}" for b in dashboard.weekday_histogram)
    )

    if dashboard.recurring_expenses:
        lines.append("")
        lines.append("Gastos recorrentes")
        for r in dashboard.recurring_expenses:
            lines.append(f"  {r.name}: {r.count}x, média {format_brl(r.average)}")

    month_highlights = dashboard.highlights
    if month_highlights.priciest_day is not None:
        lines.append("")
        lines.append("Destaques")
        lines.append(
            f"  Dia mais caro: {format_date(month_highlights.priciest_day.date)} "
            f"({format_brl(month_highlights.priciest_day.total)})"
        )
        for t in month_highlights.top_expenses:
            lines.append(f"  {format_date(t.date)}  {t.description}  {format_brl(t.magnitude)}")

    lines.append("")
    lines.append("Resumo")
    lines.extend(f"  - {sentence}" for sentence in dashboard.insights)
    return lines


def watch_dashboard(
    services,
    period: Period,
    filters: Optional[Filters] = None,
    interval: float = 8,
    cycles: Optional[int] = None,
    emit: Callable[[List[str]], None] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Re-fetch and re-render the dashboard on a fixed interval.

    Args:
        services: Services container.
        period: Selected month.
        filters: Optional filters.
        interval: Seconds between refreshes.
        cycles: Number of refreshes before returning; None runs until interrupted.
        emit: Receives the rendered lines of each refresh (prints by default).
        sleep: Sleep function, replaceable in tests.

    Returns:
        Number of refreshes performed.
    """
    emit = emit or _print_lines
    count = 0
    while cycles is None or count < cycles:
        emit(render_dashboard(load_dashboard(services, period, filters)))
        count += 1
        if cycles is None or count < cycles:
            sleep(interval)
    return count


def _append_ranking(lines: List[str], title: str, items) -> None:
    if not items:
        return
    lines.append("")
    lines.append(title)
    for item in items:
        lines.append(f"  {item.name}: {format_brl(item.total)}")


def _print_lines(lines: List[str]) -> None:
    print("\n".join(lines))
    print()
