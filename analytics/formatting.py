"""pt-BR display formatting for amounts, percentages and dates."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal


def format_brl(value) -> str:
    """Format a value as Brazilian reais, e.g. "R$ 1.234,56" or "-R$ 5,00"."""
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"
    # Swap the US separators for the Brazilian ones
    grouped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {grouped}"


def format_pct(value) -> str:
    """One decimal place with a comma, e.g. "-12,5%"."""
    rounded = Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%".replace(".", ",")


def format_date(day: date) -> str:
    return day.strftime("%d/%m/%Y")
