"""Dashboard aggregation over an in-memory transaction list."""

from analytics.engine import Dashboard, build_dashboard
from analytics.period import Filters, Period

__all__ = ["Dashboard", "Filters", "Period", "build_dashboard"]
