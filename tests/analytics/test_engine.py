import json
from datetime import date
from decimal import Decimal

from analytics import Filters, Period, build_dashboard
from tests.helpers import expense, income

TODAY = date(2024, 3, 1)


def _history():
    return [
        income(date(2023, 12, 20), 1000, id=1),
        expense(date(2023, 12, 5), 200, "Supermercado", category="Mercado", id=2),
        income(date(2024, 1, 20), 1000, category="Salário", id=3),
        expense(date(2024, 1, 5), 50, "Supermercado", category="Mercado", id=4),
        expense(date(2024, 1, 10), 30, "Supermercado", category="Mercado", id=5),
        expense(date(2024, 1, 15), 20, "Uber", category="Transporte", id=6),
    ]


class TestBuildDashboard:
    """Tests for the dashboard bundle."""

    def test_scenario(self):
        dashboard = build_dashboard(_history(), Period(2024, 1), today=TODAY)

        assert dashboard.totals.income == Decimal("1000")
        assert dashboard.totals.total_expense_abs == Decimal("100")
        assert dashboard.totals.balance == Decimal("900")
        assert [t.id for t in dashboard.transactions] == [3, 6, 5, 4]
        assert dashboard.top_categories[0].name == "Mercado"
        assert dashboard.daily_balance[-1].balance == Decimal("1700")
        assert dashboard.six_month_bars[-1].key == "2024-01"
        assert dashboard.years == [2024, 2023]

    def test_idempotent(self):
        history = _history()

        first = build_dashboard(history, Period(2024, 1), today=TODAY)
        second = build_dashboard(history, Period(2024, 1), today=TODAY)

        assert first.to_dict() == second.to_dict()

    def test_input_order_does_not_matter(self):
        history = _history()

        forward = build_dashboard(history, Period(2024, 1), today=TODAY)
        backward = build_dashboard(list(reversed(history)), Period(2024, 1), today=TODAY)

        assert forward.to_dict() == backward.to_dict()

    def test_filters_only_narrow_period_list(self):
        """Test that text filters do not touch history-wide metrics."""
        dashboard = build_dashboard(
            _history(), Period(2024, 1), Filters(text="uber"), today=TODAY
        )

        assert [t.description for t in dashboard.transactions] == ["Uber"]
        assert dashboard.totals.total_expense_abs == Decimal("20")
        assert dashboard.daily_balance[-1].balance == Decimal("1700")
        assert dashboard.six_month_bars[-1].expense == Decimal("100")

    def test_empty_history(self):
        dashboard = build_dashboard([], Period(2024, 1), today=TODAY)

        assert dashboard.totals.count == 0
        assert dashboard.daily_balance == []
        assert len(dashboard.six_month_bars) == 6
        assert dashboard.top_categories == []
        assert len(dashboard.weekday_histogram) == 7
        assert dashboard.month_comparison is None
        assert dashboard.recurring_expenses == []
        assert dashboard.highlights.priciest_day is None
        assert dashboard.years == [2024]

    def test_to_dict_is_json_serializable(self):
        dashboard = build_dashboard(_history(), Period(2024, 1), today=TODAY)

        data = dashboard.to_dict()
        encoded = json.dumps(data)

        assert set(data) == {
            "period",
            "filters",
            "transactions",
            "totals",
            "daily_balance",
            "six_month_bars",
            "top_categories",
            "category_breakdown",
            "top_places",
            "weekday_histogram",
            "month_comparison",
            "projection",
            "recurring_expenses",
            "highlights",
            "insights",
            "years",
        }
        assert data["totals"]["balance"] == 900.0
        assert data["month_comparison"]["previous"] == {"year": 2023, "month": 12}
        assert data["highlights"]["priciest_day"]["date"] == "2024-01-05"
        assert "Mercado" in encoded

    def test_category_breakdown_beyond_top_six(self):
        names = ["Mercado", "Lazer", "Farmácia", "Transporte", "Saúde", "Casa", "Pets"]
        history = [
            expense(date(2024, 1, index + 1), 10 + index, category=name)
            for index, name in enumerate(names)
        ]

        dashboard = build_dashboard(history, Period(2024, 1), today=TODAY)

        assert len(dashboard.top_categories) == 6
        assert len(dashboard.category_breakdown) == 7
        assert dashboard.category_breakdown[-1].name == "Mercado"
        assert len(dashboard.to_dict()["category_breakdown"]) == 7

    def test_recurring_names_stable_across_input_order(self):
        history = [
            expense(date(2024, 1, 10), 40, "NETFLIX", id=11),
            expense(date(2024, 2, 10), 40, " netflix ", id=12),
            expense(date(2024, 2, 20), 40, "Netflix", id=13),
        ]

        forward = build_dashboard(history, Period(2024, 2), today=TODAY)
        backward = build_dashboard(list(reversed(history)), Period(2024, 2), today=TODAY)

        assert forward.to_dict() == backward.to_dict()
        assert forward.recurring_expenses[0].name == "Netflix"
