import sqlite3
from datetime import date
from decimal import Decimal

from analytics import Filters, Period
from models.transaction_input import TransactionInput
from tools.dashboard import load_dashboard, render_dashboard, watch_dashboard


def _record(services, day, description, amount, transaction_type="EXPENSE", category="Outros"):
    return services.ledger.record(
        TransactionInput(
            date=day,
            description=description,
            amount=amount,
            type=transaction_type,
            category=category,
        )
    )


class TestLoadDashboard:
    """Tests for fetching and aggregating the stored history."""

    def test_aggregates_stored_transactions(self, services):
        _record(services, "2024-01-20", "Salário", "1000", "INCOME", "Salário")
        _record(services, "2024-01-05", "Supermercado", "50", category="Mercado")
        _record(services, "2024-01-10", "Supermercado", "30", category="Mercado")

        dashboard = load_dashboard(services, Period(2024, 1), today=date(2024, 3, 1))

        assert dashboard.totals.income == Decimal("1000")
        assert dashboard.totals.total_expense_abs == Decimal("80")
        assert dashboard.top_categories[0].name == "Mercado"

    def test_filters(self, services):
        _record(services, "2024-01-05", "Supermercado", "50")
        _record(services, "2024-01-06", "Uber", "20")

        dashboard = load_dashboard(
            services, Period(2024, 1), Filters(text="uber"), today=date(2024, 3, 1)
        )

        assert [t.description for t in dashboard.transactions] == ["Uber"]

    def test_storage_failure_degrades_to_empty(self, services, monkeypatch):
        def broken():
            raise sqlite3.OperationalError("database is locked")

        monkeypatch.setattr(services.transactions, "find_all", broken)

        dashboard = load_dashboard(services, Period(2024, 1), today=date(2024, 3, 1))

        assert dashboard.totals.count == 0
        assert dashboard.daily_balance == []
        assert len(dashboard.insights) == 1


class TestRenderDashboard:

    def test_render_lines(self, services):
        _record(services, "2024-01-20", "Salário", "1000", "INCOME", "Salário")
        _record(services, "2024-01-05", "Supermercado", "50", category="Mercado")

        lines = render_dashboard(
            load_dashboard(services, Period(2024, 1), today=date(2024, 3, 1))
        )

        assert lines[0] == "Dashboard 01/2024"
        assert "Receitas:        R$ 1.000,00" in lines
        assert "Saldo:           R$ 950,00" in lines
        assert "  Mercado: R$ 50,00" in lines
        assert "Despesas por categoria" in lines
        assert "Resumo" in lines

    def test_render_empty(self, services):
        lines = render_dashboard(
            load_dashboard(services, Period(2024, 1), today=date(2024, 3, 1))
        )

        assert "Lançamentos:     0" in lines
        assert "Destaques" not in lines


class TestWatchDashboard:
    """Tests for the periodic refresh loop."""

    def test_refreshes_until_cycles(self, services):
        emitted = []
        sleeps = []

        count = watch_dashboard(
            services,
            Period(2024, 1),
            interval=8,
            cycles=3,
            emit=emitted.append,
            sleep=sleeps.append,
        )

        assert count == 3
        assert len(emitted) == 3
        assert sleeps == [8, 8]

    def test_picks_up_new_transactions(self, services):
        emitted = []

        def record_between_refreshes(_):
            _record(services, "2024-01-05", "Supermercado", "50")

        watch_dashboard(
            services,
            Period(2024, 1),
            cycles=2,
            emit=emitted.append,
            sleep=record_between_refreshes,
        )

        assert "Lançamentos:     0" in emitted[0]
        assert "Lançamentos:     1" in emitted[1]


class TestRenderCategoryBreakdown:

    def test_lists_every_category(self, services):
        names = ["Mercado", "Lazer", "Farmácia", "Transporte", "Saúde", "Casa", "Pets"]
        for index, name in enumerate(names):
            _record(services, f"2024-01-{index + 1:02d}", f"Compra {name}", str(10 + index), category=name)

        lines = render_dashboard(
            load_dashboard(services, Period(2024, 1), today=date(2024, 3, 1))
        )

        breakdown = lines[lines.index("Despesas por categoria") + 1:]
        assert "  Mercado: R$ 10,00" in breakdown
        assert "  Pets: R$ 16,00" in breakdown
