from datetime import date

from analytics import Period, build_dashboard
from analytics.insights import FALLBACK_INSIGHT
from tests.helpers import expense, income


class TestInsights:
    """Tests for the summary sentences, built through the dashboard."""

    def test_sentences_in_order(self):
        transactions = [
            income(date(2023, 12, 20), 1000),
            expense(date(2023, 12, 5), 200, "Supermercado", category="Mercado"),
            income(date(2024, 1, 20), 1000, category="Salário"),
            expense(date(2024, 1, 5), 50, "Supermercado", category="Mercado"),
            expense(date(2024, 1, 10), 30, "Supermercado", category="Mercado"),
            expense(date(2024, 1, 15), 20, "Uber", category="Transporte"),
        ]

        dashboard = build_dashboard(transactions, Period(2024, 1), today=date(2024, 3, 1))

        assert dashboard.insights == [
            "Sua categoria com maior gasto foi Mercado, somando R$ 80,00 em 01/2024.",
            'Você gastou mais em "Supermercado" neste mês.',
            "Seu dia mais caro foi 05/01/2024, com R$ 50,00 em despesas.",
            "Suas receitas variaram positivamente em 0,0% em relação a 12/2023.",
            "Suas despesas variaram para baixo em -50,0% em relação ao mês anterior.",
        ]

    def test_projection_sentence_in_live_month(self):
        transactions = [
            income(date(2024, 1, 2), 1000),
            expense(date(2024, 1, 5), 100),
        ]

        dashboard = build_dashboard(transactions, Period(2024, 1), today=date(2024, 1, 10))

        assert dashboard.insights[-1] == (
            "Se mantiver o ritmo atual, você deve terminar o mês com saldo "
            "próximo de R$ 2.790,00."
        )

    def test_no_projection_sentence_for_past_month(self):
        transactions = [income(date(2024, 1, 2), 1000), expense(date(2024, 1, 5), 100)]

        dashboard = build_dashboard(transactions, Period(2024, 1), today=date(2024, 2, 10))

        assert not any(s.startswith("Se mantiver") for s in dashboard.insights)

    def test_fallback(self):
        dashboard = build_dashboard([], Period(2024, 1), today=date(2024, 3, 1))

        assert dashboard.insights == [FALLBACK_INSIGHT]

    def test_income_only_month_uses_fallback(self):
        transactions = [income(date(2024, 1, 20), 1000)]

        dashboard = build_dashboard(transactions, Period(2024, 1), today=date(2024, 3, 1))

        assert dashboard.insights == [FALLBACK_INSIGHT]
