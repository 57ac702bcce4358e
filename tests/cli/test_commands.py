import csv
import json
import pytest

from cli.__main__ import build_parser


def _run(services, *argv):
    args = build_parser().parse_args(list(argv))
    args.func(args, services)
    return args


class TestTransactionCommands:
    """Tests for the transactions subcommands."""

    def test_add(self, services, sheet_mirror):
        _run(
            services,
            "transactions", "add",
            "--date", "2024-01-05",
            "--description", "Supermercado",
            "--amount", "50,00",
            "--type", "EXPENSE",
            "--category", "Mercado",
        )

        stored = services.transactions.find_all()
        assert len(stored) == 1
        assert stored[0].category == "Mercado"
        assert stored[0].account == "Conta Corrente"
        assert len(sheet_mirror.rows) == 1

    def test_add_invalid_amount_exits(self, services):
        with pytest.raises(SystemExit):
            _run(
                services,
                "transactions", "add",
                "--date", "2024-01-05",
                "--description", "Supermercado",
                "--amount", "cinquenta",
                "--type", "EXPENSE",
            )

        assert services.transactions.find_all() == []

    def test_delete_missing_exits(self, services):
        with pytest.raises(SystemExit):
            _run(services, "transactions", "delete", "9999")

    def test_export(self, services, tmp_path):
        _run(
            services,
            "transactions", "add",
            "--date", "2024-01-05",
            "--description", "Supermercado",
            "--amount", "50",
            "--type", "EXPENSE",
        )
        output = tmp_path / "out" / "janeiro.csv"

        _run(services, "transactions", "export", "--output", str(output), "--month", "2024/01")

        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["id", "date", "description", "amount", "type", "category", "account"]
        assert rows[1][1:5] == ["2024-01-05", "Supermercado", "-50.0", "EXPENSE"]

    def test_invalid_month_exits(self, services):
        with pytest.raises(SystemExit):
            _run(services, "transactions", "list", "--month", "janeiro")


class TestDashboardCommands:

    def test_show_json(self, services, capsys):
        _run(
            services,
            "transactions", "add",
            "--date", "2024-01-05",
            "--description", "Supermercado",
            "--amount", "50",
            "--type", "EXPENSE",
        )
        capsys.readouterr()

        _run(services, "dashboard", "show", "--month", "2024/01", "--json")

        data = json.loads(capsys.readouterr().out)
        assert data["period"] == {"year": 2024, "month": 1}
        assert data["totals"]["total_expense_abs"] == 50.0

    def test_watch_uses_cycles(self, services, capsys):
        _run(services, "dashboard", "watch", "--month", "2024/01", "--cycles", "1")

        assert "Dashboard 01/2024" in capsys.readouterr().out


class TestAccountCommands:

    def test_create_and_delete(self, services):
        _run(services, "accounts", "create", "--name", "Nubank", "--type", "cartao")
        account = services.accounts.find_by_name("Nubank")

        _run(services, "accounts", "delete", str(account.id))

        assert services.accounts.find_by_name("Nubank") is None
