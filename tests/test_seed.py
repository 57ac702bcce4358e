from scripts.seed import DEFAULT_ACCOUNTS, DEFAULT_CATEGORIES, seed


class TestSeed:
    """Tests for the default data seed."""

    def test_seed_creates_defaults(self, services):
        seed(services)

        assert [a.name for a in services.accounts.find_all()] == sorted(
            name for name, _ in DEFAULT_ACCOUNTS
        )
        assert services.categories.find_by_name("Salário").kind == "INCOME"
        assert services.categories.find_by_name("Mercado").kind == "EXPENSE"

    def test_seed_twice(self, services):
        seed(services)
        seed(services)

        assert len(services.accounts.find_all()) == len(DEFAULT_ACCOUNTS)
        assert len(services.categories.find_all()) == len(DEFAULT_CATEGORIES)
