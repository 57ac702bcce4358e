#!/usr/bin/env python3
"""Seed script for Gastos.

Applies pending migrations and upserts the default accounts and categories.
Safe to run more than once.
"""

from config import load_config
from db.manager import DatabaseManager
from logger import setup_logging
from models.transaction import EXPENSE, INCOME
from services.base import Services

DEFAULT_ACCOUNTS = [
    ("Conta Corrente", "corrente"),
    ("Cartão Visa", "cartao"),
]

DEFAULT_CATEGORIES = [
    ("Salário", INCOME),
    ("Mercado", EXPENSE),
    ("Transporte", EXPENSE),
    ("Lazer", EXPENSE),
]


def seed(services) -> None:
    """Upsert the default accounts and categories."""
    for name, account_type in DEFAULT_ACCOUNTS:
        services.accounts.upsert(name, account_type)
    for name, kind in DEFAULT_CATEGORIES:
        services.categories.upsert(name, kind)


def main():
    config = load_config()
    logger = setup_logging(config)

    db_manager = DatabaseManager(config)
    db_manager.ensure_schema()

    seed(Services(config, db_manager=db_manager, sheet_mirror=None))
    logger.info(
        f"Seeded {len(DEFAULT_ACCOUNTS)} accounts and "
        f"{len(DEFAULT_CATEGORIES)} categories into {config.db_path}"
    )


if __name__ == "__main__":
    main()
