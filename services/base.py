"""Service container wiring storage, ledger and spreadsheet mirror together."""

from typing import Optional
from config import Config
from db.manager import DatabaseManager
from services.accounts import AccountService
from services.categories import CategoryService
from services.ledger import LedgerService
from services.transactions import TransactionService
from sheets import get_sheet_mirror
from sheets.providers.base import SheetMirror

_FROM_CONFIG = object()


class Services:
    """Holds one instance of every service, sharing a single DatabaseManager.

    Tests pass their own db_manager (in-memory database) and sheet_mirror
    (a fake, or None to disable mirroring). Left out, both are built from
    config.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager replacing the configured one.
        sheet_mirror: Optional SheetMirror, or None for no mirroring.

    Raises:
        ValueError: If mirroring is enabled in config but incomplete.
    """

    def __init__(
        self,
        config: Config,
        db_manager: Optional[DatabaseManager] = None,
        sheet_mirror=_FROM_CONFIG,
    ):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        if sheet_mirror is _FROM_CONFIG:
            sheet_mirror = get_sheet_mirror(config)
        self.sheet_mirror: Optional[SheetMirror] = sheet_mirror

        self.accounts = AccountService(self.db_manager)
        self.categories = CategoryService(self.db_manager)
        self.transactions = TransactionService(self.db_manager)
        self.ledger = LedgerService(
            self.transactions, self.categories, self.accounts, self.sheet_mirror
        )
