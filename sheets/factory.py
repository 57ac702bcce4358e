"""Factory for creating spreadsheet mirror instances."""

from typing import Optional
from config import Config
from sheets.providers.base import SheetMirror
from sheets.providers.google import GoogleSheetMirror
from logger import get_logger

logger = get_logger()


def get_sheet_mirror(config: Config) -> Optional[SheetMirror]:
    """Create a spreadsheet mirror based on configuration.

    Args:
        config: Application configuration.

    Returns:
        SheetMirror instance, or None if mirroring is disabled.

    Raises:
        ValueError: If mirroring is enabled but settings are incomplete.
    """
    if not config.sheets_enabled:
        logger.debug("Spreadsheet mirroring is disabled")
        return None

    if not config.sheets_id:
        raise ValueError("Sheets mirroring enabled but spreadsheet_id not configured")

    if not config.sheets_credentials_file:
        raise ValueError("Sheets mirroring enabled but credentials_file not configured")

    if not config.sheets_tab:
        raise ValueError("Sheets mirroring enabled but tab not configured")

    logger.debug(f"Initializing Google Sheets mirror (tab: {config.sheets_tab})")

    return GoogleSheetMirror(
        spreadsheet_id=config.sheets_id,
        tab=config.sheets_tab,
        credentials_file=config.sheets_credentials_file,
    )
