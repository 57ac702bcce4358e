"""Spreadsheet mirror for recorded transactions."""

from sheets.factory import get_sheet_mirror

__all__ = ["get_sheet_mirror"]
