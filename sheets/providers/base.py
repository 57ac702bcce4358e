"""Base interface for spreadsheet mirrors."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


class SheetsError(Exception):
    """Raised when the spreadsheet cannot be used as configured."""


@dataclass
class AppendResult:
    """Where an appended row landed in the spreadsheet."""

    updated_range: str
    row_number: int  # 1-based, 0 when the range could not be parsed

    @classmethod
    def from_range(cls, updated_range: str) -> "AppendResult":
        """Parse the row number out of a range such as "'Tab'!A12:H12"."""
        _, _, cells = updated_range.partition("!")
        match = re.search(r"\d+", cells)
        return cls(updated_range=updated_range, row_number=int(match.group()) if match else 0)


class SheetMirror(ABC):
    """Abstract base class for spreadsheet mirrors.

    Rows are keyed by the value of their first cell (the transaction id).
    """

    @abstractmethod
    def append(self, row: List) -> AppendResult:
        """Append a row at the end of the sheet.

        Args:
            row: Cell values, first cell being the row key.

        Returns:
            AppendResult describing where the row was written.
        """
        pass

    @abstractmethod
    def find_row_by_key(self, key: str) -> Optional[int]:
        """Find the 1-based row number whose first cell equals key.

        Returns:
            The row number, or None if no row matches.
        """
        pass

    @abstractmethod
    def delete_row(self, row_number: int) -> None:
        """Delete a row by its 1-based number."""
        pass

    def delete_by_key(self, key: str) -> bool:
        """Delete the row whose first cell equals key.

        Returns:
            True if a row was deleted, False if the key was not found.
        """
        row_number = self.find_row_by_key(key)
        if not row_number:
            return False
        self.delete_row(row_number)
        return True
