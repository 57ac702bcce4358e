"""Google Sheets mirror using the Sheets v4 API."""

from pathlib import Path
from typing import List, Optional
from google.oauth2 import service_account
from googleapiclient.discovery import build
from sheets.providers.base import AppendResult, SheetMirror, SheetsError
from logger import get_logger

logger = get_logger()

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class GoogleSheetMirror(SheetMirror):
    """Mirror rows into one tab of a Google spreadsheet.

    Args:
        spreadsheet_id: ID of the spreadsheet (from its URL).
        tab: Title of the tab receiving the rows.
        credentials_file: Service account JSON key file.
        service: Optional pre-built Sheets service (used in tests).
    """

    def __init__(
        self,
        spreadsheet_id: str,
        tab: str,
        credentials_file: Optional[Path] = None,
        service=None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.tab = tab
        self.credentials_file = credentials_file
        self._service = service
        self._sheet_id: Optional[int] = None

    @property
    def service(self):
        if self._service is None:
            credentials = service_account.Credentials.from_service_account_file(
                str(self.credentials_file), scopes=SCOPES
            )
            self._service = build(
                "sheets", "v4", credentials=credentials, cache_discovery=False
            )
        return self._service

    @property
    def _tab_range(self) -> str:
        # Quote the tab name, doubling any single quotes it contains
        return "'" + self.tab.replace("'", "''") + "'"

    def append(self, row: List) -> AppendResult:
        response = (
            self.service.spreadsheets()
            .values()
            .append(
                spreadsheetId=self.spreadsheet_id,
                range=self._tab_range,
                valueInputOption="USER_ENTERED",
                insertDataOption="INSERT_ROWS",
                includeValuesInResponse=False,
                body={"majorDimension": "ROWS", "values": [row]},
            )
            .execute()
        )
        updated_range = response.get("updates", {}).get("updatedRange", "")
        result = AppendResult.from_range(updated_range)
        logger.debug(f"Appended row to sheet at {result.updated_range}")
        return result

    def find_row_by_key(self, key: str) -> Optional[int]:
        response = (
            self.service.spreadsheets()
            .values()
            .get(
                spreadsheetId=self.spreadsheet_id,
                range=f"{self._tab_range}!A:A",
                majorDimension="ROWS",
            )
            .execute()
        )
        for index, row in enumerate(response.get("values", []), start=1):
            if row and str(row[0]) == key:
                return index
        return None

    def delete_row(self, row_number: int) -> None:
        start_index = row_number - 1
        self.service.spreadsheets().batchUpdate(
            spreadsheetId=self.spreadsheet_id,
            body={
                "requests": [
                    {
                        "deleteDimension": {
                            "range": {
                                "sheetId": self._get_sheet_id(),
                                "dimension": "ROWS",
                                "startIndex": start_index,
                                "endIndex": start_index + 1,
                            }
                        }
                    }
                ]
            },
        ).execute()
        logger.debug(f"Deleted sheet row {row_number}")

    def _get_sheet_id(self) -> int:
        """Look up (once) the numeric id of the configured tab."""
        if self._sheet_id is not None:
            return self._sheet_id

        response = (
            self.service.spreadsheets()
            .get(
                spreadsheetId=self.spreadsheet_id,
                fields="sheets.properties(sheetId,title)",
            )
            .execute()
        )
        for sheet in response.get("sheets", []):
            properties = sheet.get("properties", {})
            if properties.get("title") == self.tab:
                self._sheet_id = properties.get("sheetId")
                return self._sheet_id

        raise SheetsError(f'Tab "{self.tab}" not found in spreadsheet')
