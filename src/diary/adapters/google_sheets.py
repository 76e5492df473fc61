"""Google Sheets API adapter."""

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def column_letter(col: int) -> str:
    """Convert a 1-based column index to A1 letters (1 -> A, 27 -> AA)."""
    if col < 1:
        raise ValueError(f"Invalid column index: {col}")
    letters = ""
    while col:
        col, rem = divmod(col - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def quote_title(title: str) -> str:
    """Quote a sheet title for use in A1 notation."""
    return "'" + title.replace("'", "''") + "'"


def a1_range(title: str, row: int, col: int, rows: int, cols: int) -> str:
    """Build an A1 range like 'diary'!A3:C3 for a block of cells."""
    start = f"{column_letter(col)}{row}"
    end = f"{column_letter(col + cols - 1)}{row + rows - 1}"
    return f"{quote_title(title)}!{start}:{end}"


class GoogleSheet:
    """
    One worksheet inside a Google spreadsheet.

    Implements Sheet protocol.
    """

    def __init__(self, service, spreadsheet_id: str, title: str):
        self.service = service
        self.spreadsheet_id = spreadsheet_id
        self.title = title

    def get_values(self) -> list[list[Any]]:
        result = (
            self.service.spreadsheets()
            .values()
            .get(
                spreadsheetId=self.spreadsheet_id,
                range=quote_title(self.title),
                valueRenderOption="UNFORMATTED_VALUE",
                dateTimeRenderOption="SERIAL_NUMBER",
            )
            .execute()
        )
        return result.get("values", [])

    def last_row(self) -> int:
        return len(self.get_values())

    def set_values(self, row: int, col: int, values: list[list[Any]]) -> None:
        if not values:
            return
        cols = max(len(r) for r in values)
        target = a1_range(self.title, row, col, len(values), cols)
        logger.debug(f"Writing {len(values)} row(s) to {target}")
        (
            self.service.spreadsheets()
            .values()
            .update(
                spreadsheetId=self.spreadsheet_id,
                range=target,
                valueInputOption="RAW",
                body={"values": values},
            )
            .execute()
        )


class GoogleSheetsStore:
    """
    Sheet storage backed by a Google spreadsheet.

    Implements SheetStore protocol.
    """

    def __init__(
        self,
        spreadsheet_id: str,
        token_dir: str,
        client_secret_file: str = "",
    ):
        self.spreadsheet_id = spreadsheet_id
        self.client_secret_file = client_secret_file
        self._token_path = Path(token_dir).expanduser() / "token.json"
        self._service = None

    def _get_credentials(self):
        """Load credentials from token.json, refreshing if needed."""
        from google.auth.transport.requests import Request
        from google.oauth2.credentials import Credentials

        if not self._token_path.exists():
            logger.warning(f"No token.json at {self._token_path} — run 'diary auth'")
            return None

        creds = Credentials.from_authorized_user_file(str(self._token_path), SCOPES)

        if creds.expired and creds.refresh_token:
            try:
                creds.refresh(Request())
                self._token_path.write_text(creds.to_json())
                self._token_path.chmod(0o600)
            except Exception as e:
                logger.warning(f"Failed to refresh Google token: {e}")
                return None

        return creds

    def _build_service(self):
        """Build a Google Sheets API service."""
        from googleapiclient.discovery import build

        if self._service is not None:
            return self._service

        creds = self._get_credentials()
        if not creds:
            return None
        self._service = build("sheets", "v4", credentials=creds)
        return self._service

    def authenticate(self) -> bool:
        """Run OAuth flow and save the token. Returns True on success."""
        from google_auth_oauthlib.flow import InstalledAppFlow

        if not self.client_secret_file:
            logger.error("No client secret file configured")
            return False

        secret_path = Path(self.client_secret_file).expanduser()
        if not secret_path.exists():
            logger.error(f"Client secret file not found: {secret_path}")
            return False

        flow = InstalledAppFlow.from_client_secrets_file(str(secret_path), SCOPES)
        creds = flow.run_local_server(port=0)

        self._token_path.parent.mkdir(parents=True, exist_ok=True)
        self._token_path.write_text(creds.to_json())
        self._token_path.chmod(0o600)
        return True

    def list_sheets(self) -> list[str]:
        """List worksheet titles in the spreadsheet."""
        service = self._build_service()
        if not service:
            return []

        result = (
            service.spreadsheets()
            .get(spreadsheetId=self.spreadsheet_id, fields="sheets.properties.title")
            .execute()
        )
        return [s["properties"]["title"] for s in result.get("sheets", [])]

    def get_sheet(self, name: str) -> GoogleSheet | None:
        service = self._build_service()
        if not service:
            return None
        if name not in self.list_sheets():
            return None
        return GoogleSheet(service, self.spreadsheet_id, name)

    def create_sheet(self, name: str) -> GoogleSheet:
        service = self._build_service()
        if not service:
            raise RuntimeError("Not authenticated with Google — run 'diary auth'")

        if name not in self.list_sheets():
            service.spreadsheets().batchUpdate(
                spreadsheetId=self.spreadsheet_id,
                body={"requests": [{"addSheet": {"properties": {"title": name}}}]},
            ).execute()
            logger.info(f"Added sheet '{name}' to spreadsheet {self.spreadsheet_id}")
        return GoogleSheet(service, self.spreadsheet_id, name)
