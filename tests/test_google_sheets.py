"""Tests for Google Sheets adapter."""

from unittest.mock import patch, MagicMock

import pytest

from diary.adapters.google_sheets import (
    GoogleSheet,
    GoogleSheetsStore,
    a1_range,
    column_letter,
)
from diary.adapters.system_clock import SystemClock
from diary.core.entries import DiaryRecord
from diary.repository import DiaryRepository
from diary.service import DiaryService


@pytest.fixture
def store():
    return GoogleSheetsStore(spreadsheet_id="sheet-123", token_dir="/tmp/test")


def with_titles(service: MagicMock, *titles: str) -> None:
    service.spreadsheets().get().execute.return_value = {
        "sheets": [{"properties": {"title": t}} for t in titles]
    }


class TestA1Notation:
    @pytest.mark.parametrize(
        "col, letters",
        [(1, "A"), (3, "C"), (26, "Z"), (27, "AA"), (52, "AZ"), (703, "AAA")],
    )
    def test_column_letter(self, col, letters):
        assert column_letter(col) == letters

    def test_column_letter_rejects_zero(self):
        with pytest.raises(ValueError):
            column_letter(0)

    def test_single_row_range(self):
        assert a1_range("diary", 3, 1, 1, 3) == "'diary'!A3:C3"

    def test_quotes_in_title_are_escaped(self):
        assert a1_range("Bob's diary", 1, 2, 2, 1) == "'Bob''s diary'!B1:B2"


class TestGoogleSheetsStore:
    def test_token_path(self, store):
        assert store._token_path.name == "token.json"
        assert "test" in str(store._token_path)

    def test_no_credentials_means_no_sheet(self, tmp_path):
        store = GoogleSheetsStore(spreadsheet_id="sheet-123", token_dir=str(tmp_path))
        assert store.get_sheet("diary") is None
        assert store.list_sheets() == []

    @patch("diary.adapters.google_sheets.GoogleSheetsStore._build_service")
    def test_get_sheet_by_title(self, mock_build, store):
        service = MagicMock()
        mock_build.return_value = service
        with_titles(service, "Sheet1", "diary")

        sheet = store.get_sheet("diary")

        assert isinstance(sheet, GoogleSheet)
        assert sheet.title == "diary"
        assert sheet.spreadsheet_id == "sheet-123"

    @patch("diary.adapters.google_sheets.GoogleSheetsStore._build_service")
    def test_missing_title_returns_none(self, mock_build, store):
        service = MagicMock()
        mock_build.return_value = service
        with_titles(service, "Sheet1")

        assert store.get_sheet("diary") is None

    @patch("diary.adapters.google_sheets.GoogleSheetsStore._build_service")
    def test_api_errors_propagate(self, mock_build, store):
        service = MagicMock()
        mock_build.return_value = service
        service.spreadsheets().get().execute.side_effect = Exception("API error")

        with pytest.raises(Exception, match="API error"):
            store.get_sheet("diary")

    @patch("diary.adapters.google_sheets.GoogleSheetsStore._build_service")
    def test_create_sheet_adds_missing_title(self, mock_build, store):
        service = MagicMock()
        mock_build.return_value = service
        with_titles(service, "Sheet1")

        sheet = store.create_sheet("diary")

        assert sheet.title == "diary"
        service.spreadsheets().batchUpdate.assert_called_with(
            spreadsheetId="sheet-123",
            body={"requests": [{"addSheet": {"properties": {"title": "diary"}}}]},
        )

    @patch("diary.adapters.google_sheets.GoogleSheetsStore._build_service")
    def test_create_sheet_without_credentials_raises(self, mock_build, store):
        mock_build.return_value = None
        with pytest.raises(RuntimeError, match="diary auth"):
            store.create_sheet("diary")

    def test_authenticate_without_secret_file(self, store):
        assert store.authenticate() is False


class TestGoogleSheet:
    def test_get_values(self):
        service = MagicMock()
        service.spreadsheets().values().get().execute.return_value = {
            "values": [["Diary"], ["date", "time", "text"], [45292, "09:00", "hi"]]
        }
        sheet = GoogleSheet(service, "sheet-123", "diary")

        assert sheet.get_values()[2] == [45292, "09:00", "hi"]
        assert sheet.last_row() == 3
        service.spreadsheets().values().get.assert_called_with(
            spreadsheetId="sheet-123",
            range="'diary'",
            valueRenderOption="UNFORMATTED_VALUE",
            dateTimeRenderOption="SERIAL_NUMBER",
        )

    def test_empty_sheet(self):
        service = MagicMock()
        service.spreadsheets().values().get().execute.return_value = {}
        assert GoogleSheet(service, "sheet-123", "diary").last_row() == 0

    def test_set_values_writes_raw_block(self):
        service = MagicMock()
        sheet = GoogleSheet(service, "sheet-123", "diary")

        sheet.set_values(5, 1, [["2024/06/01", "09:30", "hello"]])

        service.spreadsheets().values().update.assert_called_with(
            spreadsheetId="sheet-123",
            range="'diary'!A5:C5",
            valueInputOption="RAW",
            body={"values": [["2024/06/01", "09:30", "hello"]]},
        )


class TestRepositoryOverGoogle:
    @patch("diary.adapters.google_sheets.GoogleSheetsStore._build_service")
    def test_append_writes_after_last_row(self, mock_build, store):
        service = MagicMock()
        mock_build.return_value = service
        with_titles(service, "diary")
        service.spreadsheets().values().get().execute.return_value = {
            "values": [["Diary"], ["date", "time", "text"], ["2024/05/31", "22:00", "old"]]
        }

        repo = DiaryRepository(store, "diary")
        assert repo.append(DiaryRecord("2024/06/01", "09:30", "new")) is True

        service.spreadsheets().values().update.assert_called_with(
            spreadsheetId="sheet-123",
            range="'diary'!A4:C4",
            valueInputOption="RAW",
            body={"values": [["2024/06/01", "09:30", "new"]]},
        )

    @patch("diary.adapters.google_sheets.GoogleSheetsStore._build_service")
    def test_serial_date_cells_are_matched(self, mock_build, store):
        service = MagicMock()
        mock_build.return_value = service
        with_titles(service, "diary")
        # A hand-entered date cell comes back as a serial day number
        service.spreadsheets().values().get().execute.return_value = {
            "values": [
                ["Diary"],
                ["date", "time", "text"],
                [45292, 0.375, "typed by hand"],
                ["2024/01/02", "09:00", "from the form"],
            ]
        }

        diary = DiaryService(DiaryRepository(store, "diary"), SystemClock())

        assert diary.get_between("2024/01/01", "2024/01/02") == {
            "2024/01/01": ["typed by hand"],
            "2024/01/02": ["from the form"],
        }
