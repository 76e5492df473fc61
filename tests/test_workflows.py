"""Tests for the shared workflow layer."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from diary.adapters.csv_sheet import CsvSheetStore
from diary.adapters.google_sheets import GoogleSheetsStore
from diary.adapters.memory_sheet import MemorySheetStore
from diary.adapters.system_clock import SystemClock
from diary.config import DATA_DIR, DIARY_HOME, Config
from diary.workflows import get_diary, get_repository, get_store


class FixedClock:
    def now(self) -> datetime:
        return datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)


class TestGetStore:
    def test_uses_configured_csv_dir(self, tmp_path):
        store = get_store(Config(csv_dir=str(tmp_path)))
        assert isinstance(store, CsvSheetStore)
        assert store.sheet_dir == tmp_path

    def test_expands_user_path(self):
        store = get_store(Config(csv_dir="~/some/sheets"))
        assert "~" not in str(store.sheet_dir)
        assert store.sheet_dir == Path.home() / "some" / "sheets"

    def test_falls_back_to_default(self):
        store = get_store(Config())
        assert store.sheet_dir == DATA_DIR / "sheets"

    def test_google_backend(self):
        store = get_store(Config(backend="google", spreadsheet_id="abc"))
        assert isinstance(store, GoogleSheetsStore)
        assert store.spreadsheet_id == "abc"
        assert store._token_path == DIARY_HOME / "config" / "google" / "token.json"

    def test_google_backend_requires_spreadsheet_id(self):
        with pytest.raises(ValueError, match="SPREADSHEET_ID"):
            get_store(Config(backend="google"))


class TestGetDiary:
    def test_wires_sheet_name_and_timezone(self):
        config = Config(sheet_name="journal", timezone="UTC")
        store = MemorySheetStore()
        get_repository(config, store).initialize()

        diary = get_diary(config, store=store, clock=FixedClock())
        diary.submit("hello")

        assert diary.repository.sheet_name == "journal"
        assert store.sheets["journal"].rows[2] == ["2024/06/01", "00:00", "hello"]

    def test_defaults_to_system_clock(self, tmp_path):
        diary = get_diary(Config(csv_dir=str(tmp_path)))
        assert isinstance(diary.clock, SystemClock)

    def test_csv_end_to_end(self, tmp_path):
        config = Config(csv_dir=str(tmp_path))
        get_repository(config).initialize()

        diary = get_diary(config, clock=FixedClock())
        diary.submit("first")
        diary.submit("second")

        assert diary.get_between("2024/06/01", "2024/06/01") == {"2024/06/01": ["first", "second"]}


class TestSystemClock:
    def test_returns_aware_datetime(self):
        assert SystemClock().now().tzinfo is not None
