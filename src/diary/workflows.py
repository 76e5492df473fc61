"""Shared workflow layer between CLI and web app."""

from pathlib import Path

from .adapters.csv_sheet import CsvSheetStore
from .adapters.google_sheets import GoogleSheetsStore
from .adapters.system_clock import SystemClock
from .config import DATA_DIR, DIARY_HOME, Config
from .ports import Clock, SheetStore
from .repository import DiaryRepository
from .service import DiaryService


def get_google_store(config: Config) -> GoogleSheetsStore:
    """Build the Google Sheets store from config."""
    if not config.spreadsheet_id:
        raise ValueError("SPREADSHEET_ID not set in diary.conf")
    token_dir = config.google_token_dir or str(DIARY_HOME / "config" / "google")
    return GoogleSheetsStore(
        spreadsheet_id=config.spreadsheet_id,
        token_dir=token_dir,
        client_secret_file=config.google_client_secret_file,
    )


def get_store(config: Config) -> SheetStore:
    """Resolve the sheet storage backend from config."""
    if config.backend == "google":
        return get_google_store(config)
    if config.csv_dir:
        return CsvSheetStore(Path(config.csv_dir).expanduser())
    return CsvSheetStore(DATA_DIR / "sheets")


def get_repository(config: Config, store: SheetStore | None = None) -> DiaryRepository:
    return DiaryRepository(store or get_store(config), config.sheet_name)


def get_diary(
    config: Config,
    store: SheetStore | None = None,
    clock: Clock | None = None,
) -> DiaryService:
    """Wire up a DiaryService for the configured backend."""
    return DiaryService(
        repository=get_repository(config, store),
        clock=clock or SystemClock(),
        timezone=config.timezone,
    )
