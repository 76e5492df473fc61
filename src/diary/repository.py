"""Diary rows on a named sheet."""

import logging
from typing import Any

from .core.entries import DiaryRecord
from .ports import Sheet, SheetStore

logger = logging.getLogger(__name__)

HEADER = [["Diary"], ["date", "time", "text"]]


class DiaryRepository:
    """
    Reads and appends diary rows through a SheetStore.

    A missing sheet is not an error: appends become no-ops and
    reads return no rows.
    """

    def __init__(self, store: SheetStore, sheet_name: str):
        self.store = store
        self.sheet_name = sheet_name

    def _get_sheet(self) -> Sheet | None:
        sheet = self.store.get_sheet(self.sheet_name)
        if sheet is None:
            logger.warning(f"Sheet '{self.sheet_name}' not found")
        return sheet

    def append(self, record: DiaryRecord) -> bool:
        """Write the record as a new row after the last one. Returns False if the sheet is missing."""
        sheet = self._get_sheet()
        if sheet is None:
            return False

        row = [record.to_row()]
        from_row = sheet.last_row() + 1
        sheet.set_values(from_row, 1, row)
        logger.debug(f"Appended diary row {from_row} for {record.date} {record.time}")
        return True

    def read_all(self) -> list[list[Any]] | None:
        """All rows including headers, or None if the sheet is missing."""
        sheet = self._get_sheet()
        if sheet is None:
            return None
        return sheet.get_values()

    def initialize(self) -> bool:
        """Create the sheet with header rows if needed. Returns True if it was created."""
        if self.store.get_sheet(self.sheet_name) is not None:
            return False

        sheet = self.store.create_sheet(self.sheet_name)
        for index, header_row in enumerate(HEADER, start=1):
            sheet.set_values(index, 1, [header_row])
        logger.info(f"Initialized sheet '{self.sheet_name}'")
        return True
