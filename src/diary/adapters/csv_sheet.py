"""CSV file sheet storage adapter."""

import csv
import logging
from pathlib import Path
from typing import Any

from .memory_sheet import MemorySheet

logger = logging.getLogger(__name__)


class CsvSheet:
    """
    A sheet persisted as a CSV file.

    Implements Sheet protocol. The file is read on every call and
    rewritten in full on every write.
    """

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> MemorySheet:
        with self.path.open(newline="", encoding="utf-8") as f:
            return MemorySheet(list(csv.reader(f)))

    def last_row(self) -> int:
        return self._load().last_row()

    def get_values(self) -> list[list[Any]]:
        return self._load().get_values()

    def set_values(self, row: int, col: int, values: list[list[Any]]) -> None:
        sheet = self._load()
        sheet.set_values(row, col, values)
        tmp_path = self.path.with_suffix(".csv.tmp")
        with tmp_path.open("w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerows(sheet.rows)
        tmp_path.replace(self.path)


class CsvSheetStore:
    """
    File-based sheet storage.

    Implements SheetStore protocol. Each sheet is a CSV file in one directory.
    """

    def __init__(self, sheet_dir: Path | str):
        self.sheet_dir = Path(sheet_dir).expanduser()

    def _path_for_sheet(self, name: str) -> Path:
        return self.sheet_dir / f"{name}.csv"

    def get_sheet(self, name: str) -> CsvSheet | None:
        path = self._path_for_sheet(name)
        if not path.exists():
            return None
        return CsvSheet(path)

    def create_sheet(self, name: str) -> CsvSheet:
        path = self._path_for_sheet(name)
        if not path.exists():
            self.sheet_dir.mkdir(parents=True, exist_ok=True)
            path.touch()
            logger.info(f"Created sheet file {path}")
        return CsvSheet(path)
