"""Adapters - I/O implementations of ports."""

from .csv_sheet import CsvSheet, CsvSheetStore
from .google_sheets import GoogleSheet, GoogleSheetsStore
from .memory_sheet import MemorySheet, MemorySheetStore
from .system_clock import SystemClock

__all__ = [
    "CsvSheet",
    "CsvSheetStore",
    "GoogleSheet",
    "GoogleSheetsStore",
    "MemorySheet",
    "MemorySheetStore",
    "SystemClock",
]
