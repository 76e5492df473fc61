"""Diary - spreadsheet-backed personal diary."""

__version__ = "0.1.0"
