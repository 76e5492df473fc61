"""Spreadsheet storage interface."""

from typing import Any, Protocol


class Sheet(Protocol):
    """A single named sheet addressed by 1-based (row, col) ranges."""

    def last_row(self) -> int:
        """Index of the last row holding data, or 0 if the sheet is empty."""
        ...

    def get_values(self) -> list[list[Any]]:
        """Read every row of the sheet's data range."""
        ...

    def set_values(self, row: int, col: int, values: list[list[Any]]) -> None:
        """Write a block of values with its top-left cell at (row, col)."""
        ...


class SheetStore(Protocol):
    """Interface for looking up sheets by name in any backend."""

    def get_sheet(self, name: str) -> Sheet | None:
        """Return the named sheet, or None if it doesn't exist."""
        ...

    def create_sheet(self, name: str) -> Sheet:
        """Create an empty sheet with the given name and return it."""
        ...
