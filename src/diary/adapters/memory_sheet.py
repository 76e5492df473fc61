"""In-memory sheet storage adapter."""

from typing import Any


def _is_blank(row: list[Any]) -> bool:
    return all(cell is None or cell == "" for cell in row)


class MemorySheet:
    """
    A sheet held in a list of rows.

    Implements Sheet protocol.
    """

    def __init__(self, rows: list[list[Any]] | None = None):
        self.rows: list[list[Any]] = [list(r) for r in rows or []]

    def last_row(self) -> int:
        for index in range(len(self.rows), 0, -1):
            if not _is_blank(self.rows[index - 1]):
                return index
        return 0

    def get_values(self) -> list[list[Any]]:
        return [list(r) for r in self.rows[: self.last_row()]]

    def set_values(self, row: int, col: int, values: list[list[Any]]) -> None:
        if row < 1 or col < 1:
            raise ValueError(f"Invalid cell ({row}, {col}): rows and columns start at 1")
        for offset, new_row in enumerate(values):
            target = row - 1 + offset
            while len(self.rows) <= target:
                self.rows.append([])
            cells = self.rows[target]
            end = col - 1 + len(new_row)
            if len(cells) < end:
                cells.extend([""] * (end - len(cells)))
            cells[col - 1 : end] = list(new_row)


class MemorySheetStore:
    """
    In-process sheet storage, used for tests and throwaway servers.

    Implements SheetStore protocol.
    """

    def __init__(self, sheets: dict[str, list[list[Any]]] | None = None):
        self.sheets = {name: MemorySheet(rows) for name, rows in (sheets or {}).items()}

    def get_sheet(self, name: str) -> MemorySheet | None:
        return self.sheets.get(name)

    def create_sheet(self, name: str) -> MemorySheet:
        return self.sheets.setdefault(name, MemorySheet())
