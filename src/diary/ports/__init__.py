"""Ports - interfaces/protocols for external dependencies."""

from .clock import Clock
from .sheet_store import Sheet, SheetStore

__all__ = [
    "Clock",
    "Sheet",
    "SheetStore",
]
