"""Functional core - pure business logic with no I/O."""

from .entries import (
    DATE_FORMAT,
    HEADER_ROWS,
    TIME_FORMAT,
    DiaryRecord,
    InvalidInputError,
    group_by_date,
    make_record,
    normalize_date,
    scan_between,
    select_between,
    validate_text,
)

__all__ = [
    "DATE_FORMAT",
    "HEADER_ROWS",
    "TIME_FORMAT",
    "DiaryRecord",
    "InvalidInputError",
    "group_by_date",
    "make_record",
    "normalize_date",
    "scan_between",
    "select_between",
    "validate_text",
]
