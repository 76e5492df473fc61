"""Pure diary domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

DATE_FORMAT = "%Y/%m/%d"
TIME_FORMAT = "%H:%M"

# Rows 1-2 of the sheet hold a title and column headers
HEADER_ROWS = 2

# Day zero for spreadsheet serial dates
SERIAL_EPOCH = date(1899, 12, 30)


class InvalidInputError(ValueError):
    """Submitted diary text was empty or whitespace-only."""


@dataclass(frozen=True)
class DiaryRecord:
    """A single persisted diary entry."""

    date: str
    time: str
    text: str

    def to_row(self) -> list[str]:
        return [self.date, self.time, self.text]


def validate_text(text: str | None) -> str:
    """Return text unchanged, or raise InvalidInputError if it is blank or not a string."""
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError("Diary text is empty.")
    return text


def make_record(text: str, now: datetime, tz: tzinfo) -> DiaryRecord:
    """
    Stamp text with the date and time of a single instant.

    Pure function - no I/O. The text is kept verbatim (not trimmed).
    """
    validate_text(text)
    local = now.astimezone(tz)
    return DiaryRecord(
        date=local.strftime(DATE_FORMAT),
        time=local.strftime(TIME_FORMAT),
        text=text,
    )


def normalize_date(value, tz: tzinfo | None = None) -> str:
    """
    Render a date cell in canonical yyyy/MM/dd form.

    Accepts datetimes, dates, spreadsheet serial numbers and strings.
    Strings that don't parse as a date are returned as-is (stripped).
    """
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz is not None:
            value = value.astimezone(tz)
        return value.strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (SERIAL_EPOCH + timedelta(days=int(value))).strftime(DATE_FORMAT)

    text = str(value).strip()
    for fmt in (DATE_FORMAT, "%Y-%m-%d"):
        try:
            return datetime.strptime(text, fmt).strftime(DATE_FORMAT)
        except ValueError:
            continue
    return text


def _cell(row: list, index: int):
    return row[index] if index < len(row) else ""


def scan_between(
    rows: list[list],
    since: str,
    until: str,
    tz: tzinfo | None = None,
) -> list[tuple[str, str]]:
    """
    Collect (date, text) pairs dated within [since, until], newest first.

    Rows are expected oldest first (append order). The scan walks backward:
    rows after `until` are skipped, and the first row before `since` ends
    the scan since everything earlier is older still.
    """
    matches = []
    for row in reversed(rows):
        row_date = normalize_date(_cell(row, 0), tz)
        if row_date > until:
            continue
        if row_date < since:
            break
        text = _cell(row, 2)
        matches.append((row_date, "" if text is None else str(text)))
    return matches


def group_by_date(matches: list[tuple[str, str]]) -> dict[str, list[str]]:
    """
    Group newest-first matches by date.

    Each text is prepended to its date's list, so lists come out oldest first.
    """
    grouped: dict[str, list[str]] = {}
    for row_date, text in matches:
        grouped[row_date] = [text, *grouped.get(row_date, [])]
    return grouped


def select_between(
    values: list[list],
    since: str,
    until: str,
    tz: tzinfo | None = None,
) -> dict[str, list[str]]:
    """Drop header rows, scan for the range and group the result by date."""
    return group_by_date(scan_between(values[HEADER_ROWS:], since, until, tz))
