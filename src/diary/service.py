"""Diary entry and range query service."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .core.entries import make_record, select_between
from .ports import Clock
from .repository import DiaryRepository

logger = logging.getLogger(__name__)


class DiaryService:
    """Saves diary entries and reads them back by date range."""

    def __init__(
        self,
        repository: DiaryRepository,
        clock: Clock,
        timezone: str = "Asia/Tokyo",
    ):
        self.repository = repository
        self.clock = clock
        try:
            self.tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{timezone}'") from e

    def submit(self, text: str) -> None:
        """Timestamp text and append it. Raises InvalidInputError if blank."""
        self.save(text)

    def save(self, text: str) -> bool:
        """Like submit, but returns False when there was no sheet to write to."""
        record = make_record(text, self.clock.now(), self.tz)
        if not self.repository.append(record):
            return False
        logger.info(f"Saved diary entry for {record.date} {record.time}")
        return True

    def get_between(self, since: str, until: str) -> dict[str, list[str]]:
        """Entries dated within [since, until] grouped by date, oldest first per date."""
        values = self.repository.read_all()
        if values is None:
            return {}
        return select_between(values, since, until, self.tz)
