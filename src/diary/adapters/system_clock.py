"""System clock adapter."""

from datetime import datetime, timezone


class SystemClock:
    """
    Wall-clock time source.

    Implements Clock protocol.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
