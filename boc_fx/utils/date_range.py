"""Utility helpers for building Valet-friendly date windows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Final, Tuple

# Ten calendar days covers weekends plus the longest Canadian holiday clusters.
DEFAULT_LOOKBACK_DAYS: Final[int] = 10


class InvalidDateRangeError(ValueError):
    """Raised when an end date precedes its start date."""


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def as_tuple(self) -> Tuple[date, date]:
        """Return the range as a tuple of ``(start, end)``."""
        return (self.start, self.end)


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def validate_range(start: date, end: date | None) -> None:
    """Fail fast when ``end`` is earlier than ``start``."""

    if end is not None and end < start:
        raise InvalidDateRangeError(f"end date {end} is before start date {start}")


def lookback_window(
    start: date,
    end: date | None = None,
    *,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> DateRange:
    """Return the fetch window for a query.

    The window opens ``lookback_days`` before ``start`` so that at least one
    published observation precedes the anchor even across long weekends. For
    single-date queries the window closes on ``start`` itself.
    """

    if lookback_days < 0:
        raise ValueError("lookback_days must not be negative")
    validate_range(start, end)
    return DateRange(start=start - timedelta(days=lookback_days), end=end or start)


__all__ = [
    "DEFAULT_LOOKBACK_DAYS",
    "DateRange",
    "InvalidDateRangeError",
    "lookback_window",
    "parse_date",
    "validate_range",
]
