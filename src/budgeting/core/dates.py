#!/usr/bin/env python3
"""
Day-Aligned Date Ranges

Helpers for normalizing instants to local calendar days and the immutable
inclusive DateRange used by search filters.

All instants are naive local datetimes. Bare dates are read as the start of
that day; timezone-aware datetimes are converted to local time first.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta


def as_local_datetime(value: date | datetime) -> datetime:
    """
    Normalize a date or datetime to a naive local datetime.

    Args:
        value: Date (read as midnight) or datetime (aware values are
            converted to local time)

    Returns:
        Naive datetime in local time
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: date | datetime) -> datetime:
    """Midnight at the start of the value's local day."""
    return datetime.combine(as_local_datetime(value).date(), time.min)


def end_of_day(value: date | datetime) -> datetime:
    """Last second of the value's local day (start of next day minus one second)."""
    return start_of_day(value) + timedelta(days=1, seconds=-1)


@dataclass(frozen=True)
class DateRange:
    """Inclusive closed interval of local instants."""

    start: datetime
    end: datetime

    @classmethod
    def for_day(cls, day: date | datetime) -> "DateRange":
        """The whole local day containing ``day``."""
        return cls(start=start_of_day(day), end=end_of_day(day))

    @classmethod
    def spanning(cls, first: date | datetime, second: date | datetime) -> "DateRange":
        """
        Whole days from the earlier to the later of two dates.

        Args:
            first: One end of the range, in either order
            second: The other end

        Returns:
            DateRange from start of the earlier day to end of the later day
        """
        a = as_local_datetime(first)
        b = as_local_datetime(second)
        return cls(start=start_of_day(min(a, b)), end=end_of_day(max(a, b)))

    def contains(self, instant: date | datetime) -> bool:
        """Check whether an instant lies inside the range (inclusive)."""
        moment = as_local_datetime(instant)
        return self.start <= moment <= self.end

    def overlaps(self, start: date | datetime, end: date | datetime) -> bool:
        """
        Check whether the whole-day span start..end overlaps this range.

        ``start`` is aligned to the start of its day and ``end`` to the end of
        its day before comparing.
        """
        other_start = start_of_day(start)
        other_end = end_of_day(end)
        return other_start <= self.end and other_end >= self.start

    def __contains__(self, instant: date | datetime) -> bool:
        return self.contains(instant)

    def __str__(self) -> str:
        return f"{self.start.isoformat(sep=' ')} .. {self.end.isoformat(sep=' ')}"
