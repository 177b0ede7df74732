#!/usr/bin/env python3
"""
Date Detection for Free-Text Search

Finds calendar dates typed into a search box ("1/1/26", "2026-01-01",
"Jan 1, 2026", "3rd March 26") and reports where they sit in the text so the
parser can keep their digits out of amount and text terms.

Detection is two-step:
1. DateDetector.detect() scans for every date-like candidate, including
   partial ones such as "Jan 1" or "1/15".
2. date_match_looks_complete() rejects candidates without a year-like token,
   so "Jan 1" stays available as the text term "jan" and amount term "1".

Spans are Python string offsets (code points) into the scanned text.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date

from ..core.config import DateOrder

logger = logging.getLogger(__name__)

MONTHS: dict[str, int] = {
    "january": 1,
    "jan": 1,
    "february": 2,
    "feb": 2,
    "march": 3,
    "mar": 3,
    "april": 4,
    "apr": 4,
    "may": 5,
    "june": 6,
    "jun": 6,
    "july": 7,
    "jul": 7,
    "august": 8,
    "aug": 8,
    "september": 9,
    "sept": 9,
    "sep": 9,
    "october": 10,
    "oct": 10,
    "november": 11,
    "nov": 11,
    "december": 12,
    "dec": 12,
}

# Longest names first so "june" wins over "jun"
_MONTH = "|".join(sorted(MONTHS, key=len, reverse=True))
_SEP = r"[/.\-–—]"
_ORDINAL = r"(?:st|nd|rd|th)?"
_YEAR = r"(?P<year>\d{4}|\d{2})(?!\d)"

# Numeric candidates must not be glued to a longer digit chain such as 1.2.3.4
_NUMERIC_START = r"(?<!\d)(?<!\d[/.])"
_SAME_SEP_END = r"(?!\d)(?!(?P=sep)\d)"

YEAR_FIRST_PATTERN = re.compile(
    rf"{_NUMERIC_START}(?P<year>\d{{4}})(?P<sep>{_SEP})(?P<first>\d{{1,2}})(?P=sep)(?P<second>\d{{1,2}}){_SAME_SEP_END}"
)
TRAILING_YEAR_PATTERN = re.compile(
    rf"{_NUMERIC_START}(?P<first>\d{{1,2}})(?P<sep>{_SEP})(?P<second>\d{{1,2}})(?P=sep)(?P<year>\d{{4}}|\d{{2}}){_SAME_SEP_END}"
)
PARTIAL_NUMERIC_PATTERN = re.compile(rf"{_NUMERIC_START}(?P<first>\d{{1,2}})/(?P<second>\d{{1,2}})(?!\d)(?![/.]\d)")
MONTH_FIRST_PATTERN = re.compile(
    rf"\b(?P<month>{_MONTH})\.?\s+(?P<day>\d{{1,2}}){_ORDINAL}(?!\d)(?:,?\s+{_YEAR})?\b",
    re.IGNORECASE,
)
DAY_FIRST_PATTERN = re.compile(
    rf"\b(?P<day>\d{{1,2}}){_ORDINAL}\s+(?:of\s+)?(?P<month>{_MONTH})\.?(?:,?\s+{_YEAR})?\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DetectedDate:
    """A date found in search text."""

    span: tuple[int, int]
    date: date
    matched_text: str

    @property
    def start(self) -> int:
        return self.span[0]

    @property
    def end(self) -> int:
        return self.span[1]

    def intersects(self, span: tuple[int, int]) -> bool:
        """Check whether a half-open span shares at least one character with this date."""
        return span[0] < self.end and self.start < span[1]


def expand_two_digit_year(year: int) -> int:
    """
    Expand a two-digit year with the POSIX %y pivot.

    Examples:
        expand_two_digit_year(26) -> 2026
        expand_two_digit_year(99) -> 1999
    """
    return 1900 + year if year >= 69 else 2000 + year


def date_match_looks_complete(matched: str) -> bool:
    """
    Decide whether a detected date is specific enough to filter by.

    Numeric forms need three components with at least one of length 2 or 4
    (1/1/26, 01-01-2026, 2026/01/01). Month-name forms need a final year token
    of 2 or 4 digits (Jan 1 26, January 1, 2026). Anything else, such as
    "Jan 1" or "1/15", is partial.

    Args:
        matched: The matched substring

    Returns:
        True if the match should become a date filter
    """
    s = matched.strip()
    if not s:
        return False

    numeric_parts = [
        part.strip()
        for part in re.split(r"[/\-.]", s.replace("–", "-").replace("—", "-"))
        if part.strip()
    ]
    if len(numeric_parts) >= 3 and any(len(part) in (2, 4) for part in numeric_parts):
        return True

    tokens = s.replace(",", " ").split()
    if not tokens:
        return False

    last = tokens[-1]
    return last.isdigit() and len(last) in (2, 4)


class DateDetector:
    """
    Deterministic recognizer for dates typed into a search box.

    Ambiguous numeric dates ("1/2/26") are read according to ``date_order``;
    year-first input ("2026/01/02") is always year-month-day. Dates without a
    year resolve to ``reference_date``'s year (today when not given).
    """

    def __init__(self, date_order: DateOrder = DateOrder.MONTH_FIRST, reference_date: date | None = None):
        self.date_order = date_order
        self.reference_date = reference_date

    def detect(self, text: str) -> list[DetectedDate]:
        """
        Find every date-like candidate, complete or not.

        Overlapping candidates resolve to the earliest, then longest, match.

        Args:
            text: Text to scan

        Returns:
            Non-overlapping candidates sorted by position
        """
        candidates: list[DetectedDate] = []

        for pattern, resolve in (
            (YEAR_FIRST_PATTERN, self._resolve_year_first),
            (TRAILING_YEAR_PATTERN, self._resolve_numeric),
            (PARTIAL_NUMERIC_PATTERN, self._resolve_numeric),
            (MONTH_FIRST_PATTERN, self._resolve_month_name),
            (DAY_FIRST_PATTERN, self._resolve_month_name),
        ):
            for match in pattern.finditer(text):
                try:
                    resolved = resolve(match)
                except (ValueError, OverflowError):
                    logger.debug("Ignoring impossible date %r", match.group(0))
                    continue
                candidates.append(DetectedDate(span=match.span(), date=resolved, matched_text=match.group(0)))

        candidates.sort(key=lambda d: (d.start, -(d.end - d.start)))

        results: list[DetectedDate] = []
        for candidate in candidates:
            if results and candidate.start < results[-1].end:
                continue
            results.append(candidate)

        return results

    def _reference_year(self) -> int:
        return (self.reference_date or date.today()).year

    def _year(self, match: re.Match) -> int:
        raw_year = match.group("year")
        if raw_year is None:
            return self._reference_year()
        year = int(raw_year)
        return expand_two_digit_year(year) if len(raw_year) == 2 else year

    def _resolve_year_first(self, match: re.Match) -> date:
        return date(int(match.group("year")), int(match.group("first")), int(match.group("second")))

    def _resolve_numeric(self, match: re.Match) -> date:
        first = int(match.group("first"))
        second = int(match.group("second"))
        year = self._year(match) if "year" in match.re.groupindex else self._reference_year()

        if self.date_order == DateOrder.DAY_FIRST:
            return date(year, second, first)
        return date(year, first, second)

    def _resolve_month_name(self, match: re.Match) -> date:
        month = MONTHS[match.group("month").lower()]
        return date(self._year(match), month, int(match.group("day")))


def detect_dates(
    text: str,
    date_order: DateOrder = DateOrder.MONTH_FIRST,
    reference_date: date | None = None,
) -> list[DetectedDate]:
    """
    Find the complete dates in a piece of search text.

    Args:
        text: Text to scan
        date_order: How to read ambiguous numeric dates
        reference_date: Supplies the year for dates typed without one

    Returns:
        Dates that passed date_match_looks_complete(), sorted by position
    """
    detector = DateDetector(date_order=date_order, reference_date=reference_date)
    accepted = []
    for detected in detector.detect(text):
        if date_match_looks_complete(detected.matched_text):
            accepted.append(detected)
        else:
            logger.debug("Ignoring partial date %r", detected.matched_text)
    return accepted
