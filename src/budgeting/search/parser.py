#!/usr/bin/env python3
"""
Search Query Parser

Turns what a user types into a list screen's search box into a SearchQuery:

- complete dates ("1/1/26", "Jan 1, 2026") become a day-aligned date range;
  two dates ("1/1/26 - 1/7/26") become a range between them
- numbers ("33", "12.33", ".33") become digit-only amount terms
- everything else becomes lower-cased text terms

Parsing never fails; input it cannot make sense of yields an empty query.
"""

import logging
import re
from datetime import date

from ..core.config import DateOrder
from ..core.dates import DateRange
from .date_detection import DetectedDate, detect_dates
from .query import SearchQuery

logger = logging.getLogger(__name__)

# Digit runs with an optional decimal part, or a bare fraction like ".33"
AMOUNT_PATTERN = re.compile(r"(?<!\d)(\d+(?:[.,]\d+)?)|(?<!\d)[.,](\d+)")

# A whole token that is just a typed amount, e.g. "12.33" or "$.99"
AMOUNT_LITERAL_PATTERN = re.compile(r"[$€£¥]?(?:\d+(?:[.,]\d+)?|[.,]\d+)")

TEXT_SEPARATOR_PATTERN = re.compile(r"[-–—/,]")


class SearchQueryParser:
    """
    Parser for free-text search queries.

    Args:
        date_order: How ambiguous numeric dates like 1/2/26 are read
        reference_date: Supplies the year for month-name dates typed without
            one; today when not given
    """

    def __init__(self, date_order: DateOrder = DateOrder.MONTH_FIRST, reference_date: date | None = None):
        self.date_order = date_order
        self.reference_date = reference_date

    def parse(self, raw: str) -> SearchQuery:
        """
        Parse a raw search string.

        Args:
            raw: Search box contents, possibly empty

        Returns:
            SearchQuery; empty when nothing was typed
        """
        trimmed = raw.strip()
        if not trimmed:
            return SearchQuery.empty(raw)

        detected = self._detect_dates(trimmed)
        date_range = build_date_range(detected)
        amount_terms = extract_amount_digit_terms(trimmed, detected)
        text_terms = [term for term in extract_text_terms(trimmed, detected) if not _is_amount_token(term)]

        query = SearchQuery(
            raw=raw,
            text_terms=tuple(text_terms),
            amount_digit_terms=tuple(amount_terms),
            date_range=date_range,
        )
        logger.debug(
            "Parsed %r: text=%s amounts=%s range=%s",
            raw,
            query.text_terms,
            query.amount_digit_terms,
            query.date_range,
        )
        return query

    def _detect_dates(self, text: str) -> list[DetectedDate]:
        # Date detection is best-effort: a failure only disables the date filter
        try:
            return detect_dates(text, date_order=self.date_order, reference_date=self.reference_date)
        except Exception as e:
            logger.warning("Date detection failed for %r: %s", text, e)
            return []


def build_date_range(detected: list[DetectedDate]) -> DateRange | None:
    """
    Build the query's date range from detected dates.

    One date covers that whole day. Two or more dates cover the whole days
    between the first two (in text order), whichever is earlier; further dates
    are ignored.

    Args:
        detected: Complete dates sorted by position

    Returns:
        DateRange or None when no dates were detected
    """
    if not detected:
        return None
    if len(detected) >= 2:
        return DateRange.spanning(detected[0].date, detected[1].date)
    return DateRange.for_day(detected[0].date)


def extract_amount_digit_terms(text: str, excluded: list[DetectedDate]) -> list[str]:
    """
    Pull digit-only amount terms out of search text.

    Numbers that overlap a detected date are skipped. Separators are dropped so
    "12.33" becomes "1233" and ".33" becomes "33". Duplicates are removed,
    keeping first-seen order.

    Args:
        text: Trimmed search text
        excluded: Dates whose characters must not produce amount terms

    Returns:
        Ordered unique digit strings
    """
    terms: list[str] = []

    for match in AMOUNT_PATTERN.finditer(text):
        if any(d.intersects(match.span()) for d in excluded):
            continue

        token = match.group(1) or match.group(2)
        if not token:
            continue

        digits = "".join(ch for ch in token if ch.isdigit())
        if digits and digits not in terms:
            terms.append(digits)

    return terms


def extract_text_terms(text: str, excluded: list[DetectedDate]) -> list[str]:
    """
    Split search text into lower-cased tokens with detected dates blanked out.

    Tokens split on whitespace and on "-", en/em dashes, "/" and ",".

    Args:
        text: Trimmed search text
        excluded: Dates whose characters are replaced by spaces first

    Returns:
        Non-empty lower-cased tokens in input order
    """
    chars = list(text)
    for detected in excluded:
        for i in range(detected.start, min(detected.end, len(chars))):
            chars[i] = " "

    cleaned = TEXT_SEPARATOR_PATTERN.sub(" ", "".join(chars))
    return [token.strip().lower() for token in cleaned.split() if token.strip()]


def _is_amount_token(token: str) -> bool:
    # "33" and "12.33" were already captured as amount terms; "2nd" stays text
    return token.isdigit() or AMOUNT_LITERAL_PATTERN.fullmatch(token) is not None


_default_parser = SearchQueryParser()


def parse_search_query(
    raw: str,
    date_order: DateOrder | None = None,
    reference_date: date | None = None,
) -> SearchQuery:
    """
    Parse a raw search string into a SearchQuery.

    Example:
        >>> query = parse_search_query("coffee 12.33")
        >>> query.text_terms
        ('coffee',)
        >>> query.amount_digit_terms
        ('1233',)
    """
    if date_order is None and reference_date is None:
        return _default_parser.parse(raw)
    parser = SearchQueryParser(date_order=date_order or DateOrder.MONTH_FIRST, reference_date=reference_date)
    return parser.parse(raw)
