#!/usr/bin/env python3
"""Tests for date detection in search text."""

from datetime import date

import pytest

from budgeting.core.config import DateOrder
from budgeting.search.date_detection import (
    DateDetector,
    DetectedDate,
    date_match_looks_complete,
    detect_dates,
    expand_two_digit_year,
)


@pytest.mark.search
class TestCompletenessHeuristic:
    """Test which detected dates are specific enough to filter by."""

    @pytest.mark.parametrize(
        "matched,expected",
        [
            ("1/1/26", True),
            ("01-01-2026", True),
            ("2026/01/01", True),
            ("1.1.26", True),
            ("1–1–26", True),
            ("Jan 1, 2026", True),
            ("January 1 26", True),
            ("Jan 1", False),
            ("1/15", False),
            ("1.1.3", False),
            ("today", False),
            ("", False),
            ("   ", False),
        ],
    )
    def test_date_match_looks_complete(self, matched, expected):
        """Test numeric and month-name forms against the heuristic."""
        assert date_match_looks_complete(matched) is expected


@pytest.mark.search
class TestDateDetector:
    """Test the candidate scanner."""

    def setup_method(self):
        """Use a fixed reference date so yearless dates are deterministic."""
        self.detector = DateDetector(reference_date=date(2025, 6, 1))

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1/1/26", date(2026, 1, 1)),
            ("01-02-2026", date(2026, 1, 2)),
            ("2026/01/15", date(2026, 1, 15)),
            ("2026.1.5", date(2026, 1, 5)),
            ("Jan 1, 2026", date(2026, 1, 1)),
            ("january 1 26", date(2026, 1, 1)),
            ("Sept. 3rd 2026", date(2026, 9, 3)),
            ("May 5, 2026", date(2026, 5, 5)),
            ("3rd of March, 26", date(2026, 3, 3)),
            ("15 Feb 2026", date(2026, 2, 15)),
        ],
    )
    def test_recognized_forms(self, text, expected):
        """Test each supported way of typing a date."""
        detected = self.detector.detect(text)

        assert len(detected) == 1
        assert detected[0].date == expected
        assert detected[0].matched_text == text
        assert detected[0].span == (0, len(text))

    def test_partial_dates_use_reference_year(self):
        """Test yearless candidates resolve in the reference year."""
        detected = self.detector.detect("Jan 1 and 3/4")

        assert [d.date for d in detected] == [date(2025, 1, 1), date(2025, 3, 4)]
        assert [d.matched_text for d in detected] == ["Jan 1", "3/4"]

    def test_spans_are_string_offsets(self):
        """Test spans index the scanned text directly."""
        text = "café ☕ 1/7/26"

        detected = self.detector.detect(text)

        assert len(detected) == 1
        start, end = detected[0].span
        assert text[start:end] == "1/7/26"

    def test_results_sorted_by_position(self):
        """Test dates come back in the order they were typed."""
        detected = self.detector.detect("Jan 7, 2026 back to 1/1/26")

        assert [d.date for d in detected] == [date(2026, 1, 7), date(2026, 1, 1)]

    @pytest.mark.parametrize("text", ["12.33", "13/45/26", "2/30/26", "coffee", "1.2.3.4"])
    def test_non_dates(self, text):
        """Test amounts, impossible dates and long chains are not dates."""
        assert self.detector.detect(text) == []

    @pytest.mark.parametrize(
        "date_order,expected",
        [
            (DateOrder.MONTH_FIRST, date(2026, 2, 1)),
            (DateOrder.DAY_FIRST, date(2026, 1, 2)),
            (DateOrder.YEAR_FIRST, date(2026, 2, 1)),
        ],
    )
    def test_ambiguous_numeric_order(self, date_order, expected):
        """Test 2/1/26 is read according to the configured order."""
        detected = DateDetector(date_order=date_order).detect("2/1/26")

        assert detected[0].date == expected

    def test_year_first_ignores_order(self):
        """Test year-first input is always year-month-day."""
        detected = DateDetector(date_order=DateOrder.DAY_FIRST).detect("2026-02-01")

        assert detected[0].date == date(2026, 2, 1)


@pytest.mark.search
class TestDetectDates:
    """Test the filtered detection entry point."""

    def test_partial_candidates_are_dropped(self):
        """Test only complete dates are returned."""
        detected = detect_dates("Jan 1 coffee 1/15 rent 1/1/26")

        assert [d.matched_text for d in detected] == ["1/1/26"]

    def test_no_dates(self):
        """Test plain text yields nothing."""
        assert detect_dates("starbucks 12.33") == []

    def test_intersects(self):
        """Test half-open span intersection."""
        detected = DetectedDate(span=(5, 11), date=date(2026, 1, 1), matched_text="1/1/26")

        assert detected.intersects((4, 6))
        assert detected.intersects((10, 14))
        assert not detected.intersects((0, 5))
        assert not detected.intersects((11, 13))


@pytest.mark.search
@pytest.mark.parametrize("year,expected", [(0, 2000), (26, 2026), (68, 2068), (69, 1969), (99, 1999)])
def test_expand_two_digit_year(year, expected):
    """Test the two-digit year pivot."""
    assert expand_two_digit_year(year) == expected
