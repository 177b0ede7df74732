"""
Free-Text Search Package

Parses what users type into a list screen's search box and matches records
against it.

Key Components:
- parse_search_query / SearchQueryParser: raw text -> SearchQuery
- DateDetector: recognizes typed dates and where they sit in the text
- matches_text / matches_amount / matches_date / matches_date_range: predicates
- filter_records: per-record field selection for expenses, income and budgets

Example Usage:
    from budgeting.search import filter_records, parse_search_query

    query = parse_search_query("coffee 1/1/26 - 1/7/26")
    hits = filter_records(query, expenses)
"""

from .date_detection import DateDetector, DetectedDate, date_match_looks_complete, detect_dates
from .filters import (
    filter_records,
    matches_budget,
    matches_income,
    matches_planned_expense,
    matches_record,
    matches_variable_expense,
)
from .matchers import matches_amount, matches_date, matches_date_range, matches_text
from .parser import SearchQueryParser, parse_search_query
from .query import SearchQuery

__all__ = [
    "DateDetector",
    "DetectedDate",
    "SearchQuery",
    "SearchQueryParser",
    "date_match_looks_complete",
    "detect_dates",
    "filter_records",
    "matches_amount",
    "matches_budget",
    "matches_date",
    "matches_date_range",
    "matches_income",
    "matches_planned_expense",
    "matches_record",
    "matches_text",
    "matches_variable_expense",
    "parse_search_query",
]
