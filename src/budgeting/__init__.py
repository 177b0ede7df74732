"""
Offshore Budgeting - Search and Ledger Tools

Free-text search over expenses, planned expenses, income and budgets, as used
by the budgeting app's list screens.

Key Features:
- Search box parsing into text, amount and date filters
- "1/1/26 - 1/7/26" style date ranges and "33" style amount matching
- CSV ledger loading and a command-line search front end

Domain Packages:
- core: Currency handling, date ranges, configuration
- ledger: Record models and CSV loader
- search: Query parser, matchers and record filters
- cli: Command-line interface

Example Usage:
    from budgeting.search import parse_search_query, matches_amount

    query = parse_search_query("coffee 12.33")
    matches_amount(query, [12.33])  # True
"""

__version__ = "0.1.0"
__author__ = "Offshore Budgeting"

from .core.config import Environment, get_config
from .core.money import Money
from .search import (
    SearchQuery,
    filter_records,
    matches_amount,
    matches_date,
    matches_date_range,
    matches_text,
    parse_search_query,
)

__all__ = [
    "Environment",
    "Money",
    "SearchQuery",
    "filter_records",
    "get_config",
    "matches_amount",
    "matches_date",
    "matches_date_range",
    "matches_text",
    "parse_search_query",
]
