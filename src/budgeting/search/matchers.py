#!/usr/bin/env python3
"""
Search Matchers

Predicates that test a record's fields against a SearchQuery. Each predicate
returns True when the query has nothing to say about its dimension, so an
unset filter never excludes a record. Callers AND the predicates together.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Union

from ..core.currency import amount_digits
from ..core.money import Money
from .query import SearchQuery

Amount = Union[int, float, Decimal, Money]


def matches_text(query: SearchQuery, fields: Iterable[str | None]) -> bool:
    """
    Check that every text term appears in at least one field.

    Fields are trimmed and lower-cased; missing and blank fields are ignored.
    Terms match as substrings.

    Args:
        query: Parsed search query
        fields: Candidate text fields (name, category, card, ...)

    Returns:
        True if the query has no text terms or all of them are found
    """
    if not query.text_terms:
        return True

    haystacks = [field.strip().lower() for field in fields if field is not None and field.strip()]

    return all(any(term in haystack for haystack in haystacks) for term in query.text_terms)


def matches_amount(query: SearchQuery, amounts: Sequence[Amount]) -> bool:
    """
    Check that every amount term appears in at least one amount's digits.

    Amounts are compared through their digit-only rendering, so "33" matches
    $12.33 and "1233" matches -12.33.

    Args:
        query: Parsed search query
        amounts: Candidate amounts in dollars (or Money)

    Returns:
        True if the query has no amount terms or all of them are found
    """
    if not query.amount_digit_terms:
        return True
    if not amounts:
        return False

    renderings = [_digits(amount) for amount in amounts]

    return all(any(term in digits for digits in renderings) for term in query.amount_digit_terms)


def matches_date(query: SearchQuery, instant: date | datetime) -> bool:
    """Check that an instant falls inside the query's date range (inclusive)."""
    if query.date_range is None:
        return True
    return query.date_range.contains(instant)


def matches_date_range(query: SearchQuery, start: date | datetime, end: date | datetime) -> bool:
    """
    Check that a record's own period overlaps the query's date range.

    The record period is widened to whole days (start of ``start``'s day to
    end of ``end``'s day) before the inclusive overlap test.

    Args:
        query: Parsed search query
        start: First day of the record's period, e.g. a budget start
        end: Last day of the record's period

    Returns:
        True if the query has no date range or the periods overlap
    """
    if query.date_range is None:
        return True
    return query.date_range.overlaps(start, end)


def _digits(amount: Amount) -> str:
    if isinstance(amount, Money):
        return amount.search_digits()
    return amount_digits(amount)
