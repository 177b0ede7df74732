#!/usr/bin/env python3
"""
Record Search Filters

Field selection for each list screen's search box: which record fields count
as text, which as amounts, and which as the date.

| Record          | Text                             | Amounts                     | Date              |
|-----------------|----------------------------------|-----------------------------|-------------------|
| VariableExpense | description, category, card      | amount                      | transaction date  |
| PlannedExpense  | title, category, card            | planned, actual, effective  | expense date      |
| Income          | source, card                     | amount                      | date              |
| Budget          | name                             | -                           | start..end period |
"""

from collections.abc import Iterable
from typing import TypeVar

from ..ledger.models import Budget, Income, LedgerRecord, PlannedExpense, VariableExpense
from .matchers import matches_amount, matches_date, matches_date_range, matches_text
from .parser import parse_search_query
from .query import SearchQuery

RecordT = TypeVar("RecordT", VariableExpense, PlannedExpense, Income, Budget)


def _name(entity) -> str | None:
    return entity.name if entity is not None else None


def matches_variable_expense(query: SearchQuery, expense: VariableExpense) -> bool:
    """Check a spent expense against the query."""
    if query.is_empty:
        return True
    return (
        matches_date(query, expense.transaction_date)
        and matches_text(query, [expense.description, _name(expense.category), _name(expense.card)])
        and matches_amount(query, [expense.amount])
    )


def matches_planned_expense(query: SearchQuery, expense: PlannedExpense) -> bool:
    """Check a planned expense against the query."""
    if query.is_empty:
        return True
    return (
        matches_date(query, expense.expense_date)
        and matches_text(query, [expense.title, _name(expense.category), _name(expense.card)])
        and matches_amount(query, [expense.planned_amount, expense.actual_amount, expense.effective_amount])
    )


def matches_income(query: SearchQuery, income: Income) -> bool:
    """Check an income entry against the query."""
    if query.is_empty:
        return True
    return (
        matches_date(query, income.date)
        and matches_text(query, [income.source, _name(income.card)])
        and matches_amount(query, [income.amount])
    )


def matches_budget(query: SearchQuery, budget: Budget) -> bool:
    """
    Check a budget against the query.

    Budgets have no amount of their own, so only text and the budget period
    are considered; a date query matches any budget whose period overlaps it.
    """
    if query.is_empty:
        return True
    return matches_text(query, [budget.name]) and matches_date_range(query, budget.start_date, budget.end_date)


def matches_record(query: SearchQuery, record: LedgerRecord) -> bool:
    """
    Check any ledger record against the query.

    Raises:
        TypeError: If the record is not a known ledger type
    """
    if isinstance(record, VariableExpense):
        return matches_variable_expense(query, record)
    if isinstance(record, PlannedExpense):
        return matches_planned_expense(query, record)
    if isinstance(record, Income):
        return matches_income(query, record)
    if isinstance(record, Budget):
        return matches_budget(query, record)
    raise TypeError(f"Cannot search records of type {type(record).__name__}")


def filter_records(query: SearchQuery | str, records: Iterable[RecordT]) -> list[RecordT]:
    """
    Keep the records that match a search query, in input order.

    Args:
        query: Parsed query or raw search text
        records: Ledger records of any supported type

    Returns:
        Matching records; all records when the query is empty
    """
    if isinstance(query, str):
        query = parse_search_query(query)

    records = list(records)
    if query.is_empty:
        return records

    return [record for record in records if matches_record(query, record)]
