"""
Ledger Package

Expense, income and budget records plus the CSV loader used to search them.
"""

from .loader import find_export, load_records
from .models import (
    Budget,
    Card,
    Category,
    Income,
    LedgerRecord,
    PlannedExpense,
    RecordKind,
    VariableExpense,
)

__all__ = [
    "Budget",
    "Card",
    "Category",
    "Income",
    "LedgerRecord",
    "PlannedExpense",
    "RecordKind",
    "VariableExpense",
    "find_export",
    "load_records",
]
