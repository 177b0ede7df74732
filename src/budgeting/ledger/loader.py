#!/usr/bin/env python3
"""
Ledger CSV Loader

Loads exported ledger CSV files into domain models for searching.

Functions:
- find_export: Locate the default export file for a record kind
- load_records: Load a CSV file as VariableExpense/PlannedExpense/Income/Budget models

Expected columns (header names are case-insensitive):
- expenses: description, amount, date [, category, card]
- planned:  title, planned_amount, date [, actual_amount, category, card]
- income:   source, amount, date [, card, is_planned]
- budgets:  name, start_date, end_date
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from ..core.config import get_data_dir
from ..core.dates import as_local_datetime
from ..core.money import Money
from .models import Budget, Card, Category, Income, LedgerRecord, PlannedExpense, RecordKind, VariableExpense

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: dict[RecordKind, tuple[str, ...]] = {
    RecordKind.EXPENSES: ("description", "amount", "date"),
    RecordKind.PLANNED: ("title", "planned_amount", "date"),
    RecordKind.INCOME: ("source", "amount", "date"),
    RecordKind.BUDGETS: ("name", "start_date", "end_date"),
}


def find_export(kind: RecordKind, data_dir: str | Path | None = None) -> Path:
    """
    Locate the default export file for a record kind.

    Args:
        kind: Record kind to find
        data_dir: Directory holding exports. If None, uses config.data_dir/exports

    Returns:
        Path to <data_dir>/<kind>.csv (which may not exist)
    """
    base = Path(data_dir) if data_dir is not None else get_data_dir() / "exports"
    return base / f"{kind.value}.csv"


def load_records(path: str | Path, kind: RecordKind) -> list[LedgerRecord]:
    """
    Load ledger records from a CSV file.

    Rows whose amounts or dates cannot be parsed are skipped with a warning.

    Args:
        path: CSV file to load
        kind: Kind of records the file contains

    Returns:
        Records in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If required columns are missing

    Example:
        >>> expenses = load_records("data/exports/expenses.csv", RecordKind.EXPENSES)
        >>> for expense in expenses:
        ...     print(f"{expense.description}: {expense.amount}")
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Ledger export not found: {path}")

    # Read everything as text; amounts like "$1,234.56" are parsed by Money
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(column).strip().lower() for column in df.columns]

    missing = [column for column in REQUIRED_COLUMNS[kind] if column not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing required columns for {kind.value}: {', '.join(missing)}")

    build = _BUILDERS[kind]
    records: list[LedgerRecord] = []

    for index, row in enumerate(df.to_dict(orient="records"), start=2):
        try:
            records.append(build(row))
        except (ValueError, TypeError) as e:
            logger.warning("Skipping %s row %d in %s: %s", kind.value, index, path.name, e)

    logger.debug("Loaded %d %s from %s", len(records), kind.value, path)
    return records


def _text(row: dict[str, Any], column: str) -> str | None:
    value = row.get(column)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _required_text(row: dict[str, Any], column: str) -> str:
    value = _text(row, column)
    if value is None:
        raise ValueError(f"missing {column}")
    return value


def _money(row: dict[str, Any], column: str, default: Money | None = None) -> Money:
    value = _text(row, column)
    if value is None:
        if default is not None:
            return default
        raise ValueError(f"missing {column}")
    return Money.from_dollars(value)


def _datetime(row: dict[str, Any], column: str) -> datetime:
    value = _required_text(row, column)
    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        raise ValueError(f"unparseable {column}: {value!r}")
    return as_local_datetime(parsed.to_pydatetime())


def _card(row: dict[str, Any]) -> Card | None:
    name = _text(row, "card")
    return Card(name=name) if name else None


def _category(row: dict[str, Any]) -> Category | None:
    name = _text(row, "category")
    return Category(name=name) if name else None


def _build_expense(row: dict[str, Any]) -> VariableExpense:
    return VariableExpense(
        description=_required_text(row, "description"),
        amount=_money(row, "amount"),
        transaction_date=_datetime(row, "date"),
        category=_category(row),
        card=_card(row),
    )


def _build_planned(row: dict[str, Any]) -> PlannedExpense:
    return PlannedExpense(
        title=_required_text(row, "title"),
        planned_amount=_money(row, "planned_amount"),
        expense_date=_datetime(row, "date"),
        actual_amount=_money(row, "actual_amount", default=Money.zero()),
        category=_category(row),
        card=_card(row),
    )


def _build_income(row: dict[str, Any]) -> Income:
    return Income(
        source=_required_text(row, "source"),
        amount=_money(row, "amount"),
        date=_datetime(row, "date"),
        is_planned=(_text(row, "is_planned") or "false").lower() in ("true", "yes", "1"),
        card=_card(row),
    )


def _build_budget(row: dict[str, Any]) -> Budget:
    return Budget(
        name=_required_text(row, "name"),
        start_date=_datetime(row, "start_date"),
        end_date=_datetime(row, "end_date"),
    )


_BUILDERS: dict[RecordKind, Callable[[dict[str, Any]], LedgerRecord]] = {
    RecordKind.EXPENSES: _build_expense,
    RecordKind.PLANNED: _build_planned,
    RecordKind.INCOME: _build_income,
    RecordKind.BUDGETS: _build_budget,
}
