#!/usr/bin/env python3
"""
Ledger Data Models

Records shown on the budgeting app's list screens. Amounts are Money (integer
cents); dates are naive local datetimes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from ..core.money import Money


class RecordKind(Enum):
    """Kinds of records that can be loaded and searched."""

    EXPENSES = "expenses"
    PLANNED = "planned"
    INCOME = "income"
    BUDGETS = "budgets"


@dataclass(frozen=True)
class Card:
    """A payment card or account."""

    name: str


@dataclass(frozen=True)
class Category:
    """A spending category."""

    name: str


@dataclass
class VariableExpense:
    """An expense that has been spent on a card."""

    description: str
    amount: Money
    transaction_date: datetime
    category: Category | None = None
    card: Card | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "description": self.description,
            "amount": str(self.amount),
            "date": self.transaction_date.date().isoformat(),
            "category": self.category.name if self.category else None,
            "card": self.card.name if self.card else None,
        }


@dataclass
class PlannedExpense:
    """An expense planned for a budget, optionally with the actual amount spent."""

    title: str
    planned_amount: Money
    expense_date: datetime
    actual_amount: Money = field(default_factory=Money.zero)
    category: Category | None = None
    card: Card | None = None

    @property
    def effective_amount(self) -> Money:
        """Actual amount once something was spent, otherwise the planned amount."""
        if self.actual_amount.cents > 0:
            return self.actual_amount
        return self.planned_amount

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "title": self.title,
            "planned_amount": str(self.planned_amount),
            "actual_amount": str(self.actual_amount),
            "date": self.expense_date.date().isoformat(),
            "category": self.category.name if self.category else None,
            "card": self.card.name if self.card else None,
        }


@dataclass
class Income:
    """Money received, actual or planned."""

    source: str
    amount: Money
    date: datetime
    is_planned: bool = False
    card: Card | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "source": self.source,
            "amount": str(self.amount),
            "date": self.date.date().isoformat(),
            "is_planned": self.is_planned,
            "card": self.card.name if self.card else None,
        }


@dataclass
class Budget:
    """A named budgeting period."""

    name: str
    start_date: datetime
    end_date: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "name": self.name,
            "start_date": self.start_date.date().isoformat(),
            "end_date": self.end_date.date().isoformat(),
        }


LedgerRecord = VariableExpense | PlannedExpense | Income | Budget
