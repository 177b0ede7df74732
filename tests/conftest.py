"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from budgeting.core import config as config_module
from budgeting.core.money import Money
from budgeting.ledger.models import Budget, Card, Category, Income, PlannedExpense, VariableExpense


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_expenses() -> list[VariableExpense]:
    """Spent expenses across early January 2026."""
    visa = Card(name="Chase Visa")
    amex = Card(name="Amex Gold")
    return [
        VariableExpense(
            description="Starbucks",
            amount=Money.from_dollars("12.33"),
            transaction_date=datetime(2026, 1, 1, 8, 15),
            category=Category(name="Coffee"),
            card=visa,
        ),
        VariableExpense(
            description="Shell Gas Station",
            amount=Money.from_dollars("50.00"),
            transaction_date=datetime(2026, 1, 3, 17, 40),
            category=Category(name="Transportation"),
            card=amex,
        ),
        VariableExpense(
            description="Whole Foods",
            amount=Money.from_dollars("87.19"),
            transaction_date=datetime(2026, 1, 9, 12, 0),
            category=Category(name="Groceries"),
            card=visa,
        ),
    ]


@pytest.fixture
def sample_planned_expenses() -> list[PlannedExpense]:
    """Planned expenses, one with an actual amount recorded."""
    return [
        PlannedExpense(
            title="Rent",
            planned_amount=Money.from_dollars("1800.00"),
            expense_date=datetime(2026, 1, 1),
            actual_amount=Money.from_dollars("1825.50"),
            category=Category(name="Housing"),
        ),
        PlannedExpense(
            title="Internet",
            planned_amount=Money.from_dollars("65.99"),
            expense_date=datetime(2026, 1, 15),
            card=Card(name="Amex Gold"),
        ),
    ]


@pytest.fixture
def sample_income() -> list[Income]:
    """Paychecks and a planned bonus."""
    return [
        Income(source="Acme Payroll", amount=Money.from_dollars("2400.00"), date=datetime(2026, 1, 2)),
        Income(
            source="Quarterly Bonus",
            amount=Money.from_dollars("500.00"),
            date=datetime(2026, 1, 30),
            is_planned=True,
            card=Card(name="Checking"),
        ),
    ]


@pytest.fixture
def sample_budgets() -> list[Budget]:
    """Monthly budgets around the turn of the year."""
    return [
        Budget(name="December 2025", start_date=datetime(2025, 12, 1), end_date=datetime(2025, 12, 31)),
        Budget(name="January 2026", start_date=datetime(2026, 1, 1), end_date=datetime(2026, 1, 31)),
        Budget(name="February 2026", start_date=datetime(2026, 2, 1), end_date=datetime(2026, 2, 28)),
    ]


@pytest.fixture
def expenses_csv(temp_dir) -> Path:
    """An expenses export as written by the app."""
    csv_file = temp_dir / "expenses.csv"
    csv_file.write_text(
        "description,amount,date,category,card\n"
        "Starbucks,$12.33,2026-01-01,Coffee,Chase Visa\n"
        "Shell Gas Station,50.00,2026-01-03,Transportation,Amex Gold\n"
        "Whole Foods,87.19,2026-01-09,Groceries,Chase Visa\n"
    )
    return csv_file


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    monkeypatch.setenv("BUDGETING_ENV", "test")
    monkeypatch.setenv("BUDGETING_DATA_DIR", str(tmp_path / "budgeting_data"))
    monkeypatch.delenv("SEARCH_DATE_ORDER", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "search: Tests for free-text search parsing and matching")
