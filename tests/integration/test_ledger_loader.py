#!/usr/bin/env python3
"""
Integration tests for ledger CSV loading.

Writes small exports to disk and loads them through pandas into models.
"""

import logging
from datetime import datetime

import pytest

from budgeting.core.money import Money
from budgeting.ledger import RecordKind, find_export, load_records
from budgeting.ledger.models import Budget, Card, Category, Income, PlannedExpense, VariableExpense


@pytest.mark.integration
class TestLoadExpenses:
    """Test loading spent expenses."""

    def test_loads_all_rows(self, expenses_csv):
        """Test every row becomes a VariableExpense in file order."""
        expenses = load_records(expenses_csv, RecordKind.EXPENSES)

        assert [e.description for e in expenses] == ["Starbucks", "Shell Gas Station", "Whole Foods"]
        assert all(isinstance(e, VariableExpense) for e in expenses)

    def test_parses_fields(self, expenses_csv):
        """Test amounts, dates and optional names."""
        starbucks = load_records(expenses_csv, RecordKind.EXPENSES)[0]

        assert starbucks.amount == Money.from_cents(1233)
        assert starbucks.transaction_date == datetime(2026, 1, 1)
        assert starbucks.category == Category(name="Coffee")
        assert starbucks.card == Card(name="Chase Visa")

    def test_header_case_and_optional_columns(self, temp_dir):
        """Test headers are case-insensitive and optional columns may be absent."""
        csv_file = temp_dir / "expenses.csv"
        csv_file.write_text("Description,Amount,Date\nLibrary Fine,2.50,2026-02-03\n")

        (expense,) = load_records(csv_file, RecordKind.EXPENSES)

        assert expense.description == "Library Fine"
        assert expense.category is None
        assert expense.card is None

    def test_bad_rows_are_skipped_with_warning(self, temp_dir, caplog):
        """Test rows with unparseable values are logged and skipped."""
        csv_file = temp_dir / "expenses.csv"
        csv_file.write_text(
            "description,amount,date\n"
            "Good,1.00,2026-01-01\n"
            "Bad Amount,lots,2026-01-02\n"
            "Bad Date,3.00,someday\n"
            ",4.00,2026-01-04\n"
        )

        with caplog.at_level(logging.WARNING, logger="budgeting.ledger.loader"):
            expenses = load_records(csv_file, RecordKind.EXPENSES)

        assert [e.description for e in expenses] == ["Good"]
        assert "row 3" in caplog.text
        assert "row 4" in caplog.text
        assert "row 5" in caplog.text


@pytest.mark.integration
class TestLoadOtherKinds:
    """Test loading planned expenses, income and budgets."""

    def test_planned_expenses(self, temp_dir):
        """Test the actual amount defaults to zero when blank."""
        csv_file = temp_dir / "planned.csv"
        csv_file.write_text(
            "title,planned_amount,actual_amount,date,category,card\n"
            "Rent,1800.00,1825.50,2026-01-01,Housing,\n"
            "Internet,65.99,,2026-01-15,,Amex Gold\n"
        )

        rent, internet = load_records(csv_file, RecordKind.PLANNED)

        assert isinstance(rent, PlannedExpense)
        assert rent.effective_amount == Money.from_dollars("1825.50")
        assert rent.card is None
        assert internet.actual_amount.is_zero()
        assert internet.effective_amount == Money.from_dollars("65.99")
        assert internet.card == Card(name="Amex Gold")

    def test_income(self, temp_dir):
        """Test the planned flag and card."""
        csv_file = temp_dir / "income.csv"
        csv_file.write_text(
            "source,amount,date,is_planned,card\n"
            "Acme Payroll,2400.00,2026-01-02,false,\n"
            "Quarterly Bonus,500.00,2026-01-30,yes,Checking\n"
        )

        payroll, bonus = load_records(csv_file, RecordKind.INCOME)

        assert isinstance(payroll, Income)
        assert payroll.is_planned is False
        assert bonus.is_planned is True
        assert bonus.card == Card(name="Checking")

    def test_budgets(self, temp_dir):
        """Test budget periods."""
        csv_file = temp_dir / "budgets.csv"
        csv_file.write_text("name,start_date,end_date\nJanuary 2026,2026-01-01,2026-01-31\n")

        (budget,) = load_records(csv_file, RecordKind.BUDGETS)

        assert budget == Budget(name="January 2026", start_date=datetime(2026, 1, 1), end_date=datetime(2026, 1, 31))


@pytest.mark.integration
class TestLoaderErrors:
    """Test loader failure modes."""

    def test_missing_file(self, temp_dir):
        """Test a missing export raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_records(temp_dir / "nope.csv", RecordKind.EXPENSES)

    def test_missing_required_columns(self, temp_dir):
        """Test the missing columns are named in the error."""
        csv_file = temp_dir / "expenses.csv"
        csv_file.write_text("description,category\nStarbucks,Coffee\n")

        with pytest.raises(ValueError, match="amount, date"):
            load_records(csv_file, RecordKind.EXPENSES)


@pytest.mark.integration
def test_find_export_uses_data_dir(tmp_path):
    """Test default export paths live under the configured data directory."""
    assert find_export(RecordKind.BUDGETS) == tmp_path / "budgeting_data" / "exports" / "budgets.csv"
    assert find_export(RecordKind.INCOME, tmp_path) == tmp_path / "income.csv"
