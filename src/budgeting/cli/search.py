#!/usr/bin/env python3
"""
Search CLI - Free-Text Search Commands

Parse search box input and filter exported ledger records with it.
"""

from pathlib import Path

import click

from ..core.json_utils import format_json
from ..ledger.loader import load_records
from ..ledger.models import Budget, Income, LedgerRecord, PlannedExpense, RecordKind, VariableExpense
from ..search.filters import filter_records
from ..search.parser import SearchQueryParser


def _parser_from_context(ctx: click.Context) -> SearchQueryParser:
    config = ctx.obj["config"]
    return SearchQueryParser(date_order=config.search.date_order)


def _describe(record: LedgerRecord) -> str:
    """One-line summary of a record for terminal output."""
    if isinstance(record, VariableExpense):
        labels = [entity.name for entity in (record.category, record.card) if entity]
        suffix = f"  [{', '.join(labels)}]" if labels else ""
        return f"{record.transaction_date:%Y-%m-%d}  {record.amount!s:>12}  {record.description}{suffix}"
    if isinstance(record, PlannedExpense):
        labels = [entity.name for entity in (record.category, record.card) if entity]
        suffix = f"  [{', '.join(labels)}]" if labels else ""
        return f"{record.expense_date:%Y-%m-%d}  {record.effective_amount!s:>12}  {record.title}{suffix}"
    if isinstance(record, Income):
        planned = " (planned)" if record.is_planned else ""
        return f"{record.date:%Y-%m-%d}  {record.amount!s:>12}  {record.source}{planned}"
    if isinstance(record, Budget):
        return f"{record.start_date:%Y-%m-%d} to {record.end_date:%Y-%m-%d}  {record.name}"
    return str(record)


@click.group()
def search() -> None:
    """Free-text search commands."""
    pass


@search.command()
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed query as JSON")
@click.pass_context
def parse(ctx: click.Context, query: str, as_json: bool) -> None:
    """
    Show how a search string is interpreted.

    Examples:
      budgeting search parse "coffee 12.33"
      budgeting search parse "1/1/26 - 1/7/26" --json
    """
    parsed = _parser_from_context(ctx).parse(query)

    if as_json:
        click.echo(format_json(parsed.to_dict()))
        return

    click.echo(f"Query: {parsed.trimmed!r}")
    click.echo(f"  Text terms: {', '.join(parsed.text_terms) or '(none)'}")
    click.echo(f"  Amount terms: {', '.join(parsed.amount_digit_terms) or '(none)'}")
    click.echo(f"  Date range: {parsed.date_range or '(none)'}")


@search.command(name="filter")
@click.argument("csv_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("query")
@click.option(
    "--kind",
    type=click.Choice([kind.value for kind in RecordKind]),
    default=RecordKind.EXPENSES.value,
    help="Kind of records in the file (default: expenses)",
)
@click.option("--json", "as_json", is_flag=True, help="Print matching records as JSON")
@click.pass_context
def filter_command(ctx: click.Context, csv_file: Path, query: str, kind: str, as_json: bool) -> None:
    """
    Filter exported ledger records with a search string.

    Examples:
      budgeting search filter data/exports/expenses.csv "starbucks"
      budgeting search filter planned.csv "rent 1/1/26" --kind planned
      budgeting search filter budgets.csv "jan 15, 2026" --kind budgets
    """
    record_kind = RecordKind(kind)

    try:
        records = load_records(csv_file, record_kind)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    parsed = _parser_from_context(ctx).parse(query)
    matches = filter_records(parsed, records)

    if ctx.obj.get("verbose", False):
        click.echo(f"Loaded {len(records)} {record_kind.value} from {csv_file}")
        click.echo(f"Text terms: {list(parsed.text_terms)}")
        click.echo(f"Amount terms: {list(parsed.amount_digit_terms)}")
        click.echo(f"Date range: {parsed.date_range}")
        click.echo()

    if as_json:
        click.echo(format_json([record.to_dict() for record in matches]))
        return

    for record in matches:
        click.echo(_describe(record))

    click.echo(f"\n{len(matches)} of {len(records)} {record_kind.value} matched")
