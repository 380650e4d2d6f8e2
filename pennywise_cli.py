"""Mini README: Entry point CLI for Pennywise budget reports.

This script exposes a Typer CLI that builds a budget from command-line
options and prints the same report the interactive application shows:
overall position, weekly status and category totals. It configures
logging once and draws defaults from ``PENNYWISE_*`` settings.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import typer

from pennywise import BudgetTracker, Donation, FinanceProfile, GroceryItem, PennywiseError
from pennywise.budgeting import BudgetReport
from pennywise.configuration import get_settings
from pennywise.expenses import CHARITY_TYPES, PAYMENT_METHODS
from pennywise.logging_utils import configure_root_logger
from pennywise.utils import format_amount

cli = typer.Typer(help="Build and inspect Pennywise budgets from the command line.")


def _parse_week(raw: str) -> Tuple[int, str]:
    week, separator, amount = raw.partition("=")
    if not separator:
        raise typer.BadParameter(f"Expected WEEK=AMOUNT, got '{raw}'.", param_hint="--week")
    try:
        return int(week), amount
    except ValueError as error:
        raise typer.BadParameter(f"Week must be a number, got '{week}'.", param_hint="--week") from error


def _parse_grocery(raw: str) -> GroceryItem:
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 4:
        raise typer.BadParameter(
            f"Expected NAME,CATEGORY,PRICE,QUANTITY, got '{raw}'.", param_hint="--grocery"
        )
    name, category, price, quantity = parts
    try:
        return GroceryItem(name, category, price, int(quantity), date.today())
    except (PennywiseError, ValueError) as error:
        raise typer.BadParameter(str(error), param_hint="--grocery") from error


def _render(report: BudgetReport) -> List[str]:
    lines = [
        "=== Budget Report ===",
        f"Monthly Salary: {format_amount(report.monthly_salary)}",
        f"Budget Limit: {format_amount(report.budget_limit)}",
        f"Current Expenses: {format_amount(report.current_expenses)}",
        f"Remaining Budget: {format_amount(report.remaining_budget)}",
    ]
    if report.status == "exceeded":
        lines.append("WARNING: You have exceeded your budget!")
    elif report.status == "near_limit":
        lines.append(f"WARNING: You have used {report.near_limit_ratio:.0%} or more of your budget!")
    lines.append("")
    lines.append("=== Weekly Budget Status ===")
    for status in report.weeks:
        lines.append(
            f"Week {status.week}: Budget: {format_amount(status.allocation)}"
            f" | Spent: {format_amount(status.spent)}"
            f" | Remaining: {format_amount(status.remaining)}"
        )
    if report.categories:
        lines.append("")
        lines.append("=== Category-wise Expenses ===")
        for name, total in report.categories.items():
            lines.append(f"{name:<15}: {format_amount(total)}")
    return lines


@cli.command("budget-report")
def budget_report(
    salary: str = typer.Option("0", help="Monthly salary."),
    limit: str = typer.Option("0", help="Monthly budget limit."),
    week: Optional[List[str]] = typer.Option(None, help="Weekly expense as WEEK=AMOUNT; repeatable."),
    grocery: Optional[List[str]] = typer.Option(
        None, help="Grocery purchase as NAME,CATEGORY,PRICE,QUANTITY; repeatable."
    ),
    donation: Optional[List[str]] = typer.Option(None, help="Donation amount; repeatable."),
    near_limit_ratio: Optional[float] = typer.Option(
        None, help="Override the near-limit ratio (defaults to settings)."
    ),
) -> None:
    """Print a budget report built from the supplied figures."""

    configure_root_logger(get_settings().log_level)
    try:
        tracker = BudgetTracker(near_limit_ratio=near_limit_ratio)
        profile = FinanceProfile("cli", "CLI-0001", budget=tracker)
        tracker.set_salary_and_limit(salary, limit)
        for raw in week or []:
            number, amount = _parse_week(raw)
            tracker.record_weekly_expense(number, amount)
        for raw in grocery or []:
            profile.add_grocery_item(_parse_grocery(raw))
        for raw in donation or []:
            profile.add_donation(Donation("CLI donation", "Other", raw, date.today()))
    except PennywiseError as error:
        raise typer.BadParameter(error.message) from error

    for line in _render(tracker.build_report()):
        typer.echo(line)


@cli.command("charity-types")
def charity_types() -> None:
    """List supported charity types and payment methods."""

    typer.echo("Charity types: " + ", ".join(CHARITY_TYPES))
    typer.echo("Payment methods: " + ", ".join(PAYMENT_METHODS))


if __name__ == "__main__":
    cli()
