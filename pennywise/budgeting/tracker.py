"""Mini README: Budget tracker with weekly and category breakdowns.

Structure:
    * WeeklyStatus - allocation, spend and remainder for one week.
    * BudgetReport - snapshot of the whole budget for display.
    * BudgetTracker - owns salary, limit and the running expense totals.

``current_expenses`` is the sum of every amount recorded since the last
reset. The category map and the weekly map are two independent routes
into that same total, so an expense recorded through one route does not
appear in the other. Weekly allocations are never stored: they are
derived from the current limit each time they are requested.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from ..configuration import get_settings
from ..errors import InvalidWeek, ValidationError
from ..logging_utils import get_logger
from ..utils.money import AmountLike, to_amount

LOGGER = get_logger(__name__)

WEEKS = (1, 2, 3, 4)
_ZERO = Decimal("0")


@dataclass(slots=True)
class WeeklyStatus:
    """Budget position for a single week of the period."""

    week: int
    allocation: Decimal
    spent: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.allocation - self.spent


@dataclass(slots=True)
class BudgetReport:
    """Point-in-time view of a tracker used by reports and the CLI."""

    monthly_salary: Decimal
    budget_limit: Decimal
    current_expenses: Decimal
    remaining_budget: Decimal
    exceeded: bool
    near_limit: bool
    near_limit_ratio: Decimal
    weeks: List[WeeklyStatus] = field(default_factory=list)
    categories: Dict[str, Decimal] = field(default_factory=dict)

    @property
    def status(self) -> str:
        """Headline label; exceeded takes precedence over near_limit."""

        if self.exceeded:
            return "exceeded"
        if self.near_limit:
            return "near_limit"
        return "ok"

    def as_dict(self) -> Dict[str, object]:
        """Export the report with serialisable values."""

        return {
            "monthly_salary": str(self.monthly_salary),
            "budget_limit": str(self.budget_limit),
            "current_expenses": str(self.current_expenses),
            "remaining_budget": str(self.remaining_budget),
            "status": self.status,
            "weeks": [
                {
                    "week": status.week,
                    "allocation": str(status.allocation),
                    "spent": str(status.spent),
                    "remaining": str(status.remaining),
                }
                for status in self.weeks
            ],
            "categories": {name: str(total) for name, total in self.categories.items()},
        }


class BudgetTracker:
    """Accumulate expenses against a monthly limit."""

    def __init__(self, *, near_limit_ratio: Optional[AmountLike] = None) -> None:
        if near_limit_ratio is None:
            near_limit_ratio = get_settings().near_limit_ratio
        ratio = to_amount(near_limit_ratio, field="near_limit_ratio")
        if not _ZERO <= ratio <= 1:
            raise ValidationError(f"near_limit_ratio must be between 0 and 1, got {ratio}.")
        self._near_limit_ratio = ratio
        self._lock = threading.RLock()
        self._monthly_salary = _ZERO
        self._budget_limit = _ZERO
        self._current_expenses = _ZERO
        self._category_expenses: Dict[str, Decimal] = {}
        self._weekly_expenses: Dict[int, Decimal] = {week: _ZERO for week in WEEKS}

    @property
    def monthly_salary(self) -> Decimal:
        return self._monthly_salary

    @property
    def budget_limit(self) -> Decimal:
        return self._budget_limit

    @property
    def current_expenses(self) -> Decimal:
        return self._current_expenses

    @property
    def near_limit_ratio(self) -> Decimal:
        return self._near_limit_ratio

    @property
    def category_expenses(self) -> Dict[str, Decimal]:
        with self._lock:
            return dict(self._category_expenses)

    @property
    def weekly_expenses(self) -> Dict[int, Decimal]:
        with self._lock:
            return dict(self._weekly_expenses)

    def set_salary_and_limit(self, salary: AmountLike, limit: AmountLike) -> None:
        """Set salary and limit as given; negative values are kept but logged."""

        salary_value = to_amount(salary, field="salary")
        limit_value = to_amount(limit, field="limit")
        if salary_value < 0 or limit_value < 0:
            LOGGER.warning(
                "Accepting negative budget figures salary=%s limit=%s", salary_value, limit_value
            )
        with self._lock:
            self._monthly_salary = salary_value
            self._budget_limit = limit_value
        LOGGER.debug("Budget set salary=%s limit=%s", salary_value, limit_value)

    def record_expense(self, amount: AmountLike) -> Decimal:
        """Add ``amount`` (negative for reversals) to the running total."""

        value = to_amount(amount)
        with self._lock:
            self._current_expenses += value
            total = self._current_expenses
        LOGGER.debug("Recorded expense %s; total now %s", value, total)
        return total

    def record_category_expense(self, category: str, amount: AmountLike) -> Decimal:
        """Add ``amount`` to ``category`` and to the running total."""

        if not isinstance(category, str) or not category:
            raise ValidationError("Category must be a non-empty string.")
        value = to_amount(amount)
        with self._lock:
            category_total = self._category_expenses.get(category, _ZERO) + value
            self._category_expenses[category] = category_total
            self.record_expense(value)
        if category_total < 0:
            LOGGER.warning("Category %s total dropped below zero: %s", category, category_total)
        return category_total

    def record_weekly_expense(self, week: int, amount: AmountLike) -> Decimal:
        """Add ``amount`` to ``week`` (1-4) and to the running total."""

        if isinstance(week, bool) or not isinstance(week, int) or week not in WEEKS:
            raise InvalidWeek(week)
        value = to_amount(amount)
        with self._lock:
            week_total = self._weekly_expenses[week] + value
            self._weekly_expenses[week] = week_total
            self.record_expense(value)
        return week_total

    def weekly_allocation(self) -> Dict[int, Decimal]:
        """Split the current limit evenly across the four weeks."""

        share = self._budget_limit / len(WEEKS)
        return {week: share for week in WEEKS}

    def remaining_budget(self) -> Decimal:
        with self._lock:
            return self._budget_limit - self._current_expenses

    def is_exceeded(self) -> bool:
        with self._lock:
            return self._current_expenses > self._budget_limit

    def is_near_limit(self) -> bool:
        with self._lock:
            return self._current_expenses >= self._budget_limit * self._near_limit_ratio

    def reset(self) -> None:
        """Zero every total and re-seed the four weeks."""

        with self._lock:
            self._current_expenses = _ZERO
            self._category_expenses.clear()
            self._weekly_expenses = {week: _ZERO for week in WEEKS}
        LOGGER.info("Budget expenses reset")

    def build_report(self) -> BudgetReport:
        """Capture the salary, limit, weekly status and category totals."""

        with self._lock:
            allocation = self.weekly_allocation()
            return BudgetReport(
                monthly_salary=self._monthly_salary,
                budget_limit=self._budget_limit,
                current_expenses=self._current_expenses,
                remaining_budget=self.remaining_budget(),
                exceeded=self.is_exceeded(),
                near_limit=self.is_near_limit(),
                near_limit_ratio=self._near_limit_ratio,
                weeks=[
                    WeeklyStatus(week=week, allocation=allocation[week], spent=self._weekly_expenses[week])
                    for week in WEEKS
                ],
                categories=dict(self._category_expenses),
            )
