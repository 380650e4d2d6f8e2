"""Mini README: Monthly budget tracking for Pennywise.

Exports the ``BudgetTracker`` that accumulates expenses against a limit
with per-category and per-week breakdowns, and the report dataclasses it
produces for display.
"""

from .tracker import WEEKS, BudgetReport, BudgetTracker, WeeklyStatus

__all__ = ["BudgetReport", "BudgetTracker", "WEEKS", "WeeklyStatus"]
