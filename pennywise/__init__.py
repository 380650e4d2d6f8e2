"""Mini README: Core package initializer for Pennywise.

Pennywise tracks a person's money in process memory: an account ledger
with deposits, withdrawals and transfers, a monthly budget tracker with
weekly and category breakdowns, and the grocery and donation records that
feed expenses into that budget. Convenience imports below let callers use
the main types without knowing the exact module structure.
"""

from .budgeting import BudgetReport, BudgetTracker, WeeklyStatus
from .errors import (
    DuplicateAccount,
    InsufficientFunds,
    InvalidWeek,
    PennywiseError,
    UnknownAccount,
    ValidationError,
)
from .expenses import Donation, GroceryItem
from .finance import Account, EntryKind, LedgerEntry
from .logging_utils import get_logger
from .profiles import FinanceProfile, ProfileRegistry

__all__ = [
    "Account",
    "BudgetReport",
    "BudgetTracker",
    "Donation",
    "DuplicateAccount",
    "EntryKind",
    "FinanceProfile",
    "GroceryItem",
    "InsufficientFunds",
    "InvalidWeek",
    "LedgerEntry",
    "PennywiseError",
    "ProfileRegistry",
    "UnknownAccount",
    "ValidationError",
    "WeeklyStatus",
    "get_logger",
]
