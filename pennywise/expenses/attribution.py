"""Mini README: Expense attribution policy.

Each expense-generating event maps to exactly one budget recording call
with a signed amount:

    * grocery purchase -> category path, ``+price * quantity``
    * grocery removal  -> category path, ``-price * quantity``
    * donation         -> plain expense path, ``+amount``

The functions hold no state; profiles call them, and tests can exercise
them directly against a bare ``BudgetTracker``.
"""

from __future__ import annotations

from decimal import Decimal

from ..budgeting import BudgetTracker
from ..logging_utils import get_logger
from .items import Donation, GroceryItem

LOGGER = get_logger(__name__)


def attribute_grocery_purchase(tracker: BudgetTracker, item: GroceryItem) -> Decimal:
    """Count a grocery purchase against its category; returns the category total."""

    LOGGER.debug("Attributing grocery %s (%s) %s", item.name, item.category, item.total)
    return tracker.record_category_expense(item.category, item.total)


def reverse_grocery_purchase(tracker: BudgetTracker, item: GroceryItem) -> Decimal:
    """Undo a grocery purchase; returns the category total after reversal."""

    LOGGER.debug("Reversing grocery %s (%s) %s", item.name, item.category, item.total)
    return tracker.record_category_expense(item.category, -item.total)


def attribute_donation(tracker: BudgetTracker, donation: Donation) -> Decimal:
    """Count a donation as an uncategorised expense; returns the running total."""

    LOGGER.debug("Attributing donation to %s %s", donation.charity_name, donation.amount)
    return tracker.record_expense(donation.amount)
