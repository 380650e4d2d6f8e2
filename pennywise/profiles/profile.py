"""Mini README: The per-person owner of an account and a budget.

Structure:
    * FinanceProfile - holds the account, budget tracker, grocery items
      and donations of one person, plus derived totals and tax reports.

Adding or removing groceries and adding donations each make exactly one
budget recording call through ``pennywise.expenses.attribution``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from ..budgeting import BudgetTracker
from ..errors import ValidationError
from ..expenses import (
    Donation,
    GroceryItem,
    attribute_donation,
    attribute_grocery_purchase,
    reverse_grocery_purchase,
)
from ..finance import Account
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class FinanceProfile:
    """One person's account, budget and expense records."""

    def __init__(
        self,
        owner_name: str,
        account_number: str,
        *,
        account: Optional[Account] = None,
        budget: Optional[BudgetTracker] = None,
    ) -> None:
        if not owner_name or not owner_name.strip():
            raise ValidationError("Owner name must be a non-empty string.")
        self.owner_name = owner_name.strip()
        self.account = account or Account(account_number)
        if self.account.account_number != str(account_number).strip():
            raise ValidationError(
                f"Account {self.account.account_number} does not match {account_number}."
            )
        self.budget = budget or BudgetTracker()
        self._groceries: List[GroceryItem] = []
        self._donations: List[Donation] = []

    @property
    def account_number(self) -> str:
        return self.account.account_number

    @property
    def grocery_items(self) -> Tuple[GroceryItem, ...]:
        return tuple(self._groceries)

    @property
    def donations(self) -> Tuple[Donation, ...]:
        return tuple(self._donations)

    def add_grocery_item(self, item: GroceryItem) -> GroceryItem:
        """Record a purchase and count ``price * quantity`` against its category."""

        attribute_grocery_purchase(self.budget, item)
        self._groceries.append(item)
        LOGGER.info("Added grocery item %s for %s", item.name, self.account_number)
        return item

    def remove_grocery_item(self, index: int) -> GroceryItem:
        """Remove the item at ``index`` and reverse its budget contribution."""

        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._groceries):
            raise IndexError(f"No grocery item at position {index}")
        item = self._groceries[index]
        reverse_grocery_purchase(self.budget, item)
        del self._groceries[index]
        LOGGER.info("Removed grocery item %s for %s", item.name, self.account_number)
        return item

    def add_donation(self, donation: Donation) -> Donation:
        """Record a donation and count it as a plain expense."""

        attribute_donation(self.budget, donation)
        self._donations.append(donation)
        LOGGER.info("Recorded donation to %s for %s", donation.charity_name, self.account_number)
        return donation

    def grocery_total(self) -> Decimal:
        return sum((item.total for item in self._groceries), Decimal("0"))

    def total_donations(self) -> Decimal:
        return sum((donation.amount for donation in self._donations), Decimal("0"))

    def tax_deductible_donations(self, year: Optional[int] = None) -> Decimal:
        """Sum deductible donations, optionally limited to one calendar year."""

        return sum(
            (donation.amount for donation in self._deductible(year)),
            Decimal("0"),
        )

    def tax_report(self, year: int) -> Dict[str, object]:
        """List the year's deductible donations and their total."""

        donations = self._deductible(year)
        return {
            "year": year,
            "donations": [donation.as_dict() for donation in donations],
            "total": sum((donation.amount for donation in donations), Decimal("0")),
        }

    def _deductible(self, year: Optional[int]) -> List[Donation]:
        return [
            donation
            for donation in self._donations
            if donation.tax_deductible and (year is None or donation.donated_on.year == year)
        ]

    def __repr__(self) -> str:
        return f"FinanceProfile(owner_name={self.owner_name!r}, account_number={self.account_number!r})"
