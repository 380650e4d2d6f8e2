"""Mini README: Grocery item and donation records.

Structure:
    * GroceryItem - a purchased item with a per-unit price and quantity.
    * Donation - a gift to a charity, optionally tax deductible.
    * CHARITY_TYPES / PAYMENT_METHODS - labels offered to users.

Both records validate and coerce their money fields on creation so that
the attribution layer only ever sees well-formed ``Decimal`` amounts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Optional

from ..errors import ValidationError
from ..utils.money import format_amount, to_amount, to_positive_amount

CHARITY_TYPES = (
    "Education",
    "Health",
    "Environment",
    "Animal Welfare",
    "Human Rights",
    "Disaster Relief",
    "Religious",
    "Other",
)

PAYMENT_METHODS = (
    "Credit Card",
    "Debit Card",
    "Bank Transfer",
    "Cash",
    "Check",
    "Online Payment",
)


def _require_date(value: object, field: str) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as error:
            raise ValidationError(f"{field} must be an ISO date, got {value!r}.") from error
    raise ValidationError(f"{field} must be a date or ISO string.")


@dataclass(frozen=True, slots=True)
class GroceryItem:
    """A grocery purchase counted against its category."""

    name: str
    category: str
    price: Decimal
    quantity: int
    purchased_on: date

    def __post_init__(self) -> None:
        price = to_amount(self.price, field="price")
        if price < 0:
            raise ValidationError(f"price cannot be negative, got {price}.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValidationError(f"quantity must be a positive integer, got {self.quantity!r}.")
        if not self.category:
            raise ValidationError("category is required.")
        object.__setattr__(self, "price", price)
        object.__setattr__(self, "purchased_on", _require_date(self.purchased_on, "purchased_on"))

    @property
    def total(self) -> Decimal:
        return self.price * self.quantity

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.category}) - {format_amount(self.price)} x {self.quantity}"
            f" = {format_amount(self.total)} on {self.purchased_on.isoformat()}"
        )


@dataclass(frozen=True, slots=True)
class Donation:
    """A charitable gift; the amount is counted as a plain expense."""

    charity_name: str
    charity_type: str
    amount: Decimal
    donated_on: date
    payment_method: str = "Cash"
    tax_deductible: bool = False
    receipt_id: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_positive_amount(self.amount))
        object.__setattr__(self, "donated_on", _require_date(self.donated_on, "donated_on"))

    def as_dict(self) -> Dict[str, object]:
        return {
            "charity_name": self.charity_name,
            "charity_type": self.charity_type,
            "amount": str(self.amount),
            "donated_on": self.donated_on.isoformat(),
            "payment_method": self.payment_method,
            "tax_deductible": self.tax_deductible,
            "receipt_id": self.receipt_id,
            "description": self.description,
        }
