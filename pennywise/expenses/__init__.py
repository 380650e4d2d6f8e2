"""Mini README: Expense sources that feed the budget tracker.

Groceries and donations are recorded on the owning profile and, through
the attribution functions, counted against that profile's budget.
"""

from .attribution import attribute_donation, attribute_grocery_purchase, reverse_grocery_purchase
from .items import CHARITY_TYPES, PAYMENT_METHODS, Donation, GroceryItem

__all__ = [
    "CHARITY_TYPES",
    "Donation",
    "GroceryItem",
    "PAYMENT_METHODS",
    "attribute_donation",
    "attribute_grocery_purchase",
    "reverse_grocery_purchase",
]
