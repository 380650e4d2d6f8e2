"""Mini README: Profile ownership and lookup.

A ``FinanceProfile`` ties one account and one budget tracker to a person
and applies the expense attribution policy when groceries or donations
are recorded. ``ProfileRegistry`` looks profiles up by account number and
routes transfers between them. The registry is an explicit object owned
by the application entry point, never module-level state.
"""

from .profile import FinanceProfile
from .registry import ProfileRegistry

__all__ = ["FinanceProfile", "ProfileRegistry"]
