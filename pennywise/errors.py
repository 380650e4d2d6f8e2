"""Mini README: Exception hierarchy shared by the ledger and budget modules.

Every error is recoverable: the operation that raised it has had no
effect, and the caller is expected to report it and ask again. Each
error carries a stable ``code`` so interfaces can map failures without
parsing messages.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict


class PennywiseError(Exception):
    """Base application error with a stable machine-readable code."""

    code = "PENNYWISE_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, str]:
        """Serialise the error for CLI or API responses."""

        return {"error": self.message, "code": self.code}


class ValidationError(PennywiseError, ValueError):
    """Raised when an amount or argument is rejected before any mutation."""

    code = "VALIDATION_ERROR"


class InvalidWeek(ValidationError):
    """Raised when a weekly expense targets a week outside 1-4."""

    code = "INVALID_WEEK"

    def __init__(self, week: object) -> None:
        self.week = week
        super().__init__(f"Invalid week {week!r}; please enter a week between 1 and 4.")


class DuplicateAccount(ValidationError):
    """Raised when registering an account number that is already taken."""

    code = "DUPLICATE_ACCOUNT"

    def __init__(self, account_number: str) -> None:
        self.account_number = account_number
        super().__init__(f"Account {account_number} is already registered.")


class InsufficientFunds(PennywiseError):
    """Raised when a withdrawal or transfer exceeds the available balance."""

    code = "INSUFFICIENT_FUNDS"

    def __init__(self, requested: Decimal, available: Decimal) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient balance: requested {requested}, current balance {available}."
        )


class UnknownAccount(PennywiseError, KeyError):
    """Raised when an account number is not present in the registry."""

    code = "UNKNOWN_ACCOUNT"

    def __init__(self, account_number: str) -> None:
        self.account_number = account_number
        super().__init__(f"Recipient account not found: {account_number}")

    def __str__(self) -> str:
        return self.message
