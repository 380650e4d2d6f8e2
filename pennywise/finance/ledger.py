"""Mini README: In-memory account ledger supporting deposits and transfers.

Structure:
    * EntryKind - closed enum of balance-affecting events.
    * LedgerEntry - frozen dataclass recording one event.
    * Account - owns a balance and its append-only entry sequence.

An account's balance always equals the signed sum of its entries.
Transfers touch two accounts; both locks are taken in a fixed order and
both entries are built before either balance moves, so a failed transfer
leaves no trace on either side.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..configuration import get_settings
from ..errors import InsufficientFunds, ValidationError
from ..logging_utils import get_logger
from ..utils.money import AmountLike, format_amount, to_positive_amount

LOGGER = get_logger(__name__)


class EntryKind(str, Enum):
    """Enumerate the supported ledger entry kinds."""

    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    TRANSFER_OUT = "transfer_out"
    TRANSFER_IN = "transfer_in"

    @property
    def is_credit(self) -> bool:
        """True when the entry increases the owning account's balance."""

        return self in (EntryKind.DEPOSIT, EntryKind.TRANSFER_IN)


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """Represent one balance-affecting event on an account."""

    kind: EntryKind
    amount: Decimal
    description: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    counterparty: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, EntryKind):
            raise ValidationError(f"Entry kind must be an EntryKind, got {self.kind!r}.")
        if not isinstance(self.amount, Decimal) or self.amount <= 0:
            raise ValidationError(f"Entry amount must be a positive Decimal, got {self.amount!r}.")

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance."""

        return self.amount if self.kind.is_credit else -self.amount

    def __str__(self) -> str:
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        return f"[{stamp}] {self.kind.name}: {format_amount(self.amount)} - {self.description}"


@contextmanager
def _locked_pair(first: "Account", second: "Account") -> Iterator[None]:
    """Hold both account locks, always acquired in identity order."""

    ordered = sorted({id(first): first, id(second): second}.items())
    locks = [account._lock for _, account in ordered]
    for lock in locks:
        lock.acquire()
    try:
        yield
    finally:
        for lock in reversed(locks):
            lock.release()


class Account:
    """Own a balance and the ordered history of entries that produced it."""

    def __init__(self, account_number: str, *, allow_self_transfer: Optional[bool] = None) -> None:
        if not account_number or not str(account_number).strip():
            raise ValidationError("Account number must be a non-empty string.")
        self._account_number = str(account_number).strip()
        self._balance = Decimal("0")
        self._entries: List[LedgerEntry] = []
        self._lock = threading.RLock()
        if allow_self_transfer is None:
            allow_self_transfer = get_settings().allow_self_transfer
        self._allow_self_transfer = allow_self_transfer
        LOGGER.debug("Opened account %s", self._account_number)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def entries(self) -> Tuple[LedgerEntry, ...]:
        """Snapshot of the entry history in insertion order."""

        with self._lock:
            return tuple(self._entries)

    def _new_entry(
        self,
        kind: EntryKind,
        amount: Decimal,
        description: str,
        counterparty: Optional[str] = None,
    ) -> LedgerEntry:
        """Build an entry destined for this account without recording it."""

        return LedgerEntry(
            kind=kind,
            amount=amount,
            description=str(description),
            counterparty=counterparty,
        )

    def _require_funds(self, amount: Decimal) -> None:
        if amount > self._balance:
            raise InsufficientFunds(requested=amount, available=self._balance)

    def deposit(self, amount: AmountLike, description: str = "Deposit") -> LedgerEntry:
        """Credit the account, rejecting non-positive amounts."""

        value = to_positive_amount(amount)
        with self._lock:
            entry = self._new_entry(EntryKind.DEPOSIT, value, description)
            self._entries.append(entry)
            self._balance += value
        LOGGER.debug("Deposited %s into %s", value, self._account_number)
        return entry

    def withdraw(self, amount: AmountLike, description: str = "Withdrawal") -> LedgerEntry:
        """Debit the account when the balance covers the amount."""

        value = to_positive_amount(amount)
        with self._lock:
            self._require_funds(value)
            entry = self._new_entry(EntryKind.WITHDRAW, value, description)
            self._entries.append(entry)
            self._balance -= value
        LOGGER.debug("Withdrew %s from %s", value, self._account_number)
        return entry

    def transfer(
        self,
        target: "Account",
        amount: AmountLike,
        description: str = "Transfer",
    ) -> Tuple[LedgerEntry, LedgerEntry]:
        """Move money to ``target`` as a single all-or-nothing unit.

        Returns the outgoing entry recorded here and the incoming entry
        recorded on ``target``. ``InsufficientFunds`` follows the withdraw
        rule. Self transfers are refused unless explicitly allowed.
        """

        if not isinstance(target, Account):
            raise ValidationError(f"Transfer target must be an Account, got {type(target).__name__}.")
        value = to_positive_amount(amount)
        if target is self and not self._allow_self_transfer:
            raise ValidationError(f"Account {self._account_number} cannot transfer to itself.")

        with _locked_pair(self, target):
            self._require_funds(value)
            outgoing = self._new_entry(
                EntryKind.TRANSFER_OUT,
                value,
                f"{description} to {target.account_number}",
                counterparty=target.account_number,
            )
            incoming = target._new_entry(
                EntryKind.TRANSFER_IN,
                value,
                f"{description} from {self._account_number}",
                counterparty=self._account_number,
            )
            self._entries.append(outgoing)
            target._entries.append(incoming)
            self._balance -= value
            target._balance += value
        LOGGER.info(
            "Transferred %s from %s to %s", value, self._account_number, target.account_number
        )
        return outgoing, incoming

    def reconciled_balance(self) -> Decimal:
        """Recompute the balance from the signed sum of all entries."""

        with self._lock:
            return sum((entry.signed_amount for entry in self._entries), Decimal("0"))

    def history(self) -> List[str]:
        """Return rendered history lines, oldest first."""

        return [str(entry) for entry in self.entries]

    def __repr__(self) -> str:
        return f"Account(account_number={self._account_number!r}, balance={self.balance})"
