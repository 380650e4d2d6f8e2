"""Mini README: Registry mapping account numbers to finance profiles.

Structure:
    * ProfileRegistry - registers profiles, resolves account numbers and
      performs transfers between registered accounts.

Create one registry at the application entry point and pass it to the
components that need lookups.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, Iterator, Tuple

from ..errors import DuplicateAccount, UnknownAccount
from ..finance import LedgerEntry
from ..logging_utils import get_logger
from ..utils.money import AmountLike
from .profile import FinanceProfile

LOGGER = get_logger(__name__)


class ProfileRegistry:
    """Registry of profiles keyed by account number."""

    def __init__(self, profiles: Iterable[FinanceProfile] = ()) -> None:
        self._profiles: Dict[str, FinanceProfile] = {}
        for profile in profiles:
            self.register(profile)

    def register(self, profile: FinanceProfile) -> FinanceProfile:
        """Add ``profile``; account numbers must be unique."""

        identifier = profile.account_number
        if identifier in self._profiles:
            raise DuplicateAccount(identifier)
        LOGGER.debug("Registering profile for account '%s'", identifier)
        self._profiles[identifier] = profile
        return profile

    def open_profile(self, owner_name: str, account_number: str) -> FinanceProfile:
        """Create a profile with a zero balance account and register it."""

        if account_number.strip() in self._profiles:
            raise DuplicateAccount(account_number.strip())
        return self.register(FinanceProfile(owner_name, account_number))

    def get(self, account_number: str) -> FinanceProfile:
        profile = self._profiles.get(str(account_number).strip())
        if profile is None:
            raise UnknownAccount(account_number)
        return profile

    def available_accounts(self) -> Iterable[str]:
        """Return account numbers sorted for display."""

        return sorted(self._profiles.keys())

    def transfer(
        self,
        source_number: str,
        target_number: str,
        amount: AmountLike,
        description: str = "Transfer",
    ) -> Tuple[LedgerEntry, LedgerEntry]:
        """Resolve both account numbers, then move the money."""

        source = self.get(source_number)
        target = self.get(target_number)
        LOGGER.info("Transfer requested %s -> %s", source_number, target_number)
        return source.account.transfer(target.account, amount, description)

    def total_balance(self) -> Decimal:
        """Sum of every registered balance; transfers leave it unchanged."""

        return sum((profile.account.balance for profile in self._profiles.values()), Decimal("0"))

    def __contains__(self, account_number: object) -> bool:
        return isinstance(account_number, str) and account_number.strip() in self._profiles

    def __iter__(self) -> Iterator[FinanceProfile]:
        """Iterate over a snapshot of profiles in registration order."""

        return iter(list(self._profiles.values()))

    def __len__(self) -> int:
        return len(self._profiles)
