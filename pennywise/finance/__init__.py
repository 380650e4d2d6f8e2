"""Mini README: Account ledger utilities for Pennywise.

This package groups the balance engine: an enumeration of entry kinds,
the immutable ledger entry record and the ``Account`` that owns a balance
plus its append-only entry history. Deposits, withdrawals and transfers
are the only ways a balance changes, and every change leaves exactly one
entry per affected account.
"""

from .ledger import Account, EntryKind, LedgerEntry

__all__ = ["Account", "EntryKind", "LedgerEntry"]
