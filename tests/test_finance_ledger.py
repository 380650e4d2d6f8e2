"""Mini README: Tests covering account deposits, withdrawals and transfers.

Structure:
    * deposit/withdraw tests - entries, balances and rejected amounts.
    * transfer tests - descriptions, atomicity and self-transfer policy.
    * test_balance_matches_entries_for_random_sequences - seeded sequences
      checking the balance equals the signed sum of entries.
"""

from __future__ import annotations

import random
from decimal import Decimal

import pytest

from pennywise.errors import InsufficientFunds, ValidationError
from pennywise.finance import Account, EntryKind, LedgerEntry


def test_deposit_appends_entry_and_increases_balance() -> None:
    """A deposit should credit the balance and leave one DEPOSIT entry."""

    account = Account("ACC-1")
    entry = account.deposit("100.50", "Salary")

    assert account.balance == Decimal("100.50")
    assert account.entries == (entry,)
    assert entry.kind is EntryKind.DEPOSIT
    assert entry.description == "Salary"
    assert entry.signed_amount == Decimal("100.50")


@pytest.mark.parametrize("amount", [0, -5, "-0.01", Decimal("0")])
def test_non_positive_amounts_are_rejected(amount) -> None:
    """Deposits, withdrawals and transfers refuse zero or negative amounts."""

    account = Account("ACC-1")
    other = Account("ACC-2")
    account.deposit(50)

    with pytest.raises(ValidationError):
        account.deposit(amount)
    with pytest.raises(ValidationError):
        account.withdraw(amount)
    with pytest.raises(ValidationError):
        account.transfer(other, amount)

    assert account.balance == Decimal("50")
    assert len(account.entries) == 1
    assert other.entries == ()


def test_withdraw_more_than_balance_fails_without_effect() -> None:
    """Balance 100, withdraw 150: rejected and the balance stays 100."""

    account = Account("ACC-1")
    account.deposit(100)

    with pytest.raises(InsufficientFunds) as excinfo:
        account.withdraw(150)

    assert excinfo.value.requested == Decimal("150")
    assert excinfo.value.available == Decimal("100")
    assert account.balance == Decimal("100")
    assert [entry.kind for entry in account.entries] == [EntryKind.DEPOSIT]


def test_withdraw_entire_balance_is_allowed() -> None:
    account = Account("ACC-1")
    account.deposit(80)
    account.withdraw(80, "Rent")

    assert account.balance == Decimal("0")
    assert account.entries[-1].kind is EntryKind.WITHDRAW


def test_transfer_moves_money_and_records_both_sides() -> None:
    """Transfers debit the source and credit the target with suffixed descriptions."""

    source = Account("ACC-1")
    target = Account("ACC-2")
    source.deposit(200)

    outgoing, incoming = source.transfer(target, "75.25", "Rent share")

    assert source.balance == Decimal("124.75")
    assert target.balance == Decimal("75.25")
    assert outgoing.kind is EntryKind.TRANSFER_OUT
    assert incoming.kind is EntryKind.TRANSFER_IN
    assert outgoing.description == "Rent share to ACC-2"
    assert incoming.description == "Rent share from ACC-1"
    assert outgoing.counterparty == "ACC-2"
    assert incoming.counterparty == "ACC-1"
    assert source.entries[-1] is outgoing
    assert target.entries == (incoming,)


def test_transfer_with_insufficient_funds_changes_nothing() -> None:
    source = Account("ACC-1")
    target = Account("ACC-2")
    source.deposit(10)

    with pytest.raises(InsufficientFunds):
        source.transfer(target, 10.01)

    assert source.balance == Decimal("10")
    assert target.balance == Decimal("0")
    assert len(source.entries) == 1
    assert target.entries == ()


def test_transfer_interrupted_while_building_entries_changes_nothing(monkeypatch) -> None:
    """A failure part-way through a transfer must leave both accounts untouched."""

    source = Account("ACC-1")
    target = Account("ACC-2")
    source.deposit(100)
    target.deposit(5)

    def explode(*args, **kwargs):
        raise RuntimeError("entry store unavailable")

    monkeypatch.setattr(target, "_new_entry", explode)

    with pytest.raises(RuntimeError):
        source.transfer(target, 40)

    assert source.balance == Decimal("100")
    assert target.balance == Decimal("5")
    assert len(source.entries) == 1
    assert len(target.entries) == 1


def test_self_transfer_is_rejected_by_default() -> None:
    account = Account("ACC-1", allow_self_transfer=False)
    account.deposit(30)

    with pytest.raises(ValidationError):
        account.transfer(account, 10)

    assert account.balance == Decimal("30")
    assert len(account.entries) == 1


def test_self_transfer_when_allowed_has_no_net_effect() -> None:
    account = Account("ACC-1", allow_self_transfer=True)
    account.deposit(30)

    account.transfer(account, 10, "Shuffle")

    assert account.balance == Decimal("30")
    assert [entry.kind for entry in account.entries] == [
        EntryKind.DEPOSIT,
        EntryKind.TRANSFER_OUT,
        EntryKind.TRANSFER_IN,
    ]


def test_ledger_entry_rejects_non_positive_amount() -> None:
    with pytest.raises(ValidationError):
        LedgerEntry(kind=EntryKind.DEPOSIT, amount=Decimal("0"), description="nothing")


def test_ledger_entry_is_immutable() -> None:
    entry = LedgerEntry(kind=EntryKind.DEPOSIT, amount=Decimal("1"), description="x")

    with pytest.raises(AttributeError):
        entry.amount = Decimal("2")  # type: ignore[misc]


def test_history_follows_insertion_order() -> None:
    account = Account("ACC-1")
    account.deposit(10, "First")
    account.withdraw(4, "Second")

    history = account.history()
    assert "DEPOSIT" in history[0] and "First" in history[0]
    assert "WITHDRAW" in history[1] and "Second" in history[1]

    assert account.balance == Decimal("6")


@pytest.mark.parametrize("seed", range(20))
def test_balance_matches_entries_for_random_sequences(seed: int) -> None:
    """Random operation sequences never break balance conservation."""

    rng = random.Random(seed)
    accounts = [Account(f"ACC-{index}") for index in range(3)]
    starting_total = Decimal("0")

    for _ in range(60):
        account = rng.choice(accounts)
        amount = Decimal(rng.randint(1, 50_000)) / 100
        operation = rng.choice(["deposit", "withdraw", "transfer"])
        before = [(a.balance, len(a.entries)) for a in accounts]
        try:
            if operation == "deposit":
                account.deposit(amount)
                starting_total += amount
            elif operation == "withdraw":
                account.withdraw(amount)
                starting_total -= amount
            else:
                target = rng.choice([a for a in accounts if a is not account])
                account.transfer(target, amount)
        except InsufficientFunds:
            assert [(a.balance, len(a.entries)) for a in accounts] == before

        for each in accounts:
            assert each.balance == each.reconciled_balance()
            assert each.balance >= 0

    assert sum(a.balance for a in accounts) == starting_total


def test_concurrent_opposing_transfers_conserve_money() -> None:
    """Opposing transfers from several threads neither deadlock nor lose money."""

    import threading

    first = Account("ACC-1")
    second = Account("ACC-2")
    first.deposit(1000)
    second.deposit(1000)

    def shuttle(source: Account, target: Account) -> None:
        for _ in range(200):
            try:
                source.transfer(target, 3)
            except InsufficientFunds:
                pass

    threads = [
        threading.Thread(target=shuttle, args=(first, second)),
        threading.Thread(target=shuttle, args=(second, first)),
        threading.Thread(target=shuttle, args=(first, second)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert not any(thread.is_alive() for thread in threads)
    assert first.balance + second.balance == Decimal("2000")
    assert first.balance == first.reconciled_balance()
    assert second.balance == second.reconciled_balance()
