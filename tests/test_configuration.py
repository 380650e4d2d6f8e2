"""Mini README: Tests for settings loading and logging helpers."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError as SettingsValidationError

from pennywise.budgeting import BudgetTracker
from pennywise.configuration import PennywiseSettings, get_settings
from pennywise.errors import ValidationError
from pennywise.finance import Account
from pennywise.logging_utils import configure_root_logger, get_logger
from pennywise.utils import format_amount, to_amount


def test_defaults_match_documented_values(monkeypatch) -> None:
    for name in ("PENNYWISE_NEAR_LIMIT_RATIO", "PENNYWISE_ALLOW_SELF_TRANSFER", "PENNYWISE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = PennywiseSettings(_env_file=None)

    assert settings.near_limit_ratio == Decimal("0.8")
    assert settings.allow_self_transfer is False
    assert settings.currency_symbol == "$"
    assert settings.log_level == "INFO"


def test_environment_overrides_are_applied(monkeypatch) -> None:
    monkeypatch.setenv("PENNYWISE_NEAR_LIMIT_RATIO", "0.9")
    monkeypatch.setenv("PENNYWISE_ALLOW_SELF_TRANSFER", "true")
    monkeypatch.setenv("PENNYWISE_LOG_LEVEL", "debug")

    settings = PennywiseSettings(_env_file=None)

    assert settings.near_limit_ratio == Decimal("0.9")
    assert settings.allow_self_transfer is True
    assert settings.log_level == "DEBUG"


def test_invalid_settings_are_rejected(monkeypatch) -> None:
    monkeypatch.setenv("PENNYWISE_NEAR_LIMIT_RATIO", "1.5")
    with pytest.raises(SettingsValidationError):
        PennywiseSettings(_env_file=None)

    monkeypatch.setenv("PENNYWISE_NEAR_LIMIT_RATIO", "0.5")
    monkeypatch.setenv("PENNYWISE_LOG_LEVEL", "chatty")
    with pytest.raises(SettingsValidationError):
        PennywiseSettings(_env_file=None)


def test_components_read_cached_settings(monkeypatch) -> None:
    monkeypatch.setenv("PENNYWISE_NEAR_LIMIT_RATIO", "0.5")
    monkeypatch.setenv("PENNYWISE_ALLOW_SELF_TRANSFER", "true")
    get_settings.cache_clear()
    try:
        tracker = BudgetTracker()
        account = Account("ACC-1")
        account.deposit(10)
        account.transfer(account, 5)

        assert tracker.near_limit_ratio == Decimal("0.5")
        assert account.balance == Decimal("10")
    finally:
        get_settings.cache_clear()


def test_get_logger_returns_named_logger() -> None:
    logger = get_logger("pennywise.test")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "pennywise.test"


def test_money_helpers() -> None:
    assert to_amount(2.5) == Decimal("2.5")
    assert to_amount(" 3.10 ") == Decimal("3.10")
    assert format_amount(Decimal("-1234.5"), "$") == "-$1,234.50"
    with pytest.raises(ValidationError):
        to_amount(True)
    with pytest.raises(ValidationError):
        to_amount([1])


def test_loggers_do_not_depend_on_settings(monkeypatch) -> None:
    """A bad configured level must not stop modules from getting loggers."""

    monkeypatch.setenv("PENNYWISE_LOG_LEVEL", "chatty")
    get_settings.cache_clear()
    try:
        logger = get_logger("pennywise.unaffected")
        assert logger.name == "pennywise.unaffected"
    finally:
        get_settings.cache_clear()


def test_explicit_level_is_applied_after_initialisation() -> None:
    root = logging.getLogger()
    previous = root.level
    handlers = list(root.handlers)
    try:
        get_logger("pennywise.test")
        configure_root_logger("debug")
        assert root.level == logging.DEBUG
        assert root.handlers == handlers

        with pytest.raises(ValueError):
            configure_root_logger("chatty")
    finally:
        root.setLevel(previous)
