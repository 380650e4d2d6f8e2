"""Mini README: Money coercion helpers.

Structure:
    * to_amount - coerce user or caller supplied values into ``Decimal``.
    * format_amount - render a ``Decimal`` with the configured currency symbol.

Floats are converted through their shortest ``repr`` so that ``2.5``
becomes ``Decimal("2.5")`` rather than the binary expansion. Booleans,
NaN and infinities are rejected because they never describe money.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..configuration import get_settings
from ..errors import ValidationError

AmountLike = Union[Decimal, int, float, str]


def to_amount(value: AmountLike, *, field: str = "amount") -> Decimal:
    """Return ``value`` as a finite ``Decimal`` or raise ``ValidationError``."""

    if isinstance(value, bool):
        raise ValidationError(f"{field} must be numeric, got a boolean.")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as error:
            raise ValidationError(f"{field} is not a valid number: {value!r}") from error
    else:
        raise ValidationError(f"{field} must be numeric, got {type(value).__name__}.")
    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number, got {value!r}.")
    return amount


def to_positive_amount(value: AmountLike, *, field: str = "amount") -> Decimal:
    """Coerce ``value`` and require it to be strictly greater than zero."""

    amount = to_amount(value, field=field)
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero, got {amount}.")
    return amount


def format_amount(amount: Decimal, symbol: Optional[str] = None) -> str:
    """Render ``amount`` with two decimal places and a currency symbol."""

    if symbol is None:
        symbol = get_settings().currency_symbol
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
