"""Decimal money helpers.

Amounts are held as ``Decimal`` quantized to cents. Floats are converted
through ``str()`` so that ``0.1`` becomes ``Decimal("0.10")`` rather than
its binary expansion.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from records_desk.exceptions import InvalidAmountError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

MoneyLike = Union[Decimal, int, float, str]


def to_money(value: MoneyLike) -> Decimal:
    """Convert a caller-supplied amount to a cent-quantized ``Decimal``.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number, or has more digits than
        the decimal context can hold at cent precision.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}") from None
    if not amount.is_finite():
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    try:
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # more digits than the decimal context can hold at cent precision
        raise InvalidAmountError(f"Amount out of range: {value!r}") from None
    return amount if amount else ZERO  # drop the sign of -0.00


def to_positive_money(value: MoneyLike) -> Decimal:
    """Like :func:`to_money` but rejects zero and negative amounts."""
    amount = to_money(value)
    if amount <= ZERO:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    return amount


def format_money(amount: Decimal, symbol: str = "$") -> str:
    """Render an amount with two decimals, e.g. ``$1,250.00``."""
    return f"{symbol}{amount:,.2f}"
