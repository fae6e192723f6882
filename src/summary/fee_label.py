"""
ATM fee label formatting.

The product service returns ``atmFee`` without saying what kind of fee it is.
The unit is inferred from the magnitude:

- ``|fee| <= 100``: a percentage ("1.7%")
- ``|fee| > 100``: a EUR amount in German notation ("250,00 €")
- exactly zero: "Free"
- missing or non-numeric: "-"

The threshold is a heuristic with no backend guarantee and can be
overridden through ``formatting.percentage_threshold`` in the config.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Union

from src.utils.numbers import to_finite_decimal

PERCENTAGE_THRESHOLD = Decimal("100")
NO_FEE_LABEL = "-"
FREE_LABEL = "Free"

_CENTS = Decimal("0.01")
_NBSP = "\u00a0"
_DE_SEPARATORS = str.maketrans({",": ".", ".": ","})


def format_atm_fee(raw_fee: Any, *, percentage_threshold: Union[Decimal, float, int] = PERCENTAGE_THRESHOLD) -> str:
    """Map a raw ATM fee to its display label. Never raises."""
    fee = to_finite_decimal(raw_fee)
    if fee is None:
        return NO_FEE_LABEL

    threshold = to_finite_decimal(percentage_threshold)
    if threshold is None:
        threshold = PERCENTAGE_THRESHOLD

    if abs(fee) <= threshold:
        label = format_percentage(fee)
    else:
        label = format_eur(fee)

    # Zero wins over both branches.
    if fee == 0:
        label = FREE_LABEL
    return label


def format_percentage(value: Decimal) -> str:
    if value == value.to_integral_value():
        return f"{int(value)}%"
    with localcontext() as ctx:
        ctx.prec = _cents_precision(value)
        text = f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"
    return text.rstrip("0").rstrip(".") + "%"


def format_eur(value: Decimal) -> str:
    """de-DE currency style: ``1.234,50 €`` (no-break space before the symbol)."""
    with localcontext() as ctx:
        ctx.prec = _cents_precision(value)
        amount = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if amount < 0 else ""
        digits = f"{abs(amount):,.2f}".translate(_DE_SEPARATORS)
    return f"{sign}{digits}{_NBSP}€"


def _cents_precision(value: Decimal) -> int:
    # Digits needed to hold ``value`` quantized to two places.
    return max(28, value.adjusted() + 4)
