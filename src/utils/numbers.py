"""Numeric coercion shared by payload normalisation and label formatting."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional


def to_finite_decimal(value: object) -> Optional[Decimal]:
    """Return ``value`` as a finite Decimal, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        s = str(value).strip()
        if not s:
            return None
        try:
            result = Decimal(s)
        except (InvalidOperation, ValueError):
            return None
    if not result.is_finite():
        return None
    return result
