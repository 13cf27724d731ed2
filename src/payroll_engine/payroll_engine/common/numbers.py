from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

_CENT = Decimal("0.01")
_HOUR_PRECISION = Decimal("0.0001")


def finite_or_zero(value: Any) -> float:
    """Coerce None, NaN, infinities and non-numeric text to 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _quantize(value: Any, step: Decimal) -> float:
    number = finite_or_zero(value)
    try:
        # str() first so 1.005 rounds as written, not as its binary expansion.
        return float(Decimal(str(number)).quantize(step, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return 0.0


def round_money(value: Any) -> float:
    """Round a monetary figure to 2 decimals, half away from zero."""
    return _quantize(value, _CENT)


def round_hours(value: Any) -> float:
    """Round an hour figure to 4 decimals."""
    return _quantize(value, _HOUR_PRECISION)
