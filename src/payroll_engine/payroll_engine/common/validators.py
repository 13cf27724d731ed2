from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError
from .numbers import finite_or_zero


def require_amount(value: Any, field_name: str) -> float:
    """Parse an operator-entered amount; blank means 0, negatives are rejected."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    amount = finite_or_zero(amount)
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount
