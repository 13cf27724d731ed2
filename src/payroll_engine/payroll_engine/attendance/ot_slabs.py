from __future__ import annotations

import math

from ..common.numbers import finite_or_zero


def round_ot(extra_minutes: float) -> int:
    """Quantize raw overtime minutes into credited minutes.

    Below 30 minutes nothing is credited; 30-44 credits 30 and 45-59 credits a full
    hour. From one hour on, whole hours count fully and the remainder is credited
    in quarter-hour steps rounded down (45/30/15/0).
    """
    extra = finite_or_zero(extra_minutes)
    if extra < 30:
        return 0
    if extra < 45:
        return 30
    if extra < 60:
        return 60

    full_hours = int(math.floor(extra / 60))
    remainder = extra - full_hours * 60
    credited = full_hours * 60
    if remainder >= 45:
        credited += 45
    elif remainder >= 30:
        credited += 30
    elif remainder >= 15:
        credited += 15
    return credited
