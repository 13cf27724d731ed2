from __future__ import annotations

from typing import Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_for_month(self, month: str) -> Sequence[Holiday]:
        raise NotImplementedError
