from __future__ import annotations

from typing import Optional, Protocol

from .model import MonthlySummary


class SummaryRepository(Protocol):
    def get(self, *, employee_id: str, month: str) -> Optional[MonthlySummary]:
        raise NotImplementedError

    def save(self, summary: MonthlySummary) -> None:
        """Replace the stored summary for (employee_id, month)."""

        raise NotImplementedError
