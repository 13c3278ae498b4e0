from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import PaySummary, ShiftInterval


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for shift pay)."""

    @abstractmethod
    def summarize(self, interval: ShiftInterval, hourly_rate: float) -> PaySummary:
        raise NotImplementedError
