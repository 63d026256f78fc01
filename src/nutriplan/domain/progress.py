"""Domain models for weekly progress."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class StatusKind(StrEnum):
    """Classification of a day's intake against the calorie target."""

    NO_DATA = "no_data"
    ON_TARGET = "on_target"
    OVER = "over"
    UNDER = "under"


@dataclass(frozen=True)
class DayStatus:
    """Status of a day with the calorie difference, when relevant."""

    kind: StatusKind
    difference: int = 0

    @property
    def label(self) -> str:
        """Human readable status."""
        if self.kind is StatusKind.NO_DATA:
            return "no data"
        if self.kind is StatusKind.ON_TARGET:
            return "on target"
        return f"{self.kind} by {self.difference}"


@dataclass(frozen=True)
class DayProgress:
    """Totals for one date in a progress window."""

    day: date
    calories: int
    protein_g: int
    status: DayStatus


@dataclass(frozen=True)
class WeeklyProgress:
    """Progress over a window of dates."""

    calorie_target: int
    days: list[DayProgress]
    avg_calories: float
    avg_protein_g: float
