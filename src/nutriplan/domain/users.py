"""Domain models for users and their weight history."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from uuid import UUID

from nutriplan.domain.targets import BodyMetrics, NutritionTargets


class UserRole(StrEnum):
    """Access level of an account."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class WeightEntry:
    """A single body weight observation."""

    day: date
    weight_kg: float


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str
    role: UserRole
    metrics: BodyMetrics
    targets: NutritionTargets
    weight_history: list[WeightEntry] = field(default_factory=list)


def record_weight(
    history: list[WeightEntry], day: date, weight_kg: float
) -> list[WeightEntry]:
    """Return a new history with the weight logged for ``day``.

    A same-day entry is replaced in place; otherwise the entry is prepended,
    keeping the newest observation first.
    """
    entry = WeightEntry(day=day, weight_kg=weight_kg)
    updated = list(history)
    for index, existing in enumerate(updated):
        if existing.day == day:
            updated[index] = entry
            return updated
    return [entry, *updated]


def latest_weight(history: list[WeightEntry]) -> float | None:
    """Return the most recent logged weight, if any."""
    if not history:
        return None
    return max(history, key=lambda entry: entry.day).weight_kg
