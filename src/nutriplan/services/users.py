"""User-related business logic."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from nutriplan.domain.errors import DuplicateEmailError, NotFoundError
from nutriplan.domain.targets import (
    ActivityLevel,
    BodyMetrics,
    FitnessGoal,
    Gender,
    NutritionTargets,
)
from nutriplan.domain.users import UserRecord, UserRole, WeightEntry, record_weight
from nutriplan.services.plans import PlanRepository
from nutriplan.services.targets import targets_for

_logger = logging.getLogger(__name__)

DEFAULT_METRICS = BodyMetrics(
    age=25,
    gender=Gender.MALE,
    height_cm=175.0,
    weight_kg=70.0,
    activity_level=ActivityLevel.MODERATE,
    goal=FitnessGoal.MAINTAIN,
)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def create_user(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        role: UserRole,
        metrics: BodyMetrics,
        targets: NutritionTargets,
    ) -> UserRecord:
        """Create and return a new user record."""

    def save_profile(
        self,
        user_id: UUID,
        metrics: BodyMetrics,
        targets: NutritionTargets,
        weight_history: list[WeightEntry],
    ) -> UserRecord | None:
        """Replace metrics, targets and weight history in one write."""

    def set_role(self, user_id: UUID, role: UserRole) -> UserRecord | None:
        """Update a user's role."""

    def delete_user(self, user_id: UUID) -> bool:
        """Delete a user, returning False when it does not exist."""


@dataclass(frozen=True)
class WeightLogResult:
    """Outcome of logging a weight."""

    user: UserRecord
    history: list[WeightEntry]
    targets: NutritionTargets


@dataclass
class UserService:
    """Application service for user lifecycle and profile actions."""

    repository: UserRepository
    plan_repository: PlanRepository
    today: Callable[[], date] = date.today

    def register(
        self, name: str, email: str, role: UserRole = UserRole.USER
    ) -> UserRecord:
        """Create a user with default metrics and the targets they imply."""
        normalized = email.strip().lower()
        if self.repository.get_by_email(normalized) is not None:
            raise DuplicateEmailError(normalized)
        return self.repository.create_user(
            name=name.strip() or "New User",
            email=normalized,
            role=role,
            metrics=DEFAULT_METRICS,
            targets=targets_for(DEFAULT_METRICS),
        )

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return a user or raise NotFoundError."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        return self.repository.list_users()

    def update_profile(
        self, user_id: UUID, changes: Mapping[str, object]
    ) -> UserRecord:
        """Apply metric changes and recompute every target from the result."""
        user = self.get_user(user_id)
        metrics = replace(user.metrics, **changes)
        return self._save(user, metrics, user.weight_history)

    def log_weight(self, user_id: UUID, weight_kg: float) -> WeightLogResult:
        """Log today's weight and refresh targets that depend on it."""
        user = self.get_user(user_id)
        history = record_weight(user.weight_history, self.today(), weight_kg)
        metrics = replace(user.metrics, weight_kg=weight_kg)
        saved = self._save(user, metrics, history)
        return WeightLogResult(
            user=saved, history=saved.weight_history, targets=saved.targets
        )

    def set_role(self, user_id: UUID, role: UserRole) -> UserRecord:
        """Change a user's access level."""
        updated = self.repository.set_role(user_id, role)
        if updated is None:
            raise NotFoundError("user", user_id)
        _logger.info("Changed role of user %s to %s", user_id, role)
        return updated

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user and every plan they own."""
        self.get_user(user_id)
        if not self.repository.delete_user(user_id):
            raise NotFoundError("user", user_id)
        self.plan_repository.delete_user_plans(user_id)
        _logger.info("Deleted user %s", user_id)

    def _save(
        self, user: UserRecord, metrics: BodyMetrics, history: list[WeightEntry]
    ) -> UserRecord:
        saved = self.repository.save_profile(
            user.id, metrics, targets_for(metrics), history
        )
        if saved is None:
            raise NotFoundError("user", user.id)
        return saved
