"""Admin service for reporting and account management."""

from dataclasses import dataclass
from typing import Protocol

from nutriplan.domain.admin import PlatformStats
from nutriplan.domain.users import UserRecord
from nutriplan.services.catalog import CatalogService
from nutriplan.services.users import UserService


class AdminRepository(Protocol):
    """Persistence interface for admin aggregates."""

    def count_plans(self) -> int:
        """Return the number of stored plans."""

    def average_water_intake(self) -> float | None:
        """Return the mean water intake over stored plans."""


@dataclass
class AdminService:
    """Service for admin dashboards."""

    admin_repository: AdminRepository
    user_service: UserService
    catalog_service: CatalogService

    def list_users(self) -> list[dict[str, object]]:
        """Return users with their goals and calorie targets."""
        return [_serialize_user(user) for user in self.user_service.list_users()]

    def get_stats(self) -> PlatformStats:
        """Return platform counters."""
        return PlatformStats(
            total_users=len(self.user_service.list_users()),
            total_plans=self.admin_repository.count_plans(),
            total_meals=len(self.catalog_service.list_meals()),
            avg_water_l=self.admin_repository.average_water_intake(),
        )


def _serialize_user(user: UserRecord) -> dict[str, object]:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
        "goal": user.metrics.goal.value,
        "daily_calories": user.targets.calories,
    }
