"""Admin domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformStats:
    """Platform-wide counters for the admin dashboard."""

    total_users: int
    total_plans: int
    total_meals: int
    avg_water_l: float | None
