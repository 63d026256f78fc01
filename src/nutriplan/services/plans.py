"""Daily meal plan service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutriplan.domain.meals import Meal
from nutriplan.domain.plans import DailyPlan, MealSlot

_logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Persistence interface for daily plans, keyed by (user, date)."""

    def get_plan(self, user_id: UUID, day: date) -> DailyPlan | None:
        """Return the stored plan for a date, if any."""

    def list_plans(self, user_id: UUID, start: date, end: date) -> list[DailyPlan]:
        """Return stored plans with start <= date <= end."""

    def upsert_plan(self, user_id: UUID, plan: DailyPlan) -> None:
        """Insert or replace the whole plan row for (user, date)."""

    def delete_user_plans(self, user_id: UUID) -> None:
        """Delete every plan belonging to a user."""


@dataclass
class PlanService:
    """Reads and mutates a user's date-indexed plans.

    Concurrent writers to the same (user, date) are not coordinated: the last
    upsert wins.
    """

    repository: PlanRepository

    def get_plan(self, user_id: UUID, day: date) -> DailyPlan:
        """Return the plan for a date, or an empty one when none is stored."""
        return self.repository.get_plan(user_id, day) or DailyPlan(day=day)

    def list_plans(
        self, user_id: UUID, start: date, end: date
    ) -> dict[date, DailyPlan]:
        """Return stored plans in a date range keyed by date."""
        return {
            plan.day: plan for plan in self.repository.list_plans(user_id, start, end)
        }

    def assign_meal(
        self,
        user_id: UUID,
        day: date,
        meal: Meal,
        slot: MealSlot | None = None,
    ) -> DailyPlan:
        """Store a snapshot of the meal in a slot, replacing any previous meal.

        The slot defaults to the one matching the meal's type. Meals are
        frozen, so the plan keeps the values as they were at assignment time
        even if the catalog entry later changes.
        """
        target_slot = slot or MealSlot.for_meal_type(meal.meal_type)
        plan = self.get_plan(user_id, day).with_meal(target_slot, meal)
        return self._save(user_id, plan)

    def remove_meal(self, user_id: UUID, day: date, slot: MealSlot) -> DailyPlan:
        """Clear a slot. Clearing an empty slot leaves the plan untouched."""
        plan = self.get_plan(user_id, day)
        if plan.meal_for(slot) is None:
            return plan
        return self._save(user_id, plan.with_meal(slot, None))

    def set_water(self, user_id: UUID, day: date, amount: float) -> DailyPlan:
        """Set water intake in liters; negative amounts become zero."""
        plan = self.get_plan(user_id, day).with_water(amount)
        return self._save(user_id, plan)

    def adjust_water(self, user_id: UUID, day: date, delta: float) -> DailyPlan:
        """Add to (or subtract from) the day's water intake."""
        plan = self.get_plan(user_id, day)
        return self._save(user_id, plan.with_water(plan.water_intake + delta))

    def _save(self, user_id: UUID, plan: DailyPlan) -> DailyPlan:
        try:
            self.repository.upsert_plan(user_id, plan)
        except Exception:
            _logger.exception(
                "Failed to save plan",
                extra={"user_id": str(user_id), "day": plan.day.isoformat()},
            )
            raise
        return plan
