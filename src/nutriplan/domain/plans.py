"""Domain models for daily meal plans."""

from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum

from nutriplan.domain.meals import Meal, MealType


class MealSlot(StrEnum):
    """Meal-time positions within a daily plan."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @classmethod
    def for_meal_type(cls, meal_type: MealType) -> "MealSlot":
        """Return the slot matching a catalog meal type."""
        return cls(meal_type.value.lower())

    @property
    def meal_type(self) -> MealType:
        """Return the catalog meal type served in this slot."""
        return MealType(self.value.capitalize())


@dataclass(frozen=True)
class DailyPlan:
    """A user's plan for one calendar date.

    An empty slot (``None``) means nothing is assigned yet, which is not the
    same as a zero-calorie meal.
    """

    day: date
    breakfast: Meal | None = None
    lunch: Meal | None = None
    dinner: Meal | None = None
    water_intake: float = 0.0

    def meal_for(self, slot: MealSlot) -> Meal | None:
        """Return the meal in a slot, if assigned."""
        return getattr(self, slot.value)

    def with_meal(self, slot: MealSlot, meal: Meal | None) -> "DailyPlan":
        """Return a copy with the slot replaced."""
        return replace(self, **{slot.value: meal})

    def with_water(self, amount: float) -> "DailyPlan":
        """Return a copy with water set, clamped at zero."""
        return replace(self, water_intake=max(0.0, float(amount)))

    def meals(self) -> list[Meal]:
        """Return assigned meals in slot order."""
        slots = (self.breakfast, self.lunch, self.dinner)
        return [meal for meal in slots if meal is not None]

    @property
    def total_calories(self) -> int:
        """Sum of calories over assigned slots."""
        return sum(meal.calories for meal in self.meals())

    @property
    def total_protein_g(self) -> int:
        """Sum of protein over assigned slots."""
        return sum(meal.protein_g for meal in self.meals())
