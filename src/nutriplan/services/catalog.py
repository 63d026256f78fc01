"""Global meal catalog: seed meals, persisted meals and the seed overlay."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from nutriplan.domain.errors import NotFoundError
from nutriplan.domain.meals import (
    DietTag,
    Meal,
    MealDraft,
    MealId,
    MealOverlayEntry,
    MealType,
)
from nutriplan.seed_meals import SEED_MEALS

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for admin-managed meals."""

    def list_meals(self) -> list[Meal]:
        """Return all persisted meals, newest first."""

    def create_meal(self, draft: MealDraft) -> Meal:
        """Create a meal and return it with its new identifier."""

    def update_meal(self, meal_id: int, draft: MealDraft) -> Meal | None:
        """Replace a meal's fields, returning None when it does not exist."""

    def delete_meal(self, meal_id: int) -> bool:
        """Delete a meal, returning False when it does not exist."""


class MealOverlayRepository(Protocol):
    """Persistence interface for the seed meal overlay."""

    def list_entries(self) -> list[MealOverlayEntry]:
        """Return all overlay entries."""

    def mark_deleted(self, seed_id: str) -> MealOverlayEntry:
        """Upsert a deleted flag for a seed meal."""

    def record_conversion(
        self, seed_id: str, converted_meal_id: int
    ) -> MealOverlayEntry:
        """Upsert the persisted meal that replaces a seed meal."""


class DietFilter(StrEnum):
    """Diet filters offered when browsing meals."""

    VEG = "Veg"
    NON_VEG = "Non-Veg"
    HIGH_PROTEIN = "High Protein"


_VEG_TAGS = {DietTag.VEGETARIAN.value, DietTag.VEGAN.value}


def merge_catalog(
    seed: Iterable[Meal],
    persisted: Iterable[Meal],
    overlay: Iterable[MealOverlayEntry],
) -> list[Meal]:
    """Return the effective meal list.

    Seed meals that were deleted or converted are dropped, persisted meals
    come first, and the first meal wins when two share an id value.
    """
    hidden = {entry.seed_id for entry in overlay if entry.hides_seed}
    visible_seed = [meal for meal in seed if meal.id.value not in hidden]
    merged: list[Meal] = []
    seen: set[str] = set()
    for meal in [*persisted, *visible_seed]:
        if meal.id.value in seen:
            continue
        seen.add(meal.id.value)
        merged.append(meal)
    return merged


def matches_diet(meal: Meal, diet: DietFilter) -> bool:
    """Return True when a meal passes a diet filter."""
    is_veg = meal.diet_tag in _VEG_TAGS
    if diet is DietFilter.VEG:
        return is_veg
    if diet is DietFilter.NON_VEG:
        return not is_veg
    return meal.diet_tag == DietTag.HIGH_PROTEIN.value


@dataclass
class CatalogService:
    """Application service for the global meal catalog."""

    meal_repository: MealRepository
    overlay_repository: MealOverlayRepository
    seed_meals: tuple[Meal, ...] = SEED_MEALS

    def list_meals(self) -> list[Meal]:
        """Return the effective catalog, falling back to seed meals on errors."""
        persisted = self._fetch_persisted()
        overlay = self._fetch_overlay()
        if persisted is None or overlay is None:
            return merge_catalog(self.seed_meals, [], overlay or [])
        return merge_catalog(self.seed_meals, persisted, overlay)

    def get_meal(self, meal_id: MealId) -> Meal:
        """Return a meal from the effective catalog."""
        for meal in self.list_meals():
            if meal.id == meal_id:
                return meal
        raise NotFoundError("meal", meal_id)

    def search(
        self,
        meal_type: MealType | None = None,
        query: str | None = None,
        diet: DietFilter | None = None,
    ) -> list[Meal]:
        """Filter the catalog by type, name and diet."""
        needle = (query or "").strip().lower()
        return [
            meal
            for meal in self.list_meals()
            if (meal_type is None or meal.meal_type is meal_type)
            and needle in meal.name.lower()
            and (diet is None or matches_diet(meal, diet))
        ]

    def recommend(
        self, meal_type: MealType, calorie_budget: int, limit: int = 5
    ) -> list[Meal]:
        """Return meals of a type closest to a calorie budget."""
        candidates = self.search(meal_type=meal_type)
        ranked = sorted(
            candidates,
            key=lambda meal: (abs(meal.calories - calorie_budget), meal.name),
        )
        return ranked[:limit]

    def create_meal(self, draft: MealDraft) -> Meal:
        """Publish a new meal to the persisted catalog."""
        meal = self.meal_repository.create_meal(draft)
        _logger.info("Created meal %s (%s)", meal.id, meal.name)
        return meal

    def update_meal(self, meal_id: MealId, draft: MealDraft) -> Meal:
        """Update a meal.

        Seed meals cannot be edited in place: the edit is stored as a new
        persisted meal and the seed meal is marked as converted to it.
        """
        if meal_id.is_seed:
            self._require_visible_seed(meal_id)
            created = self.meal_repository.create_meal(draft)
            try:
                self.overlay_repository.record_conversion(
                    meal_id.value, created.id.persisted_key()
                )
            except Exception:
                _logger.exception(
                    "Failed to convert seed meal %s, removing %s", meal_id, created.id
                )
                self.meal_repository.delete_meal(created.id.persisted_key())
                raise
            _logger.info("Converted seed meal %s to %s", meal_id, created.id)
            return created

        updated = self.meal_repository.update_meal(meal_id.persisted_key(), draft)
        if updated is None:
            raise NotFoundError("meal", meal_id)
        return updated

    def delete_meal(self, meal_id: MealId) -> None:
        """Remove a meal from the effective catalog."""
        if meal_id.is_seed:
            self._require_visible_seed(meal_id)
            self.overlay_repository.mark_deleted(meal_id.value)
            _logger.info("Hid seed meal %s", meal_id)
            return

        if not self.meal_repository.delete_meal(meal_id.persisted_key()):
            raise NotFoundError("meal", meal_id)
        _logger.info("Deleted meal %s", meal_id)

    def overlay_entries(self) -> list[MealOverlayEntry]:
        """Return the seed overlay rows."""
        return self.overlay_repository.list_entries()

    def _require_visible_seed(self, meal_id: MealId) -> None:
        if not any(meal.id == meal_id for meal in self.seed_meals):
            raise NotFoundError("meal", meal_id)
        for entry in self.overlay_repository.list_entries():
            if entry.seed_id == meal_id.value and entry.hides_seed:
                raise NotFoundError("meal", meal_id)

    def _fetch_persisted(self) -> list[Meal] | None:
        try:
            return self.meal_repository.list_meals()
        except Exception:
            _logger.exception("Failed to load persisted meals")
            return None

    def _fetch_overlay(self) -> list[MealOverlayEntry] | None:
        try:
            return self.overlay_repository.list_entries()
        except Exception:
            _logger.exception("Failed to load seed meal overlay")
            return None
