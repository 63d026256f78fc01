"""Supabase implementation for the persisted meal catalog."""

from dataclasses import dataclass

from supabase import Client

from nutriplan.domain.meals import DEFAULT_MEAL_IMAGE, Meal, MealDraft, MealId, MealType
from nutriplan.services.catalog import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase-backed repository for admin-managed meals."""

    client: Client

    def list_meals(self) -> list[Meal]:
        """Return all persisted meals, newest first."""
        response = (
            self.client.table("meals").select("*").order("id", desc=True).execute()
        )
        return [parse_meal_row(row) for row in response.data or []]

    def create_meal(self, draft: MealDraft) -> Meal:
        """Create a meal and return it."""
        response = self.client.table("meals").insert(_draft_payload(draft)).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return parse_meal_row(response.data[0])

    def update_meal(self, meal_id: int, draft: MealDraft) -> Meal | None:
        """Replace a meal's fields."""
        response = (
            self.client.table("meals")
            .update(_draft_payload(draft))
            .eq("id", meal_id)
            .execute()
        )
        if not response.data:
            return None
        return parse_meal_row(response.data[0])

    def delete_meal(self, meal_id: int) -> bool:
        """Delete a meal by id."""
        response = self.client.table("meals").delete().eq("id", meal_id).execute()
        return bool(response.data)


def _draft_payload(draft: MealDraft) -> dict[str, object]:
    return {
        "meal_name": draft.name,
        "meal_type": draft.meal_type.value,
        "calories": draft.calories,
        "protein": draft.protein_g,
        "diet_tag": draft.diet_tag,
        "image_url": draft.image_url or DEFAULT_MEAL_IMAGE,
    }


def parse_meal_row(row: dict[str, object]) -> Meal:
    """Parse a meals table row into a domain model."""
    return Meal(
        id=MealId.persisted(int(row["id"])),
        name=str(row.get("meal_name") or ""),
        meal_type=MealType(row.get("meal_type") or MealType.LUNCH.value),
        calories=int(row.get("calories") or 0),
        protein_g=int(row.get("protein") or 0),
        diet_tag=str(row.get("diet_tag") or ""),
        image_url=str(row.get("image_url") or DEFAULT_MEAL_IMAGE),
    )
