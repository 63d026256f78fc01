"""Supabase repository for daily plans."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutriplan.domain.meals import DEFAULT_MEAL_IMAGE, Meal, MealId, MealType
from nutriplan.domain.plans import DailyPlan, MealSlot
from nutriplan.services.plans import PlanRepository


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase implementation for plans.

    Each slot column holds a JSON snapshot of the meal, not a foreign key, so
    catalog edits never rewrite past plans.
    """

    client: Client

    def get_plan(self, user_id: UUID, day: date) -> DailyPlan | None:
        """Return the plan row for (user, date)."""
        response = (
            self.client.table("plans")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def list_plans(self, user_id: UUID, start: date, end: date) -> list[DailyPlan]:
        """Return plans in an inclusive date range."""
        response = (
            self.client.table("plans")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def upsert_plan(self, user_id: UUID, plan: DailyPlan) -> None:
        """Write the whole plan row in one upsert."""
        payload: dict[str, object] = {
            "user_id": str(user_id),
            "date": plan.day.isoformat(),
            "water_intake": plan.water_intake,
        }
        for slot in MealSlot:
            meal = plan.meal_for(slot)
            payload[slot.value] = meal_snapshot(meal) if meal else None
        response = (
            self.client.table("plans")
            .upsert(payload, on_conflict="user_id,date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save plan")

    def delete_user_plans(self, user_id: UUID) -> None:
        """Delete all plans of a user."""
        self.client.table("plans").delete().eq("user_id", str(user_id)).execute()


def meal_snapshot(meal: Meal) -> dict[str, object]:
    """Serialize a meal into the JSON stored in a plan slot."""
    return {
        "id": str(meal.id),
        "meal_name": meal.name,
        "meal_type": meal.meal_type.value,
        "calories": meal.calories,
        "protein": meal.protein_g,
        "diet_tag": meal.diet_tag,
        "image_url": meal.image_url,
    }


def _parse_snapshot(raw: object) -> Meal | None:
    if not isinstance(raw, dict):
        return None
    return Meal(
        id=MealId.parse(str(raw["id"])),
        name=str(raw.get("meal_name", "")),
        meal_type=MealType(raw["meal_type"]),
        calories=int(raw.get("calories", 0)),
        protein_g=int(raw.get("protein", 0)),
        diet_tag=str(raw.get("diet_tag", "")),
        image_url=str(raw.get("image_url") or DEFAULT_MEAL_IMAGE),
    )


def _parse_plan(row: dict[str, object]) -> DailyPlan:
    return DailyPlan(
        day=date.fromisoformat(str(row["date"])),
        breakfast=_parse_snapshot(row.get("breakfast")),
        lunch=_parse_snapshot(row.get("lunch")),
        dinner=_parse_snapshot(row.get("dinner")),
        water_intake=float(row.get("water_intake") or 0.0),
    )
