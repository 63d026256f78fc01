"""JSON serialization of domain objects for API responses."""

from nutriplan.domain.admin import PlatformStats
from nutriplan.domain.meals import Meal, MealOverlayEntry
from nutriplan.domain.plans import DailyPlan, MealSlot
from nutriplan.domain.progress import WeeklyProgress
from nutriplan.domain.targets import CalorieDistribution, NutritionTargets
from nutriplan.domain.users import UserRecord, WeightEntry, latest_weight


def serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "source": meal.id.source.value,
        "name": meal.name,
        "meal_type": meal.meal_type.value,
        "calories": meal.calories,
        "protein_g": meal.protein_g,
        "diet_tag": meal.diet_tag,
        "image_url": meal.image_url,
    }


def serialize_plan(plan: DailyPlan) -> dict[str, object]:
    payload: dict[str, object] = {"date": plan.day.isoformat()}
    for slot in MealSlot:
        meal = plan.meal_for(slot)
        if meal is not None:
            payload[slot.value] = serialize_meal(meal)
    payload["water_intake"] = plan.water_intake
    payload["total_calories"] = plan.total_calories
    payload["total_protein_g"] = plan.total_protein_g
    return payload


def serialize_targets(targets: NutritionTargets) -> dict[str, object]:
    return {
        "daily_calories": targets.calories,
        "daily_protein_g": targets.protein_g,
        "daily_water_l": targets.water_l,
    }


def serialize_distribution(distribution: CalorieDistribution) -> dict[str, int]:
    return {
        "breakfast": distribution.breakfast,
        "lunch": distribution.lunch,
        "dinner": distribution.dinner,
    }


def serialize_weight_history(history: list[WeightEntry]) -> list[dict[str, object]]:
    return [
        {"date": entry.day.isoformat(), "weight_kg": entry.weight_kg}
        for entry in history
    ]


def serialize_user(user: UserRecord) -> dict[str, object]:
    metrics = user.metrics
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
        "age": metrics.age,
        "gender": metrics.gender.value,
        "height_cm": metrics.height_cm,
        "weight_kg": metrics.weight_kg,
        "latest_weight_kg": latest_weight(user.weight_history),
        "activity_level": metrics.activity_level.value,
        "goal": metrics.goal.value,
        **serialize_targets(user.targets),
        "weight_history": serialize_weight_history(user.weight_history),
    }


def serialize_progress(progress: WeeklyProgress) -> dict[str, object]:
    return {
        "calorie_target": progress.calorie_target,
        "avg_calories": progress.avg_calories,
        "avg_protein_g": progress.avg_protein_g,
        "days": [
            {
                "date": day.day.isoformat(),
                "calories": day.calories,
                "protein_g": day.protein_g,
                "status": day.status.kind.value,
                "difference": day.status.difference,
                "label": day.status.label,
            }
            for day in progress.days
        ],
    }


def serialize_overlay_entry(entry: MealOverlayEntry) -> dict[str, object]:
    return {
        "mock_id": entry.seed_id,
        "deleted": entry.deleted,
        "converted_meal_id": entry.converted_meal_id,
    }


def serialize_stats(stats: PlatformStats) -> dict[str, object]:
    return {
        "total_users": stats.total_users,
        "total_plans": stats.total_plans,
        "total_meals": stats.total_meals,
        "avg_water_l": stats.avg_water_l,
    }
