"""Member-facing API endpoints: profile, catalog, plans and progress."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, status

from nutriplan.api.schemas import (
    AssignMealRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    WaterAdjustRequest,
    WaterRequest,
    WeightLogRequest,
)
from nutriplan.api.serializers import (
    serialize_distribution,
    serialize_meal,
    serialize_plan,
    serialize_progress,
    serialize_targets,
    serialize_user,
    serialize_weight_history,
)
from nutriplan.domain.meals import MealId, MealType
from nutriplan.domain.plans import MealSlot
from nutriplan.services.catalog import DietFilter
from nutriplan.services.progress import trailing_window
from nutriplan.services.targets import calorie_distribution

if TYPE_CHECKING:
    from nutriplan.containers import AppContainer

router = APIRouter(tags=["members"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def register_user(
    payload: RegisterRequest, request: Request
) -> dict[str, object]:
    """Create an account with default metrics."""
    user = _container(request).user_service.register(payload.name, payload.email)
    return serialize_user(user)


@router.get("/users/{user_id}")
async def get_user(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a user's profile and targets."""
    return serialize_user(_container(request).user_service.get_user(user_id))


@router.put("/users/{user_id}/profile")
async def update_profile(
    user_id: UUID, payload: ProfileUpdateRequest, request: Request
) -> dict[str, object]:
    """Update body metrics; targets are recomputed from the result."""
    user = _container(request).user_service.update_profile(
        user_id, payload.changes()
    )
    return serialize_user(user)


@router.post("/users/{user_id}/weight")
async def log_weight(
    user_id: UUID, payload: WeightLogRequest, request: Request
) -> dict[str, object]:
    """Log today's weight."""
    result = _container(request).user_service.log_weight(user_id, payload.weight_kg)
    return {
        "weight_history": serialize_weight_history(result.history),
        "targets": serialize_targets(result.targets),
    }


@router.get("/users/{user_id}/targets")
async def get_targets(user_id: UUID, request: Request) -> dict[str, object]:
    """Return daily targets and the per-slot calorie split."""
    user = _container(request).user_service.get_user(user_id)
    return {
        **serialize_targets(user.targets),
        "distribution": serialize_distribution(
            calorie_distribution(user.targets.calories)
        ),
    }


@router.get("/meals")
async def list_meals(
    request: Request,
    meal_type: MealType | None = None,
    q: str | None = None,
    diet: DietFilter | None = None,
) -> dict[str, object]:
    """Browse the meal catalog."""
    meals = _container(request).catalog_service.search(
        meal_type=meal_type, query=q, diet=diet
    )
    return {"meals": [serialize_meal(meal) for meal in meals]}


@router.get("/users/{user_id}/recommendations")
async def recommend_meals(
    user_id: UUID,
    slot: MealSlot,
    request: Request,
    limit: int = Query(default=5, ge=1, le=50),
) -> dict[str, object]:
    """Suggest meals closest to the slot's share of the calorie target."""
    container = _container(request)
    user = container.user_service.get_user(user_id)
    distribution = calorie_distribution(user.targets.calories)
    budget = getattr(distribution, slot.value)
    meals = container.catalog_service.recommend(slot.meal_type, budget, limit)
    return {
        "slot": slot.value,
        "calorie_budget": budget,
        "meals": [serialize_meal(meal) for meal in meals],
    }


@router.get("/users/{user_id}/plans/{day}")
async def get_plan(user_id: UUID, day: date, request: Request) -> dict[str, object]:
    """Return the plan for a date (empty when nothing is stored)."""
    return serialize_plan(_container(request).plan_service.get_plan(user_id, day))


@router.put("/users/{user_id}/plans/{day}/meals")
async def assign_meal(
    user_id: UUID, day: date, payload: AssignMealRequest, request: Request
) -> dict[str, object]:
    """Put a catalog meal into a slot."""
    container = _container(request)
    try:
        meal_id = MealId.parse(payload.meal_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    container.user_service.get_user(user_id)
    meal = container.catalog_service.get_meal(meal_id)
    plan = container.plan_service.assign_meal(user_id, day, meal, payload.slot)
    return serialize_plan(plan)


@router.delete("/users/{user_id}/plans/{day}/meals/{slot}")
async def remove_meal(
    user_id: UUID, day: date, slot: MealSlot, request: Request
) -> dict[str, object]:
    """Clear a slot."""
    plan = _container(request).plan_service.remove_meal(user_id, day, slot)
    return serialize_plan(plan)


@router.put("/users/{user_id}/plans/{day}/water")
async def set_water(
    user_id: UUID, day: date, payload: WaterRequest, request: Request
) -> dict[str, object]:
    """Set water intake for a date."""
    plan = _container(request).plan_service.set_water(user_id, day, payload.amount)
    return serialize_plan(plan)


@router.post("/users/{user_id}/plans/{day}/water/adjust")
async def adjust_water(
    user_id: UUID, day: date, payload: WaterAdjustRequest, request: Request
) -> dict[str, object]:
    """Add or remove water for a date."""
    plan = _container(request).plan_service.adjust_water(user_id, day, payload.delta)
    return serialize_plan(plan)


@router.get("/users/{user_id}/progress")
async def weekly_progress(
    user_id: UUID,
    request: Request,
    end: date | None = None,
    days: int = Query(default=7, ge=1, le=31),
) -> dict[str, object]:
    """Return calorie and protein progress for the trailing window."""
    container = _container(request)
    window = trailing_window(end or container.today(), days)
    progress = container.progress_service.weekly_progress(user_id, window)
    return serialize_progress(progress)
