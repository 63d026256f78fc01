"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from nutriplan.api.schemas import MealRequest, RoleRequest
from nutriplan.api.serializers import (
    serialize_meal,
    serialize_overlay_entry,
    serialize_stats,
    serialize_user,
)
from nutriplan.domain.errors import NotFoundError
from nutriplan.domain.meals import MealId, MealSource

if TYPE_CHECKING:
    from nutriplan.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _meal_id(source: MealSource, meal_id: str) -> MealId:
    try:
        return MealId.parse(f"{source}:{meal_id}")
    except ValueError as exc:
        raise NotFoundError("meal", f"{source}:{meal_id}") from exc


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users", dependencies=[Depends(require_admin)])
async def list_users(request: Request) -> dict[str, object]:
    """Return all users with their goals and calorie targets."""
    container: AppContainer = request.app.state.container
    return {"users": container.admin_service.list_users()}


@router.post("/users/{user_id}/role", dependencies=[Depends(require_admin)])
async def change_role(
    user_id: UUID, payload: RoleRequest, request: Request
) -> dict[str, object]:
    """Change a user's access level."""
    container: AppContainer = request.app.state.container
    user = container.user_service.set_role(user_id, payload.role)
    return serialize_user(user)


@router.delete("/users/{user_id}", dependencies=[Depends(require_admin)])
async def delete_user(user_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a user and their plans."""
    container: AppContainer = request.app.state.container
    container.user_service.delete_user(user_id)
    return {"success": True}


@router.get("/stats", dependencies=[Depends(require_admin)])
async def platform_stats(request: Request) -> dict[str, object]:
    """Return platform counters."""
    container: AppContainer = request.app.state.container
    return serialize_stats(container.admin_service.get_stats())


@router.get("/meals", dependencies=[Depends(require_admin)])
async def list_meals(request: Request) -> dict[str, object]:
    """Return the effective catalog."""
    container: AppContainer = request.app.state.container
    meals = container.catalog_service.list_meals()
    return {"meals": [serialize_meal(meal) for meal in meals]}


@router.post(
    "/meals",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def create_meal(payload: MealRequest, request: Request) -> dict[str, object]:
    """Publish a new meal."""
    container: AppContainer = request.app.state.container
    meal = container.catalog_service.create_meal(payload.to_draft())
    return serialize_meal(meal)


@router.put("/meals/{source}/{meal_id}", dependencies=[Depends(require_admin)])
async def update_meal(
    source: MealSource, meal_id: str, payload: MealRequest, request: Request
) -> dict[str, object]:
    """Edit a meal. Editing a seed meal replaces it with a persisted copy."""
    container: AppContainer = request.app.state.container
    meal = container.catalog_service.update_meal(
        _meal_id(source, meal_id), payload.to_draft()
    )
    return serialize_meal(meal)


@router.delete("/meals/{source}/{meal_id}", dependencies=[Depends(require_admin)])
async def delete_meal(
    source: MealSource, meal_id: str, request: Request
) -> dict[str, bool]:
    """Remove a meal from the catalog."""
    container: AppContainer = request.app.state.container
    container.catalog_service.delete_meal(_meal_id(source, meal_id))
    return {"success": True}


@router.get("/mock-meals/meta", dependencies=[Depends(require_admin)])
async def seed_overlay(request: Request) -> dict[str, object]:
    """Return deleted/converted status rows for seed meals."""
    container: AppContainer = request.app.state.container
    entries = container.catalog_service.overlay_entries()
    return {"entries": [serialize_overlay_entry(entry) for entry in entries]}
