"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from supabase import create_client

from nutriplan.adapters.supabase_admin_repository import SupabaseAdminRepository
from nutriplan.adapters.supabase_meal_repository import SupabaseMealRepository
from nutriplan.adapters.supabase_overlay_repository import (
    SupabaseMealOverlayRepository,
)
from nutriplan.adapters.supabase_plan_repository import SupabasePlanRepository
from nutriplan.adapters.supabase_user_repository import SupabaseUserRepository
from nutriplan.config import Settings
from nutriplan.services.admin import AdminService
from nutriplan.services.catalog import CatalogService
from nutriplan.services.plans import PlanService
from nutriplan.services.progress import ProgressService
from nutriplan.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    catalog_service: CatalogService
    plan_service: PlanService
    progress_service: ProgressService
    admin_service: AdminService
    today: Callable[[], date]


def local_today(timezone_name: str) -> Callable[[], date]:
    """Return a clock giving the current calendar date in a timezone.

    Every "today" in the app (weight logging, progress windows) reads this one
    clock so entries never straddle two calendars.
    """
    tz = ZoneInfo(timezone_name)

    def today() -> date:
        return datetime.now(tz=tz).date()

    return today


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    plan_repository = SupabasePlanRepository(supabase_client)
    today = local_today(resolved_settings.timezone)
    user_service = UserService(
        repository=SupabaseUserRepository(supabase_client),
        plan_repository=plan_repository,
        today=today,
    )
    catalog_service = CatalogService(
        meal_repository=SupabaseMealRepository(supabase_client),
        overlay_repository=SupabaseMealOverlayRepository(supabase_client),
    )
    plan_service = PlanService(plan_repository)
    progress_service = ProgressService(
        plan_service=plan_service, user_service=user_service
    )
    admin_service = AdminService(
        admin_repository=SupabaseAdminRepository(supabase_client),
        user_service=user_service,
        catalog_service=catalog_service,
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        catalog_service=catalog_service,
        plan_service=plan_service,
        progress_service=progress_service,
        admin_service=admin_service,
        today=today,
    )
