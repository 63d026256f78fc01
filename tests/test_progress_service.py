"""Tests for weekly progress."""

from datetime import date

import pytest

from nutriplan.domain.meals import MealType
from nutriplan.domain.progress import StatusKind
from nutriplan.domain.targets import FitnessGoal
from nutriplan.domain.users import UserRecord
from nutriplan.services.plans import PlanService
from nutriplan.services.progress import (
    ProgressService,
    classify_day,
    trailing_window,
)
from nutriplan.services.users import UserService
from tests.conftest import make_meal


@pytest.fixture
def progress_service(
    plan_service: PlanService, user_service: UserService
) -> ProgressService:
    return ProgressService(plan_service=plan_service, user_service=user_service)


def _weight_loss_user(user_service: UserService) -> UserRecord:
    user = user_service.register("Ada", "ada@example.com")
    return user_service.update_profile(
        user.id,
        {
            "age": 30,
            "height_cm": 180.0,
            "weight_kg": 80.0,
            "goal": FitnessGoal.WEIGHT_LOSS,
        },
    )


def test_trailing_window_is_oldest_first() -> None:
    window = trailing_window(date(2024, 1, 7))

    assert len(window) == 7
    assert window[0] == date(2024, 1, 1)
    assert window[-1] == date(2024, 1, 7)


def test_classify_day() -> None:
    assert classify_day(0, 2000).kind is StatusKind.NO_DATA
    assert classify_day(1901, 2000).kind is StatusKind.ON_TARGET
    assert classify_day(2099, 2000).kind is StatusKind.ON_TARGET
    assert classify_day(2100, 2000).label == "over by 100"
    assert classify_day(1900, 2000).label == "under by 100"


def test_single_day_under_target(
    progress_service: ProgressService,
    plan_service: PlanService,
    user_service: UserService,
) -> None:
    user = _weight_loss_user(user_service)
    day = date(2024, 1, 1)
    plan_service.assign_meal(
        user.id,
        day,
        make_meal("b", meal_type=MealType.BREAKFAST, calories=450, protein_g=30),
    )
    plan_service.assign_meal(
        user.id,
        day,
        make_meal("l", meal_type=MealType.LUNCH, calories=600, protein_g=40),
    )
    plan_service.set_water(user.id, day, 1.5)

    progress = progress_service.weekly_progress(user.id, [day])

    [entry] = progress.days
    assert progress.calorie_target == 2259
    assert (entry.calories, entry.protein_g) == (1050, 70)
    assert entry.status.kind is StatusKind.UNDER
    assert entry.status.label == "under by 1209"


def test_days_without_plans_have_no_data_and_lower_averages(
    progress_service: ProgressService,
    plan_service: PlanService,
    user_service: UserService,
) -> None:
    user = _weight_loss_user(user_service)
    window = trailing_window(date(2024, 1, 7))
    plan_service.assign_meal(
        user.id,
        date(2024, 1, 7),
        make_meal("d", meal_type=MealType.DINNER, calories=700, protein_g=35),
    )

    progress = progress_service.weekly_progress(user.id, window)

    statuses = [entry.status.kind for entry in progress.days]
    assert statuses[:6] == [StatusKind.NO_DATA] * 6
    assert progress.avg_calories == pytest.approx(100.0)
    assert progress.avg_protein_g == pytest.approx(5.0)


def test_plan_with_only_water_counts_as_no_data(
    progress_service: ProgressService,
    plan_service: PlanService,
    user_service: UserService,
) -> None:
    user = _weight_loss_user(user_service)
    day = date(2024, 1, 3)
    plan_service.set_water(user.id, day, 2.0)

    progress = progress_service.weekly_progress(user.id, [day])

    assert progress.days[0].status.kind is StatusKind.NO_DATA


def test_empty_window(
    progress_service: ProgressService, user_service: UserService
) -> None:
    user = user_service.register("Ada", "ada@example.com")

    progress = progress_service.weekly_progress(user.id, [])

    assert progress.days == []
    assert progress.avg_calories == 0.0
