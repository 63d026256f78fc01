"""Weekly progress against the calorie target."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from nutriplan.domain.progress import DayProgress, DayStatus, StatusKind, WeeklyProgress
from nutriplan.services.plans import PlanService
from nutriplan.services.users import UserService

ON_TARGET_TOLERANCE = 100


def trailing_window(end: date, days: int = 7) -> list[date]:
    """Return ``days`` consecutive dates ending at ``end``, oldest first."""
    return [end - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def classify_day(calories: int, target: int) -> DayStatus:
    """Classify a day's calories against the target.

    Zero calories means nothing was logged, which is not "on target".
    """
    if calories == 0:
        return DayStatus(StatusKind.NO_DATA)
    difference = calories - target
    if abs(difference) < ON_TARGET_TOLERANCE:
        return DayStatus(StatusKind.ON_TARGET)
    if difference > 0:
        return DayStatus(StatusKind.OVER, difference)
    return DayStatus(StatusKind.UNDER, -difference)


@dataclass
class ProgressService:
    """Read-only projection over a user's plans."""

    plan_service: PlanService
    user_service: UserService

    def weekly_progress(self, user_id: UUID, window: list[date]) -> WeeklyProgress:
        """Return per-day totals and averages for the given dates.

        Days without a plan count as zero, so they pull the averages down.
        """
        target = self.user_service.get_user(user_id).targets.calories
        if not window:
            return WeeklyProgress(
                calorie_target=target, days=[], avg_calories=0.0, avg_protein_g=0.0
            )
        plans = self.plan_service.list_plans(user_id, min(window), max(window))
        days = []
        for day in window:
            plan = plans.get(day)
            calories = plan.total_calories if plan else 0
            protein_g = plan.total_protein_g if plan else 0
            days.append(
                DayProgress(
                    day=day,
                    calories=calories,
                    protein_g=protein_g,
                    status=classify_day(calories, target),
                )
            )
        return WeeklyProgress(
            calorie_target=target,
            days=days,
            avg_calories=sum(entry.calories for entry in days) / len(days),
            avg_protein_g=sum(entry.protein_g for entry in days) / len(days),
        )
