"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutriplan.domain.targets import (
    ActivityLevel,
    BodyMetrics,
    FitnessGoal,
    Gender,
    NutritionTargets,
)
from nutriplan.domain.users import UserRecord, UserRole, WeightEntry
from nutriplan.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id."""
        response = (
            self.client.table("users")
            .select("*")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with an email, if present."""
        response = (
            self.client.table("users")
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by name."""
        response = self.client.table("users").select("*").order("name").execute()
        return [_parse_user(row) for row in response.data or []]

    def create_user(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        role: UserRole,
        metrics: BodyMetrics,
        targets: NutritionTargets,
    ) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "name": name,
                    "email": email,
                    "role": role.value,
                    **_profile_payload(metrics, targets, []),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def save_profile(
        self,
        user_id: UUID,
        metrics: BodyMetrics,
        targets: NutritionTargets,
        weight_history: list[WeightEntry],
    ) -> UserRecord | None:
        """Write metrics, targets and history in a single update."""
        response = (
            self.client.table("users")
            .update(_profile_payload(metrics, targets, weight_history))
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def set_role(self, user_id: UUID, role: UserRole) -> UserRecord | None:
        """Update a user's role."""
        response = (
            self.client.table("users")
            .update({"role": role.value})
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def delete_user(self, user_id: UUID) -> bool:
        """Delete a user row."""
        response = self.client.table("users").delete().eq("id", str(user_id)).execute()
        return bool(response.data)


def _profile_payload(
    metrics: BodyMetrics,
    targets: NutritionTargets,
    weight_history: list[WeightEntry],
) -> dict[str, object]:
    return {
        "age": metrics.age,
        "gender": metrics.gender.value,
        "height": metrics.height_cm,
        "weight": metrics.weight_kg,
        "activity_level": metrics.activity_level.value,
        "goal": metrics.goal.value,
        "daily_calories": targets.calories,
        "daily_protein": targets.protein_g,
        "daily_water": targets.water_l,
        "weight_history": [
            {"date": entry.day.isoformat(), "weight": entry.weight_kg}
            for entry in weight_history
        ],
    }


def _parse_user(row: dict[str, object]) -> UserRecord:
    history_raw = row.get("weight_history") or []
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        role=UserRole(row.get("role") or UserRole.USER.value),
        metrics=BodyMetrics(
            age=int(row["age"]),
            gender=Gender(row["gender"]),
            height_cm=float(row["height"]),
            weight_kg=float(row["weight"]),
            activity_level=ActivityLevel(float(row["activity_level"])),
            goal=FitnessGoal(row["goal"]),
        ),
        targets=NutritionTargets(
            calories=int(row["daily_calories"]),
            protein_g=int(row["daily_protein"]),
            water_l=float(row["daily_water"]),
        ),
        weight_history=[
            WeightEntry(
                day=date.fromisoformat(str(entry["date"])),
                weight_kg=float(entry["weight"]),
            )
            for entry in history_raw
            if isinstance(entry, dict)
        ],
    )
