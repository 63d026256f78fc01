"""Supabase repository for the seed meal overlay."""

from dataclasses import dataclass

from supabase import Client

from nutriplan.domain.meals import MealOverlayEntry
from nutriplan.services.catalog import MealOverlayRepository


@dataclass
class SupabaseMealOverlayRepository(MealOverlayRepository):
    """Supabase implementation of the ``mock_meal_meta`` overlay table."""

    client: Client

    def list_entries(self) -> list[MealOverlayEntry]:
        """Return all overlay rows."""
        response = (
            self.client.table("mock_meal_meta")
            .select("mock_id, deleted, converted_meal_id")
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def mark_deleted(self, seed_id: str) -> MealOverlayEntry:
        """Upsert a deleted flag for a seed meal."""
        return self._upsert({"mock_id": seed_id, "deleted": True})

    def record_conversion(
        self, seed_id: str, converted_meal_id: int
    ) -> MealOverlayEntry:
        """Upsert the persisted replacement of a seed meal."""
        return self._upsert(
            {"mock_id": seed_id, "converted_meal_id": converted_meal_id}
        )

    def _upsert(self, payload: dict[str, object]) -> MealOverlayEntry:
        response = (
            self.client.table("mock_meal_meta")
            .upsert(payload, on_conflict="mock_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update seed meal overlay")
        return _parse_entry(response.data[0])


def _parse_entry(row: dict[str, object]) -> MealOverlayEntry:
    converted = row.get("converted_meal_id")
    return MealOverlayEntry(
        seed_id=str(row["mock_id"]),
        deleted=bool(row.get("deleted")),
        converted_meal_id=int(converted) if converted is not None else None,
    )
