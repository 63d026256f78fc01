"""Supabase admin data access."""

from dataclasses import dataclass

from supabase import Client

from nutriplan.services.admin import AdminRepository


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin aggregates."""

    client: Client

    def count_plans(self) -> int:
        """Return the number of plan rows."""
        response = self.client.table("plans").select("id", count="exact").execute()
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def average_water_intake(self) -> float | None:
        """Return the mean water intake across plan rows."""
        response = self.client.table("plans").select("water_intake").execute()
        values = [float(row.get("water_intake") or 0.0) for row in response.data or []]
        if not values:
            return None
        return sum(values) / len(values)
