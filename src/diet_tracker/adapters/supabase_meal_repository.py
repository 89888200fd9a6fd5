"""Supabase repository for diary rows."""

from dataclasses import dataclass

from supabase import Client

from diet_tracker.adapters.supabase_query import run_query
from diet_tracker.adapters.supabase_report_repository import (
    MEAL_COLUMNS,
    parse_meal_row,
)
from diet_tracker.domain.models import MealRecord
from diet_tracker.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal listing and edits."""

    client: Client

    def list_meals(self, telegram_id: int) -> list[MealRecord]:
        """Return all diary rows for a Telegram user."""
        rows = run_query(
            self.client.table("diary")
            .select(MEAL_COLUMNS)
            .eq("user_id", telegram_id)
            .order("created_at", desc=True),
            "list_meals",
        )
        return [parse_meal_row(row) for row in rows]

    def update_meal(self, meal_id: int, values: dict[str, object]) -> bool:
        """Update a diary row by id."""
        rows = run_query(
            self.client.table("diary").update(values).eq("id", meal_id),
            "update_meal",
        )
        return bool(rows)

    def delete_meal(self, meal_id: int) -> bool:
        """Delete a diary row by id."""
        rows = run_query(
            self.client.table("diary").delete().eq("id", meal_id),
            "delete_meal",
        )
        return bool(rows)
