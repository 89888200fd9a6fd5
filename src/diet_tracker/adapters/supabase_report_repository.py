"""Supabase repository for report reads."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from supabase import Client

from diet_tracker.adapters.supabase_query import (
    optional_number,
    parse_timestamp,
    run_query,
)
from diet_tracker.domain.models import MealRecord, UserNorm
from diet_tracker.services.reports import ReportRepository

MEAL_COLUMNS = "id, user_id, meal_text, calories, protein, fat, carbs, created_at"


@dataclass
class SupabaseReportRepository(ReportRepository):
    """Supabase implementation for report queries."""

    client: Client

    def find_user_norm(self, user_id: int) -> UserNorm | None:
        """Return the daily norms stored on the user row."""
        rows = run_query(
            self.client.table("users")
            .select("id, telegram_id, calories, protein, fat, carbs")
            .eq("id", user_id)
            .limit(1),
            "find_user_norm",
        )
        if not rows:
            return None
        row = rows[0]
        return UserNorm(
            user_id=int(row["id"]),
            telegram_id=int(row["telegram_id"]),
            calories=optional_number(row.get("calories")) or 0.0,
            protein=optional_number(row.get("protein")),
            fat=optional_number(row.get("fat")),
            carbs=optional_number(row.get("carbs")),
        )

    def find_meals(
        self, telegram_id: int, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return diary rows created within the inclusive range."""
        rows = run_query(
            self.client.table("diary")
            .select(MEAL_COLUMNS)
            .eq("user_id", telegram_id)
            .gte("created_at", start.isoformat())
            .lte("created_at", end.isoformat())
            .order("created_at", desc=False),
            "find_meals",
        )
        return [parse_meal_row(row) for row in rows]


def parse_meal_row(row: dict[str, Any]) -> MealRecord:
    """Build a meal record from a diary row."""
    return MealRecord(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        meal_text=str(row.get("meal_text") or ""),
        calories=optional_number(row.get("calories")),
        protein=optional_number(row.get("protein")),
        fat=optional_number(row.get("fat")),
        carbs=optional_number(row.get("carbs")),
        created_at=parse_timestamp(row.get("created_at")),
    )
