"""Supabase-backed user repository."""

from dataclasses import dataclass
from typing import Any

from supabase import Client

from diet_tracker.adapters.supabase_query import run_query
from diet_tracker.domain.errors import StorageUnavailableError
from diet_tracker.domain.models import UserRecord
from diet_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user for an internal id, if present."""
        rows = run_query(
            self.client.table("users")
            .select("id, telegram_id")
            .eq("id", user_id)
            .limit(1),
            "get_user_by_id",
        )
        return _parse_user(rows[0]) if rows else None

    def get_by_telegram_id(self, telegram_id: int) -> UserRecord | None:
        """Return the user for a Telegram user id, if present."""
        rows = run_query(
            self.client.table("users")
            .select("id, telegram_id")
            .eq("telegram_id", telegram_id)
            .limit(1),
            "get_user_by_telegram_id",
        )
        return _parse_user(rows[0]) if rows else None

    def create_user(self, telegram_id: int) -> UserRecord:
        """Create the user row once, keyed by the unique telegram_id."""
        rows = run_query(
            self.client.table("users").upsert(
                {"telegram_id": telegram_id}, on_conflict="telegram_id"
            ),
            "create_user",
        )
        if not rows:
            raise StorageUnavailableError("failed to create user")
        return _parse_user(rows[0])

    def update_profile(
        self, user_id: int, values: dict[str, object]
    ) -> UserRecord | None:
        """Update questionnaire fields on an existing user row."""
        rows = run_query(
            self.client.table("users").update(values).eq("id", user_id),
            "update_profile",
        )
        return _parse_user(rows[0]) if rows else None


def _parse_user(row: dict[str, Any]) -> UserRecord:
    return UserRecord(id=int(row["id"]), telegram_id=int(row["telegram_id"]))
