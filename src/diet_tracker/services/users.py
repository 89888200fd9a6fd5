"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.errors import UserNotFoundError
from diet_tracker.domain.models import ProfileUpdate, UserRecord
from diet_tracker.domain.periods import parse_user_id


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user for an internal id, if present."""

    def get_by_telegram_id(self, telegram_id: int) -> UserRecord | None:
        """Return the user for a Telegram user id, if present."""

    def create_user(self, telegram_id: int) -> UserRecord:
        """Create and return a new user record."""

    def update_profile(
        self, user_id: int, values: dict[str, object]
    ) -> UserRecord | None:
        """Update questionnaire fields; return None when no row matched."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, telegram_id: int) -> UserRecord:
        """Ensure a user exists for the Telegram id and return it."""
        existing = self.repository.get_by_telegram_id(telegram_id)
        if existing:
            return existing
        return self.repository.create_user(telegram_id)

    def save_profile(
        self, user_id: int | str | None, profile: ProfileUpdate
    ) -> UserRecord:
        """Store questionnaire answers on an existing user.

        Users are only created by the bot's /start, never here.
        """
        updated = self.repository.update_profile(
            parse_user_id(user_id), profile.model_dump()
        )
        if updated is None:
            raise UserNotFoundError("user not found, send /start to the bot first")
        return updated
