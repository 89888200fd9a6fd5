"""Meal listing and editing."""

import logging
from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.errors import (
    InvalidInputError,
    MealNotFoundError,
    UserNotFoundError,
)
from diet_tracker.domain.models import MealRecord, MealUpdate
from diet_tracker.domain.nutrition import coerce_number
from diet_tracker.domain.periods import parse_user_id
from diet_tracker.services.users import UserRepository

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal rows."""

    def list_meals(self, telegram_id: int) -> list[MealRecord]:
        """Return all meals for a Telegram user, newest first."""

    def update_meal(self, meal_id: int, values: dict[str, object]) -> bool:
        """Update a meal row; return False when no row matched."""

    def delete_meal(self, meal_id: int) -> bool:
        """Delete a meal row; return False when no row matched."""


@dataclass
class MealService:
    """Service for reading and mutating individual meals.

    Writes are synchronous, so a report requested after a mutation returns
    reflects it.
    """

    repository: MealRepository
    user_repository: UserRepository

    def list_meals(self, user_id: int | str | None) -> list[MealRecord]:
        """Return the user's meals, newest first."""
        user = self.user_repository.get_by_id(parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError("user not found")
        meals = self.repository.list_meals(user.telegram_id)
        return sorted(meals, key=lambda meal: meal.created_at, reverse=True)

    def update_meal(self, meal_id: int, update: MealUpdate) -> int:
        """Overwrite the text and macros of a meal."""
        _validate_meal_id(meal_id)
        values: dict[str, object] = {
            "calories": coerce_number(update.calories),
            "protein": coerce_number(update.protein),
            "fat": coerce_number(update.fat),
            "carbs": coerce_number(update.carbs),
        }
        if update.meal_text is not None:
            values["meal_text"] = update.meal_text
        if not self.repository.update_meal(meal_id, values):
            raise MealNotFoundError("meal not found")
        logger.info("Meal updated", extra={"meal_id": meal_id})
        return meal_id

    def delete_meal(self, meal_id: int) -> None:
        """Delete a meal."""
        _validate_meal_id(meal_id)
        if not self.repository.delete_meal(meal_id):
            raise MealNotFoundError("meal not found")
        logger.info("Meal deleted", extra={"meal_id": meal_id})


def _validate_meal_id(meal_id: int) -> None:
    if meal_id <= 0:
        raise InvalidInputError("meal id must be a positive integer")
