"""Meal listing and editing endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from diet_tracker.api.serializers import meal_to_dict
from diet_tracker.domain.models import MealUpdate  # noqa: TC001

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.get("")
def list_meals(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
) -> dict[str, object]:
    """Return all meals of a user, newest first."""
    container: AppContainer = request.app.state.container
    meals = container.meal_service.list_meals(user_id)
    return {"ok": True, "meals": [meal_to_dict(meal) for meal in meals]}


@router.patch("/{meal_id}")
def update_meal(
    meal_id: int, update: MealUpdate, request: Request
) -> dict[str, object]:
    """Overwrite the text and macros of a meal."""
    container: AppContainer = request.app.state.container
    updated_id = container.meal_service.update_meal(meal_id, update)
    return {"ok": True, "id": updated_id}


@router.delete("/{meal_id}")
def delete_meal(meal_id: int, request: Request) -> dict[str, object]:
    """Delete a meal."""
    container: AppContainer = request.app.state.container
    container.meal_service.delete_meal(meal_id)
    return {"ok": True}
