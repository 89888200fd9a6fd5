"""Questionnaire save endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from diet_tracker.domain.models import ProfileUpdate  # noqa: TC001

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/save")
async def save_profile(
    profile: ProfileUpdate,
    request: Request,
    user_id: str | None = Query(default=None, alias="id"),
) -> dict[str, object]:
    """Store questionnaire answers on a user created by the bot."""
    container: AppContainer = request.app.state.container
    user = container.user_service.save_profile(user_id, profile)
    await container.profile_saved_notifier.notify(user)
    return {"ok": True, "id": user.id}
