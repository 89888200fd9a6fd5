"""Report endpoints consumed by the stats web app."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from diet_tracker.api.serializers import (
    calendar_to_dict,
    day_report_to_dict,
    period_report_to_dict,
)

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/report", tags=["reports"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _timezone(container: AppContainer, tz: str | None) -> str:
    return tz or container.settings.default_timezone


@router.get("/calendar")
def calendar_report(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
    month: str | None = None,
    tz: str | None = None,
) -> dict[str, object]:
    """Return the days of a month that have meals, with percentage of norm."""
    container = _container(request)
    report = container.report_service.calendar(
        user_id, month, _timezone(container, tz)
    )
    return calendar_to_dict(report)


@router.get("/day")
def day_report(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
    date: str | None = None,
    tz: str | None = None,
) -> dict[str, object]:
    """Return totals, percentage and meals for one local day."""
    container = _container(request)
    report = container.report_service.day(user_id, date, _timezone(container, tz))
    return day_report_to_dict(report)


@router.get("/period")
def period_report(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
    period_start: str | None = Query(default=None, alias="periodStart"),
    period_end: str | None = Query(default=None, alias="periodEnd"),
    tz: str | None = None,
) -> dict[str, object]:
    """Return totals and per-day meals for an inclusive date range."""
    container = _container(request)
    report = container.report_service.period(
        user_id, period_start, period_end, _timezone(container, tz)
    )
    return period_report_to_dict(report)
