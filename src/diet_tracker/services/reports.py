"""Calendar, day and period reports over a user's meal log."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from diet_tracker.domain.errors import UserNotFoundError
from diet_tracker.domain.models import MealRecord, UserNorm
from diet_tracker.domain.nutrition import (
    coerce_number,
    percentage,
    reduce_totals,
    sum_totals,
)
from diet_tracker.domain.periods import (
    day_key,
    local_day_bounds,
    parse_day,
    parse_month,
    parse_user_id,
    period_days,
    resolve_timezone,
)
from diet_tracker.domain.reports import (
    CalendarDay,
    CalendarReport,
    DayBucket,
    DayReport,
    PeriodReport,
)

logger = logging.getLogger(__name__)


class ReportRepository(Protocol):
    """Read-only persistence interface used by reports."""

    def find_user_norm(self, user_id: int) -> UserNorm | None:
        """Return the user's norms, or None when the user does not exist."""

    def find_meals(
        self, telegram_id: int, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals created within the inclusive UTC range."""


@dataclass
class ReportService:
    """Builds reports by recomputing from storage on every call."""

    repository: ReportRepository

    def calendar(
        self, user_id: int | str | None, month: str | None, timezone_name: str
    ) -> CalendarReport:
        """Return the days of ``month`` that have meals, with percentage of norm."""
        resolved_id = parse_user_id(user_id)
        first_day, last_day = parse_month(month)
        tz = resolve_timezone(timezone_name)
        bounds = local_day_bounds(first_day, last_day, tz)
        norm = self._require_norm(resolved_id)
        meals = self._fetch(norm, bounds)

        buckets = group_by_day(meals, tz)
        days = [
            CalendarDay(
                date=bucket.date,
                percentage=percentage(bucket.totals.calories, norm.calories),
            )
            for bucket in sorted(buckets, key=lambda bucket: bucket.date)
        ]
        return CalendarReport(
            month=first_day.strftime("%Y-%m"),
            daily_norm=norm.calories,
            days=days,
        )

    def day(
        self, user_id: int | str | None, day: str | None, timezone_name: str
    ) -> DayReport:
        """Return totals and meals for a single local day."""
        resolved_id = parse_user_id(user_id)
        target = parse_day(day)
        tz = resolve_timezone(timezone_name)
        bounds = local_day_bounds(target, target, tz)
        norm = self._require_norm(resolved_id)
        meals = self._fetch(norm, bounds)

        meals.sort(key=lambda meal: meal.created_at, reverse=True)
        totals = reduce_totals(meals)
        return DayReport(
            date=target.isoformat(),
            totals=totals,
            daily_norm=norm.calories,
            percentage=percentage(totals.calories, norm.calories),
            meals=meals,
        )

    def period(
        self,
        user_id: int | str | None,
        period_start: str | None,
        period_end: str | None,
        timezone_name: str,
    ) -> PeriodReport:
        """Return totals for an inclusive range of days, grouped by day."""
        resolved_id = parse_user_id(user_id)
        start = parse_day(period_start)
        end = parse_day(period_end)
        days = period_days(start, end)
        tz = resolve_timezone(timezone_name)
        bounds = local_day_bounds(start, end, tz)
        norm = self._require_norm(resolved_id)
        meals = self._fetch(norm, bounds)

        period_norm = norm.calories * days
        buckets = sorted(
            group_by_day(meals, tz), key=lambda bucket: bucket.date, reverse=True
        )
        totals = sum_totals(bucket.totals for bucket in buckets)
        return PeriodReport(
            period_start=start.isoformat(),
            period_end=end.isoformat(),
            meals_by_day=buckets,
            totals=totals,
            daily_norm=norm.calories,
            period_norm=period_norm,
            period_days=days,
            percentage=percentage(totals.calories, period_norm),
        )

    def _require_norm(self, user_id: int) -> UserNorm:
        norm = self.repository.find_user_norm(user_id)
        if norm is None:
            raise UserNotFoundError("user not found")
        if coerce_number(norm.calories) <= 0:
            logger.warning(
                "Daily calorie norm is not set, percentages will be 0",
                extra={"user_id": user_id},
            )
        return norm

    def _fetch(
        self, norm: UserNorm, bounds: tuple[datetime, datetime]
    ) -> list[MealRecord]:
        start, end = bounds
        return list(self.repository.find_meals(norm.telegram_id, start, end))


def group_by_day(meals: list[MealRecord], tz: ZoneInfo) -> list[DayBucket]:
    """Partition meals by local day-key, keeping each day's meals in input order."""
    grouped: dict[str, list[MealRecord]] = {}
    for meal in meals:
        grouped.setdefault(day_key(meal.created_at, tz), []).append(meal)
    return [
        DayBucket(date=key, meals=day_meals, totals=reduce_totals(day_meals))
        for key, day_meals in grouped.items()
    ]
