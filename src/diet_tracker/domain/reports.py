"""Report shapes produced by the report service."""

from dataclasses import dataclass

from diet_tracker.domain.models import MealRecord
from diet_tracker.domain.nutrition import Totals


@dataclass(frozen=True)
class CalendarDay:
    """A local day with at least one meal and its share of the daily norm."""

    date: str
    percentage: float


@dataclass(frozen=True)
class CalendarReport:
    """Days of a month that have logged meals, ascending."""

    month: str
    daily_norm: float
    days: list[CalendarDay]

    @property
    def dates(self) -> list[str]:
        return [day.date for day in self.days]


@dataclass(frozen=True)
class DayBucket:
    """Meals of one local day and their totals."""

    date: str
    meals: list[MealRecord]
    totals: Totals


@dataclass(frozen=True)
class DayReport:
    """Totals and meals for a single local day, newest meal first."""

    date: str
    totals: Totals
    daily_norm: float
    percentage: float
    meals: list[MealRecord]

    @property
    def meals_count(self) -> int:
        return len(self.meals)


@dataclass(frozen=True)
class PeriodReport:
    """Totals for an inclusive range of local days, newest day first."""

    period_start: str
    period_end: str
    meals_by_day: list[DayBucket]
    totals: Totals
    daily_norm: float
    period_norm: float
    period_days: int
    percentage: float

    @property
    def meals_count(self) -> int:
        return sum(len(bucket.meals) for bucket in self.meals_by_day)
