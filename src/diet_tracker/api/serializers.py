"""JSON shapes returned by the HTTP API."""

from diet_tracker.domain.models import MealRecord
from diet_tracker.domain.nutrition import Totals
from diet_tracker.domain.reports import (
    CalendarReport,
    DayBucket,
    DayReport,
    PeriodReport,
)


def meal_to_dict(meal: MealRecord) -> dict[str, object]:
    return {
        "id": meal.id,
        "user_id": meal.user_id,
        "meal_text": meal.meal_text,
        "calories": meal.calories,
        "protein": meal.protein,
        "fat": meal.fat,
        "carbs": meal.carbs,
        "created_at": meal.created_at.isoformat(),
    }


def totals_to_dict(totals: Totals) -> dict[str, float]:
    return {
        "calories": totals.calories,
        "protein": totals.protein,
        "fat": totals.fat,
        "carbs": totals.carbs,
    }


def calendar_to_dict(report: CalendarReport) -> dict[str, object]:
    return {
        "ok": True,
        "month": report.month,
        "dailyNorm": report.daily_norm,
        "dates": report.dates,
        "datesWithPercentage": [
            {"date": day.date, "percentage": day.percentage} for day in report.days
        ],
    }


def day_report_to_dict(report: DayReport) -> dict[str, object]:
    return {
        "ok": True,
        "report": {
            "date": report.date,
            "totals": totals_to_dict(report.totals),
            "dailyNorm": report.daily_norm,
            "percentage": report.percentage,
            "meals": [meal_to_dict(meal) for meal in report.meals],
            "mealsCount": report.meals_count,
        },
    }


def period_report_to_dict(report: PeriodReport) -> dict[str, object]:
    return {
        "ok": True,
        "report": {
            "periodStart": report.period_start,
            "periodEnd": report.period_end,
            "mealsByDay": [_bucket_to_dict(bucket) for bucket in report.meals_by_day],
            "totals": totals_to_dict(report.totals),
            "dailyNorm": report.daily_norm,
            "periodNorm": report.period_norm,
            "periodDays": report.period_days,
            "percentage": report.percentage,
            "mealsCount": report.meals_count,
        },
    }


def _bucket_to_dict(bucket: DayBucket) -> dict[str, object]:
    return {
        "date": bucket.date,
        "meals": [meal_to_dict(meal) for meal in bucket.meals],
        "totals": totals_to_dict(bucket.totals),
    }
