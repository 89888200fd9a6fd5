"""Nutrient totals and percentage-of-norm arithmetic."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from diet_tracker.domain.models import MealRecord

_ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True)
class Totals:
    """Summed macro values for a set of meals."""

    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0

    def __add__(self, other: "Totals") -> "Totals":
        return Totals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            fat=self.fat + other.fat,
            carbs=self.carbs + other.carbs,
        )


def coerce_number(value: object) -> float:
    """Return ``value`` as a float, or 0 when it is missing or not a finite number."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def reduce_totals(meals: Iterable[MealRecord]) -> Totals:
    """Sum calories, protein, fat and carbs over ``meals``.

    Values are accumulated as decimals, so the result does not depend on the
    order of ``meals`` and ``811.3 + 27.5`` stays ``838.8``.
    """
    return _accumulate(
        (meal.calories, meal.protein, meal.fat, meal.carbs) for meal in meals
    )


def sum_totals(parts: Iterable[Totals]) -> Totals:
    """Combine already reduced totals with the same decimal accumulation."""
    return _accumulate(
        (part.calories, part.protein, part.fat, part.carbs) for part in parts
    )


def _accumulate(rows: Iterable[tuple[object, object, object, object]]) -> Totals:
    sums = [Decimal(0)] * 4
    for row in rows:
        sums = [
            total + Decimal(str(coerce_number(value)))
            for total, value in zip(sums, row, strict=True)
        ]
    calories, protein, fat, carbs = (float(total) for total in sums)
    return Totals(calories=calories, protein=protein, fat=fat, carbs=carbs)


def percentage(consumed: float, norm: float | None) -> float:
    """Return consumed calories as a percentage of the norm, one decimal place.

    A missing or non-positive norm yields 0. Callers that need to tell the user
    no norm is configured must check the norm itself.
    """
    norm_value = coerce_number(norm)
    if norm_value <= 0:
        return 0.0
    ratio = Decimal(str(coerce_number(consumed))) / Decimal(str(norm_value))
    return float((ratio * 100).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
