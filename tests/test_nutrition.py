"""Tests for the totals reducer and percentage-of-norm calculator."""

from datetime import UTC, datetime

from diet_tracker.domain.models import MealRecord
from diet_tracker.domain.nutrition import (
    Totals,
    coerce_number,
    percentage,
    reduce_totals,
    sum_totals,
)


def _meal(calories, protein=0.0, fat=0.0, carbs=0.0) -> MealRecord:
    return MealRecord(
        id=1,
        user_id=10,
        meal_text="meal",
        calories=calories,
        protein=protein,
        fat=fat,
        carbs=carbs,
        created_at=datetime(2024, 1, 5, 12, tzinfo=UTC),
    )


def test_reduce_totals_of_empty_collection_is_zero() -> None:
    assert reduce_totals([]) == Totals(0.0, 0.0, 0.0, 0.0)


def test_reduce_totals_sums_each_field() -> None:
    totals = reduce_totals(
        [_meal(500, 30, 10, 50), _meal(250.5, 12.5, 4, 30)]
    )

    assert totals == Totals(calories=750.5, protein=42.5, fat=14, carbs=80)


def test_reduce_totals_is_additive_over_a_partition() -> None:
    first = [_meal(100, 1, 2, 3), _meal(200, 4, 5, 6)]
    second = [_meal(300, 7, 8, 9)]

    assert reduce_totals(first + second) == reduce_totals(first) + reduce_totals(
        second
    )


def test_reduce_totals_of_fractional_values_is_exact_in_any_order() -> None:
    values = [811.3, 27.5, 22.9, 487.3, 845.2, 343.1]

    forward = reduce_totals(_meal(value) for value in values)
    backward = reduce_totals(_meal(value) for value in reversed(values))
    by_day = sum_totals(
        reduce_totals(_meal(value) for value in values[index : index + 2])
        for index in (0, 2, 4)
    )

    assert forward.calories == 2537.3
    assert forward == backward == by_day


def test_reduce_totals_treats_missing_values_as_zero() -> None:
    totals = reduce_totals([_meal(400, protein=None, fat=None, carbs=20)])

    assert totals == Totals(calories=400, protein=0, fat=0, carbs=20)


def test_reduce_totals_ignores_non_finite_and_malformed_values() -> None:
    totals = reduce_totals(
        [_meal(float("nan"), float("inf"), "abc", "12.5")]  # type: ignore[arg-type]
    )

    assert totals == Totals(calories=0, protein=0, fat=0, carbs=12.5)


def test_coerce_number_rejects_booleans() -> None:
    assert coerce_number(True) == 0.0


def test_percentage_rounds_to_one_decimal() -> None:
    assert percentage(1500, 2000) == 75.0
    assert percentage(1, 3) == 33.3


def test_percentage_rounds_half_away_from_zero() -> None:
    assert percentage(1001, 2000) == 50.1
    assert percentage(999, 2000) == 50.0


def test_percentage_with_zero_or_missing_norm_is_zero() -> None:
    assert percentage(1500, 0) == 0.0
    assert percentage(1500, -100) == 0.0
    assert percentage(1500, None) == 0.0


def test_percentage_is_monotonic_for_fixed_norm() -> None:
    values = [percentage(consumed, 1800) for consumed in range(0, 4000, 7)]

    assert values == sorted(values)
