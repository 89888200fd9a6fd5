"""Domain models for the diet tracker."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    telegram_id: int


@dataclass(frozen=True)
class UserNorm:
    """Daily intake targets configured for a user."""

    user_id: int
    telegram_id: int
    calories: float
    protein: float | None = None
    fat: float | None = None
    carbs: float | None = None


@dataclass(frozen=True)
class MealRecord:
    """A logged meal row. Macro values may be missing."""

    id: int
    user_id: int
    meal_text: str
    calories: float | None
    protein: float | None
    fat: float | None
    carbs: float | None
    created_at: datetime


class MealUpdate(BaseModel):
    """Editable fields of a meal row."""

    meal_text: str | None = None
    calories: Any = None
    protein: Any = None
    fat: Any = None
    carbs: Any = None


class ProfileUpdate(BaseModel):
    """Questionnaire answers and the norms computed from them."""

    gender: Literal["male", "female"]
    age: float = Field(gt=0)
    height: float = Field(gt=0)
    weight: float = Field(gt=0)
    activity: Literal["sedentary", "light", "moderate", "active", "very_active"]
    goal: Literal["lose", "gain", "maintain"]
    calories: float = Field(gt=0)
    protein: float = Field(gt=0)
    fat: float = Field(gt=0)
    carbs: float = Field(gt=0)
