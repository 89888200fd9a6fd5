"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from diet_tracker.adapters.telegram_client import TelegramClient
from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import StorageUnavailableError
from diet_tracker.domain.models import MealRecord, UserNorm, UserRecord
from diet_tracker.services.commands import ProfileSavedNotifier, StartCommandHandler
from diet_tracker.services.meals import MealRepository, MealService
from diet_tracker.services.reports import ReportRepository, ReportService
from diet_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryStore:
    """Rows shared by the in-memory repositories."""

    users: dict[int, dict[str, object]] = field(default_factory=dict)
    meals: list[MealRecord] = field(default_factory=list)
    next_user_id: int = 1
    next_meal_id: int = 1
    fail_reads: bool = False

    def add_user(self, telegram_id: int, calories: float = 0.0, **norms) -> int:
        user_id = self.next_user_id
        self.next_user_id += 1
        self.users[user_id] = {
            "id": user_id,
            "telegram_id": telegram_id,
            "calories": calories,
            **norms,
        }
        return user_id

    def add_meal(  # noqa: PLR0913
        self,
        telegram_id: int,
        created_at: datetime,
        calories: float | None = 0.0,
        protein: float | None = 0.0,
        fat: float | None = 0.0,
        carbs: float | None = 0.0,
        meal_text: str = "meal",
    ) -> MealRecord:
        meal = MealRecord(
            id=self.next_meal_id,
            user_id=telegram_id,
            meal_text=meal_text,
            calories=calories,
            protein=protein,
            fat=fat,
            carbs=carbs,
            created_at=created_at,
        )
        self.next_meal_id += 1
        self.meals.append(meal)
        return meal


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    store: InMemoryStore

    def get_by_id(self, user_id: int) -> UserRecord | None:
        row = self.store.users.get(user_id)
        if row is None:
            return None
        return UserRecord(id=user_id, telegram_id=int(row["telegram_id"]))

    def get_by_telegram_id(self, telegram_id: int) -> UserRecord | None:
        if self.store.fail_reads:
            raise StorageUnavailableError("storage unavailable")
        for user_id, row in self.store.users.items():
            if row["telegram_id"] == telegram_id:
                return UserRecord(id=user_id, telegram_id=telegram_id)
        return None

    def create_user(self, telegram_id: int) -> UserRecord:
        user_id = self.store.add_user(telegram_id)
        return UserRecord(id=user_id, telegram_id=telegram_id)

    def update_profile(
        self, user_id: int, values: dict[str, object]
    ) -> UserRecord | None:
        row = self.store.users.get(user_id)
        if row is None:
            return None
        row.update(values)
        return UserRecord(id=user_id, telegram_id=int(row["telegram_id"]))


@dataclass
class InMemoryReportRepository(ReportRepository):
    """In-memory report repository for tests."""

    store: InMemoryStore
    meal_reads: list[tuple[int, datetime, datetime]] = field(default_factory=list)

    def find_user_norm(self, user_id: int) -> UserNorm | None:
        if self.store.fail_reads:
            raise StorageUnavailableError("storage unavailable")
        row = self.store.users.get(user_id)
        if row is None:
            return None
        return UserNorm(
            user_id=user_id,
            telegram_id=int(row["telegram_id"]),
            calories=float(row.get("calories") or 0.0),
            protein=row.get("protein"),
            fat=row.get("fat"),
            carbs=row.get("carbs"),
        )

    def find_meals(
        self, telegram_id: int, start: datetime, end: datetime
    ) -> list[MealRecord]:
        if self.store.fail_reads:
            raise StorageUnavailableError("storage unavailable")
        self.meal_reads.append((telegram_id, start, end))
        return [
            meal
            for meal in self.store.meals
            if meal.user_id == telegram_id and start <= meal.created_at <= end
        ]


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    store: InMemoryStore

    def list_meals(self, telegram_id: int) -> list[MealRecord]:
        return [meal for meal in self.store.meals if meal.user_id == telegram_id]

    def update_meal(self, meal_id: int, values: dict[str, object]) -> bool:
        for index, meal in enumerate(self.store.meals):
            if meal.id == meal_id:
                self.store.meals[index] = MealRecord(
                    id=meal.id,
                    user_id=meal.user_id,
                    meal_text=str(values.get("meal_text", meal.meal_text)),
                    calories=values.get("calories", meal.calories),
                    protein=values.get("protein", meal.protein),
                    fat=values.get("fat", meal.fat),
                    carbs=values.get("carbs", meal.carbs),
                    created_at=meal.created_at,
                )
                return True
        return False

    def delete_meal(self, meal_id: int) -> bool:
        before = len(self.store.meals)
        self.store.meals = [meal for meal in self.store.meals if meal.id != meal_id]
        return len(self.store.meals) < before


@dataclass
class FakeTelegramClient(TelegramClient):
    """Fake Telegram client that records messages."""

    messages: list[tuple[int, str]] = field(default_factory=list)
    markups: list[dict | None] = field(default_factory=list)
    fail: bool = False

    async def send_message(
        self, chat_id: int, text: str, reply_markup: dict | None = None
    ) -> None:
        if self.fail:
            raise RuntimeError("telegram is down")
        self.messages.append((chat_id, text))
        self.markups.append(reply_markup)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        telegram_bot_token="test-token",
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        webapp_url="https://diet.example.com",
        default_timezone="UTC",
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def telegram_client() -> FakeTelegramClient:
    return FakeTelegramClient()


@pytest.fixture
def container(
    settings: Settings, store: InMemoryStore, telegram_client: FakeTelegramClient
) -> AppContainer:
    user_repository = InMemoryUserRepository(store)
    user_service = UserService(user_repository)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        telegram_client=telegram_client,
        user_service=user_service,
        start_command_handler=StartCommandHandler(
            user_service=user_service,
            telegram_client=telegram_client,
            webapp_url=settings.webapp_url,
        ),
        profile_saved_notifier=ProfileSavedNotifier(
            telegram_client=telegram_client,
            webapp_url=settings.webapp_url,
        ),
        report_service=ReportService(InMemoryReportRepository(store)),
        meal_service=MealService(
            repository=InMemoryMealRepository(store),
            user_repository=user_repository,
        ),
        close_resources=close_resources,
    )
