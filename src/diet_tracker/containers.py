"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from diet_tracker.adapters.supabase_report_repository import (
    SupabaseReportRepository,
)
from diet_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from diet_tracker.adapters.telegram_client import (
    HttpxTelegramClient,
    TelegramClient,
)
from diet_tracker.config import Settings
from diet_tracker.services.commands import ProfileSavedNotifier, StartCommandHandler
from diet_tracker.services.meals import MealService
from diet_tracker.services.reports import ReportService
from diet_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    telegram_client: TelegramClient
    user_service: UserService
    start_command_handler: StartCommandHandler
    profile_saved_notifier: ProfileSavedNotifier
    report_service: ReportService
    meal_service: MealService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    report_repository = SupabaseReportRepository(supabase_client)
    user_service = UserService(user_repository)
    telegram_client = HttpxTelegramClient.create(resolved_settings.telegram_bot_token)
    start_handler = StartCommandHandler(
        user_service=user_service,
        telegram_client=telegram_client,
        webapp_url=resolved_settings.webapp_url,
    )
    notifier = ProfileSavedNotifier(
        telegram_client=telegram_client,
        webapp_url=resolved_settings.webapp_url,
    )

    async def close_resources() -> None:
        await telegram_client.close()

    return AppContainer(
        settings=resolved_settings,
        telegram_client=telegram_client,
        user_service=user_service,
        start_command_handler=start_handler,
        profile_saved_notifier=notifier,
        report_service=ReportService(report_repository),
        meal_service=MealService(
            repository=meal_repository, user_repository=user_repository
        ),
        close_resources=close_resources,
    )
