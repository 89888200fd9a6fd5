"""Bot replies for registration and questionnaire completion."""

import logging
from dataclasses import dataclass

from diet_tracker.adapters.telegram_client import TelegramClient
from diet_tracker.domain.models import UserRecord
from diet_tracker.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class StartCommandHandler:
    """Handle the /start Telegram command."""

    user_service: UserService
    telegram_client: TelegramClient
    webapp_url: str

    async def handle(self, telegram_id: int, chat_id: int) -> UserRecord:
        """Create the user if needed and send the questionnaire button."""
        user = self.user_service.ensure_user(telegram_id)
        url = questionnaire_url(self.webapp_url, user)
        await self.telegram_client.send_message(
            chat_id=chat_id,
            text="Tap the button to fill in the questionnaire.",
            reply_markup={
                "inline_keyboard": [
                    [
                        {
                            "text": "Fill in the questionnaire",
                            "web_app": {"url": url},
                        }
                    ]
                ]
            },
        )
        return user


@dataclass
class ProfileSavedNotifier:
    """Tell the user their questionnaire was stored and show the main menu."""

    telegram_client: TelegramClient
    webapp_url: str

    async def notify(self, user: UserRecord) -> None:
        """Send the confirmation; delivery failures are logged, not raised."""
        try:
            await self.telegram_client.send_message(
                chat_id=user.telegram_id,
                text=(
                    "Questionnaire saved.\n\n"
                    "Send a photo, text or voice note of what you eat "
                    "and the bot will log it."
                ),
                reply_markup=_main_menu(self.webapp_url, user),
            )
        except Exception:
            logger.exception(
                "Failed to send questionnaire confirmation",
                extra={"user_id": user.id},
            )


def questionnaire_url(webapp_url: str, user: UserRecord) -> str:
    return f"{webapp_url.rstrip('/')}/?id={user.id}"


def stats_url(webapp_url: str, user: UserRecord) -> str:
    return f"{webapp_url.rstrip('/')}/stats?id={user.id}"


def _main_menu(webapp_url: str, user: UserRecord) -> dict[str, object]:
    return {
        "keyboard": [
            [
                {
                    "text": "Update questionnaire",
                    "web_app": {"url": questionnaire_url(webapp_url, user)},
                }
            ],
            [{"text": "Get report", "web_app": {"url": stats_url(webapp_url, user)}}],
        ],
        "resize_keyboard": True,
        "one_time_keyboard": False,
    }
