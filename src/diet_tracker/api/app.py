"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diet_tracker.api.meals import router as meals_router
from diet_tracker.api.reports import router as reports_router
from diet_tracker.api.telegram_models import TelegramUpdate
from diet_tracker.api.users import router as users_router
from diet_tracker.app_logging import configure_logging
from diet_tracker.config import parse_cors_origins
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import (
    DomainError,
    InvalidInputError,
    MealNotFoundError,
    StorageUnavailableError,
    UserNotFoundError,
)

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    InvalidInputError: 400,
    UserNotFoundError: 404,
    MealNotFoundError: 404,
    StorageUnavailableError: 500,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.include_router(reports_router)
    app.include_router(meals_router)
    app.include_router(users_router)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = error_status(exc)
        if status_code >= 500:  # noqa: PLR2004
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "code": exc.code},
            )
        return JSONResponse(
            status_code=status_code,
            content={"ok": False, "error": exc.message, "code": exc.code},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/telegram/webhook")
    async def telegram_webhook(
        update: TelegramUpdate, request: Request
    ) -> dict[str, str]:
        """Handle Telegram webhook updates."""
        state_container: AppContainer = request.app.state.container
        message = update.message
        if (
            message
            and message.from_user
            and message.text
            and message.text.startswith("/start")
        ):
            try:
                await state_container.start_command_handler.handle(
                    telegram_id=message.from_user.id,
                    chat_id=message.chat.id,
                )
            except StorageUnavailableError:
                try:
                    await state_container.telegram_client.send_message(
                        chat_id=message.chat.id,
                        text="Database error. Please try again later.",
                    )
                except Exception:
                    logger.exception(
                        "Failed to send database error reply",
                        extra={"chat_id": message.chat.id},
                    )
        return {"status": "ok"}

    return app


def error_status(exc: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return 500
