"""Shared helpers for Supabase repositories."""

import logging
from datetime import UTC, datetime
from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError

from diet_tracker.domain.errors import StorageUnavailableError
from diet_tracker.domain.nutrition import coerce_number

logger = logging.getLogger(__name__)


class ExecutableQuery(Protocol):
    """A PostgREST request builder ready to execute."""

    def execute(self) -> Any:
        """Run the request and return the API response."""


def run_query(query: ExecutableQuery, operation: str) -> list[dict[str, Any]]:
    """Execute a query, converting transport and API failures to a typed error."""
    try:
        response = query.execute()
    except (APIError, httpx.HTTPError) as exc:
        logger.exception("Supabase request failed", extra={"operation": operation})
        raise StorageUnavailableError("storage unavailable") from exc
    return list(response.data or [])


def parse_timestamp(raw: object) -> datetime:
    """Parse a timestamptz column value as an aware datetime."""
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, str) and raw:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    else:
        raise StorageUnavailableError("row is missing created_at")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def optional_number(raw: object) -> float | None:
    """Return a numeric column as float, or None when it is absent."""
    if raw is None:
        return None
    return coerce_number(raw)
