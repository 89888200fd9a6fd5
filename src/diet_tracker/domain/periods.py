"""Calendar helpers for bucketing meals into the user's local days.

All conversions take an explicit ``ZoneInfo``. The host's local zone is never
consulted, so the same instant lands in the same day-key on every machine.
"""

import calendar
import re
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from diet_tracker.domain.errors import InvalidInputError

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")
_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LAST_MOMENT = timedelta(milliseconds=1)


def resolve_timezone(name: str | None) -> ZoneInfo:
    """Return the ZoneInfo for an IANA zone id."""
    if not name or not name.strip():
        raise InvalidInputError("invalid timezone")
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidInputError("invalid timezone") from exc


def day_key(instant: datetime, tz: ZoneInfo) -> str:
    """Return the ``YYYY-MM-DD`` local day an instant falls on."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(tz).date().isoformat()


def local_day_bounds(
    first_day: date, last_day: date, tz: ZoneInfo
) -> tuple[datetime, datetime]:
    """Return inclusive UTC bounds covering ``first_day`` through ``last_day``.

    The end is one millisecond before the next local midnight, so a repeated
    hour at the end of a day is still inside the range.
    """
    try:
        start = datetime.combine(first_day, time.min, tzinfo=tz).astimezone(UTC)
        next_midnight = datetime.combine(
            last_day + timedelta(days=1), time.min, tzinfo=tz
        ).astimezone(UTC)
    except OverflowError as exc:
        raise InvalidInputError("date out of range") from exc
    return start, next_midnight - _LAST_MOMENT


def parse_user_id(raw: str | int | None) -> int:
    """Parse a positive integer user id."""
    if raw is None or isinstance(raw, bool):
        raise InvalidInputError("userId is required")
    if isinstance(raw, int):
        value = raw
    else:
        cleaned = raw.strip()
        if not (cleaned.isascii() and cleaned.isdigit()):
            raise InvalidInputError("userId must be a positive integer")
        value = int(cleaned)
    if value <= 0:
        raise InvalidInputError("userId must be a positive integer")
    return value


def parse_day(raw: str | None) -> date:
    """Parse a ``YYYY-MM-DD`` local calendar date."""
    if not raw or not _DAY_PATTERN.match(raw):
        raise InvalidInputError("invalid date format")
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidInputError("invalid date format") from exc


def parse_month(raw: str | None) -> tuple[date, date]:
    """Parse ``YYYY-MM`` into the first and last day of that month."""
    match = _MONTH_PATTERN.match(raw or "")
    if not match:
        raise InvalidInputError("invalid period format")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:  # noqa: PLR2004
        raise InvalidInputError("invalid period format")
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def period_days(start: date, end: date) -> int:
    """Return the number of calendar days in an inclusive period."""
    if start > end:
        raise InvalidInputError("periodStart must not be after periodEnd")
    return (end - start).days + 1
