"""Shared timezone, date bucketing and duration formatting helpers."""
from __future__ import annotations

import re
from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cctime.errors import ValidationError
from cctime.primitives import DailyDate

_COMPACT_DATE_RE = re.compile(r"^\d{8}$")


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Return the named zone, or ``None`` for the system-local zone.

    ``None`` is passed straight to ``datetime.astimezone`` which then applies
    the host's local rules, DST included.
    """
    token = (name or "").strip()
    if not token or token.lower() == "local":
        return None
    if token.upper() in {"UTC", "Z"}:
        return timezone.utc
    try:
        return ZoneInfo(token)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone: {token!r}") from exc


def to_local(value: datetime, tz: tzinfo | None = None) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)


def format_time(value: datetime, tz: tzinfo | None = None) -> str:
    """Render an instant as local ``HH:MM``."""
    return to_local(value, tz).strftime("%H:%M")


def local_date(value: datetime, tz: tzinfo | None = None) -> date:
    return to_local(value, tz).date()


def format_date(value: datetime, tz: tzinfo | None = None) -> DailyDate:
    """Render an instant as its local ``YYYY-MM-DD`` calendar date."""
    return DailyDate.from_date(local_date(value, tz))


def parse_compact_date(value: str | None) -> date | None:
    """Parse a ``YYYYMMDD`` filter bound. Empty input means no bound."""
    token = (value or "").strip()
    if not token:
        return None
    if not _COMPACT_DATE_RE.match(token):
        raise ValidationError(f"Date filter must be in YYYYMMDD format: {token!r}")
    try:
        return datetime.strptime(token, "%Y%m%d").date()
    except ValueError as exc:
        raise ValidationError(f"Not a calendar date: {token!r}") from exc


def format_duration(total_minutes: int) -> str:
    if total_minutes < 60:
        return f"{total_minutes}m"
    hours, minutes = divmod(total_minutes, 60)
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"
