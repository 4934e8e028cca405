"""Validated string value types shared across cctime.

Each type is a ``str`` subclass that checks its format on construction and
raises :class:`cctime.errors.ValidationError` otherwise. The types also plug
into pydantic so model fields declared with them are validated the same way.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any

from pydantic_core import core_schema

from cctime.errors import ValidationError

_ISO_TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{3}|\.\d{6})?Z$")
_DAILY_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class _ValidatedStr(str):
    """Base for the validated types; subclasses supply ``_validate``."""

    __slots__ = ()

    @classmethod
    def _validate(cls, value: str) -> str:
        raise NotImplementedError

    def __new__(cls, value: Any) -> "_ValidatedStr":
        if cls is _ValidatedStr:
            raise TypeError("_ValidatedStr is a base class; use IsoTimestamp, DailyDate or SessionId")
        if not isinstance(value, str):
            raise ValidationError(f"{cls.__name__} must be a string, got {type(value).__name__}")
        return super().__new__(cls, cls._validate(value))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )


class IsoTimestamp(_ValidatedStr):
    """UTC instant in ``YYYY-MM-DDTHH:MM:SS[.fff]Z`` form."""

    __slots__ = ()

    @classmethod
    def _validate(cls, value: str) -> str:
        if not _ISO_TIMESTAMP_RE.match(value):
            raise ValidationError(f"Invalid ISO timestamp: {value!r}")
        try:
            datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValidationError(f"Invalid ISO timestamp: {value!r}") from exc
        return value

    def to_datetime(self) -> datetime:
        return datetime.fromisoformat(self.replace("Z", "+00:00")).astimezone(timezone.utc)


class DailyDate(_ValidatedStr):
    """Calendar date in ``YYYY-MM-DD`` form."""

    __slots__ = ()

    @classmethod
    def _validate(cls, value: str) -> str:
        if not _DAILY_DATE_RE.match(value):
            raise ValidationError(f"Date must be in YYYY-MM-DD format: {value!r}")
        try:
            date.fromisoformat(value)
        except ValueError as exc:
            raise ValidationError(f"Not a calendar date: {value!r}") from exc
        return value

    @classmethod
    def from_date(cls, value: date) -> "DailyDate":
        return cls(value.strftime("%Y-%m-%d"))

    def to_date(self) -> date:
        return date.fromisoformat(self)


class SessionId(_ValidatedStr):
    """Opaque, non-empty conversation session identifier."""

    __slots__ = ()

    @classmethod
    def _validate(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValidationError("Session ID cannot be empty")
        return cleaned


def create_iso_timestamp(value: str) -> IsoTimestamp:
    return IsoTimestamp(value)


def create_daily_date(value: str) -> DailyDate:
    return DailyDate(value)


def create_session_id(value: str) -> SessionId:
    return SessionId(value)
