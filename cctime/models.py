"""Pydantic models for log records, events and aggregated summaries."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cctime.primitives import DailyDate, IsoTimestamp, SessionId

# ── Raw JSONL record schema ─────────────────────────────────────────

class MessageContent(BaseModel):
    type: Optional[str] = None
    text: Optional[str] = None


class MessageUsage(BaseModel):
    input_tokens: Optional[float] = None
    output_tokens: Optional[float] = None


class UsageMessage(BaseModel):
    content: Optional[Union[str, list[MessageContent]]] = None
    role: Optional[str] = None
    usage: Optional[MessageUsage] = None
    model: Optional[str] = None


class UsageEntry(BaseModel):
    """One line of a Claude conversation log."""
    timestamp: IsoTimestamp
    message: Optional[UsageMessage] = None
    costUSD: Optional[float] = None
    sessionId: Optional[SessionId] = None
    isApiErrorMessage: Optional[bool] = None
    cwd: Optional[str] = None


# ── Aggregation inputs and outputs ──────────────────────────────────

class Event(BaseModel):
    """A timestamped, session-tagged conversation record."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    sessionId: Optional[SessionId] = None
    role: Optional[str] = None
    cwd: Optional[str] = None
    filePath: str = ""

    @field_validator("timestamp")
    @classmethod
    def _require_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("Event timestamp must be timezone-aware")
        # UTC so instants compare by offset, not wall clock, even within one ZoneInfo
        return value.astimezone(timezone.utc)


class DailySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: DailyDate
    firstMessageTime: str  # HH:MM local
    lastMessageTime: str  # HH:MM local
    activeMinutes: int = Field(ge=0)
    estimatedConversationTime: str  # "2h 30m"
    messageCount: int = Field(gt=0)
    sessionIds: list[SessionId] = Field(default_factory=list)


class LoadOptions(BaseModel):
    claudePath: Optional[str] = None
    since: Optional[str] = None  # YYYYMMDD
    until: Optional[str] = None  # YYYYMMDD
    timezone: Optional[str] = None


class LoadResult(BaseModel):
    conversations: list[DailySummary] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)


# ── Report analyses ─────────────────────────────────────────────────

class HourlyActivity(BaseModel):
    hour: int
    messageCount: int = 0
    days: list[DailyDate] = Field(default_factory=list)


class ProjectActivity(BaseModel):
    projectName: str
    messageCount: int = 0
    activeMinutes: int = 0
    sessionCount: int = 0


class SessionDetail(BaseModel):
    start: datetime
    end: datetime
    durationMinutes: int
    messageCount: int
    project: str = "Unknown"


class UserGap(BaseModel):
    gapMinutes: int
    timestamp: datetime
    project: str = "Unknown"
