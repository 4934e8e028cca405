"""Read-only API over aggregated conversation data."""
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query

from cctime import config
from cctime.analysis import hourly_activity, project_activity, session_details, user_gaps
from cctime.date_utils import resolve_timezone
from cctime.errors import DataSourceError, ValidationError
from cctime.loader import load_daily_conversation_data
from cctime.models import LoadOptions, LoadResult

conversations_router = APIRouter(prefix="/api/conversations", tags=["conversations"])


def _load(
    since: Optional[str],
    until: Optional[str],
    timezone: Optional[str],
    claude_path: Optional[str],
) -> LoadResult:
    options = LoadOptions(claudePath=claude_path, since=since, until=until, timezone=timezone)
    try:
        return load_daily_conversation_data(options)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DataSourceError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def _tz(timezone: Optional[str]):
    try:
        return resolve_timezone(timezone if timezone is not None else config.TIMEZONE)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@conversations_router.get("/daily")
def get_daily(
    since: Optional[str] = Query(None, description="YYYYMMDD"),
    until: Optional[str] = Query(None, description="YYYYMMDD"),
    days: Optional[int] = Query(None, ge=1, le=config.MAX_DAYS),
    timezone: Optional[str] = Query(None),
    claudePath: Optional[str] = Query(None),
) -> dict[str, Any]:
    result = _load(since, until, timezone, claudePath)
    items = result.conversations[:days] if days else result.conversations
    return {
        "items": [c.model_dump(mode="json") for c in items],
        "total": len(items),
        "messageCount": sum(c.messageCount for c in items),
    }


@conversations_router.get("/projects")
def get_projects(
    since: Optional[str] = Query(None),
    until: Optional[str] = Query(None),
    timezone: Optional[str] = Query(None),
    claudePath: Optional[str] = Query(None),
) -> list[dict[str, Any]]:
    result = _load(since, until, timezone, claudePath)
    return [p.model_dump(mode="json") for p in project_activity(result.events)]


@conversations_router.get("/sessions")
def get_sessions(
    since: Optional[str] = Query(None),
    until: Optional[str] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    timezone: Optional[str] = Query(None),
    claudePath: Optional[str] = Query(None),
) -> list[dict[str, Any]]:
    result = _load(since, until, timezone, claudePath)
    return [s.model_dump(mode="json") for s in session_details(result.events)[:limit]]


@conversations_router.get("/gaps")
def get_gaps(
    since: Optional[str] = Query(None),
    until: Optional[str] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    timezone: Optional[str] = Query(None),
    claudePath: Optional[str] = Query(None),
) -> list[dict[str, Any]]:
    result = _load(since, until, timezone, claudePath)
    return [g.model_dump(mode="json") for g in user_gaps(result.events)[:limit]]


@conversations_router.get("/hourly")
def get_hourly(
    since: Optional[str] = Query(None),
    until: Optional[str] = Query(None),
    timezone: Optional[str] = Query(None),
    claudePath: Optional[str] = Query(None),
) -> list[dict[str, Any]]:
    tz = _tz(timezone)
    result = _load(since, until, timezone, claudePath)
    return [h.model_dump(mode="json") for h in hourly_activity(result.events, tz)]
