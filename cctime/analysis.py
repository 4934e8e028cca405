"""Cross-day analyses used by the HTML report and the API."""
from __future__ import annotations

from datetime import tzinfo
from pathlib import PurePosixPath, PureWindowsPath
from typing import Iterable, Optional

from cctime import config
from cctime.aggregation import distinct_session_ids
from cctime.date_utils import format_date, to_local
from cctime.models import Event, HourlyActivity, ProjectActivity, SessionDetail, UserGap
from cctime.sessions import active_minutes, segment, sort_by_timestamp

UNKNOWN_PROJECT = "Unknown Project"


def project_name(cwd: Optional[str], default: str = UNKNOWN_PROJECT) -> str:
    raw = (cwd or "").strip()
    if not raw:
        return default
    path_cls = PureWindowsPath if "\\" in raw else PurePosixPath
    return path_cls(raw).name or raw


def project_activity(
    events: Iterable[Event],
    gap_minutes: int = config.SESSION_GAP_MINUTES,
) -> list[ProjectActivity]:
    """Per-project message counts and active time, busiest first."""
    groups: dict[str, list[Event]] = {}
    for event in events:
        groups.setdefault(project_name(event.cwd), []).append(event)

    results = [
        ProjectActivity(
            projectName=name,
            messageCount=len(group),
            activeMinutes=active_minutes(group, gap_minutes),
            sessionCount=len(distinct_session_ids(group)),
        )
        for name, group in groups.items()
    ]
    results.sort(key=lambda p: p.activeMinutes, reverse=True)
    return results


def session_details(
    events: Iterable[Event],
    gap_minutes: int = config.SESSION_GAP_MINUTES,
) -> list[SessionDetail]:
    """Active sessions across all events, longest first."""
    ordered = sort_by_timestamp(list(events))
    if not ordered:
        return []
    details = [
        SessionDetail(
            start=session.start,
            end=session.end,
            durationMinutes=session.minutes,
            messageCount=session.message_count,
            project=project_name(session.events[0].cwd, "Unknown"),
        )
        for session in segment(ordered, gap_minutes)
    ]
    details.sort(key=lambda d: d.durationMinutes, reverse=True)
    return details


def user_gaps(
    events: Iterable[Event],
    min_gap_minutes: int = config.SESSION_GAP_MINUTES,
) -> list[UserGap]:
    """Pauses between consecutive user messages longer than ``min_gap_minutes``."""
    user_events = sort_by_timestamp([e for e in events if e.role == "user"])
    gaps: list[UserGap] = []
    for previous, current in zip(user_events, user_events[1:]):
        minutes = int((current.timestamp - previous.timestamp).total_seconds() // 60)
        if minutes > min_gap_minutes:
            gaps.append(
                UserGap(
                    gapMinutes=minutes,
                    timestamp=current.timestamp,
                    project=project_name(current.cwd, "Unknown"),
                )
            )
    gaps.sort(key=lambda g: g.gapMinutes, reverse=True)
    return gaps


def hourly_activity(events: Iterable[Event], tz: tzinfo | None = None) -> list[HourlyActivity]:
    """Message counts per local hour of day, with the dates seen in each hour."""
    counts = [0] * 24
    days: list[dict[str, None]] = [{} for _ in range(24)]
    for event in events:
        hour = to_local(event.timestamp, tz).hour
        counts[hour] += 1
        days[hour].setdefault(format_date(event.timestamp, tz), None)
    return [
        HourlyActivity(hour=hour, messageCount=counts[hour], days=list(days[hour]))
        for hour in range(24)
    ]
