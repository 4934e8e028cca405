"""Roll events up into per-day conversation summaries.

Dates are local calendar dates in ``tz``; ``None`` means the zone of the
running process, so the same input can bucket differently on another host.
"""
from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Iterable, Sequence

from cctime import config
from cctime.date_utils import format_date, format_duration, format_time, local_date
from cctime.models import DailySummary, Event
from cctime.primitives import DailyDate, SessionId
from cctime.sessions import active_minutes, sort_by_timestamp

logger = logging.getLogger("cctime.aggregation")


def filter_by_date_range(
    events: Iterable[Event],
    since: date | None = None,
    until: date | None = None,
    tz: tzinfo | None = None,
) -> list[Event]:
    """Keep events whose local date lies within the inclusive ``[since, until]``."""
    if since is None and until is None:
        return list(events)
    kept: list[Event] = []
    for event in events:
        day = local_date(event.timestamp, tz)
        if since is not None and day < since:
            continue
        if until is not None and day > until:
            continue
        kept.append(event)
    return kept


def group_by_date(events: Iterable[Event], tz: tzinfo | None = None) -> dict[DailyDate, list[Event]]:
    groups: dict[DailyDate, list[Event]] = {}
    for event in events:
        groups.setdefault(format_date(event.timestamp, tz), []).append(event)
    return groups


def events_on_dates(
    events: Iterable[Event],
    dates: Iterable[str],
    tz: tzinfo | None = None,
) -> list[Event]:
    """Keep events whose local date is one of ``dates``."""
    wanted = set(dates)
    return [event for event in events if format_date(event.timestamp, tz) in wanted]


def distinct_session_ids(events: Iterable[Event]) -> list[SessionId]:
    seen: dict[SessionId, None] = {}
    for event in events:
        if event.sessionId is not None:
            seen.setdefault(event.sessionId, None)
    return list(seen)


def summarize_day(
    day: DailyDate,
    events: Sequence[Event],
    tz: tzinfo | None = None,
    gap_minutes: int = config.SESSION_GAP_MINUTES,
) -> DailySummary:
    ordered = sort_by_timestamp(events)
    logger.debug("Summarizing %s: %s messages", day, len(ordered))
    minutes = active_minutes(ordered, gap_minutes)
    return DailySummary(
        date=day,
        firstMessageTime=format_time(ordered[0].timestamp, tz),
        lastMessageTime=format_time(ordered[-1].timestamp, tz),
        activeMinutes=minutes,
        estimatedConversationTime=format_duration(minutes),
        messageCount=len(ordered),
        sessionIds=distinct_session_ids(ordered),
    )


def aggregate_with_events(
    events: Iterable[Event],
    since: date | None = None,
    until: date | None = None,
    tz: tzinfo | None = None,
    gap_minutes: int = config.SESSION_GAP_MINUTES,
) -> tuple[list[DailySummary], list[Event]]:
    """Like :func:`aggregate`, also returning the filtered flat event list."""
    filtered = filter_by_date_range(events, since, until, tz)
    summaries = [
        summarize_day(day, group, tz, gap_minutes)
        for day, group in group_by_date(filtered, tz).items()
    ]
    # YYYY-MM-DD is fixed width, so string order is date order.
    summaries.sort(key=lambda s: s.date, reverse=True)
    return summaries, filtered


def aggregate(
    events: Iterable[Event],
    since: date | None = None,
    until: date | None = None,
    tz: tzinfo | None = None,
    gap_minutes: int = config.SESSION_GAP_MINUTES,
) -> list[DailySummary]:
    summaries, _ = aggregate_with_events(events, since, until, tz, gap_minutes)
    return summaries
