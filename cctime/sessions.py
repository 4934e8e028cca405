"""Split time-ordered events into active sessions.

Consecutive events no more than ``gap_minutes`` apart belong to the same
session. Each session counts for ``max(1, floor(elapsed minutes))`` so a
lone message is never worth zero.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol, Sequence

from cctime import config
from cctime.date_utils import format_duration

logger = logging.getLogger("cctime.sessions")


class Timestamped(Protocol):
    timestamp: datetime


@dataclass(frozen=True)
class Session:
    start: datetime
    end: datetime
    events: tuple[Timestamped, ...]

    @property
    def message_count(self) -> int:
        return len(self.events)

    @property
    def minutes(self) -> int:
        elapsed = (self.end - self.start).total_seconds()
        return max(1, int(elapsed // 60))


def sort_by_timestamp(events: Sequence[Timestamped]) -> list[Timestamped]:
    return sorted(events, key=lambda e: e.timestamp)


def segment(events: Sequence[Timestamped], gap_minutes: int = config.SESSION_GAP_MINUTES) -> list[Session]:
    """Group a non-empty, ascending sequence of events into sessions."""
    assert events, "segment() requires at least one event"
    assert gap_minutes > 0, "gap_minutes must be positive"
    assert all(
        events[i - 1].timestamp <= events[i].timestamp for i in range(1, len(events))
    ), "segment() requires events sorted by timestamp"

    gap = timedelta(minutes=gap_minutes)
    sessions: list[Session] = []
    current: list[Timestamped] = [events[0]]
    start = end = events[0].timestamp

    for event in events[1:]:
        if event.timestamp - end <= gap:
            end = event.timestamp
            current.append(event)
            continue
        sessions.append(Session(start=start, end=end, events=tuple(current)))
        logger.debug("Session ended: %s -> %s (%s events)", start.isoformat(), end.isoformat(), len(current))
        current = [event]
        start = end = event.timestamp

    sessions.append(Session(start=start, end=end, events=tuple(current)))
    logger.debug("Final session: %s -> %s (%s events)", start.isoformat(), end.isoformat(), len(current))
    return sessions


def active_minutes(events: Sequence[Timestamped], gap_minutes: int = config.SESSION_GAP_MINUTES) -> int:
    """Total active minutes across all sessions of an unordered event group."""
    if not events:
        return 0
    if len(events) == 1:
        return 1
    sessions = segment(sort_by_timestamp(events), gap_minutes)
    total = sum(session.minutes for session in sessions)
    logger.debug("Total sessions: %s, total time: %smin", len(sessions), total)
    return total


def estimate_active_time(events: Sequence[Timestamped], gap_minutes: int = config.SESSION_GAP_MINUTES) -> str:
    return format_duration(active_minutes(events, gap_minutes))
