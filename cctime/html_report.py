"""Standalone HTML activity report rendered from a jinja2 template."""
from __future__ import annotations

import json
import logging
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader

from cctime import config
from cctime.analysis import hourly_activity, project_activity, session_details, user_gaps
from cctime.date_utils import format_duration, to_local
from cctime.models import DailySummary, Event

logger = logging.getLogger("cctime.report")

_TOP_SESSIONS = 10
_TOP_GAPS = 10

_jinja_env = Environment(
    loader=PackageLoader("cctime", "templates"),
    autoescape=True,
)


def get_template(name: str):
    return _jinja_env.get_template(name)


def build_report_context(
    conversations: list[DailySummary],
    events: list[Event],
    tz: tzinfo | None = None,
    gap_minutes: int = config.SESSION_GAP_MINUTES,
) -> dict[str, Any]:
    projects = project_activity(events, gap_minutes)
    hourly = hourly_activity(events, tz)
    sessions = session_details(events, gap_minutes)[:_TOP_SESSIONS]
    gaps = user_gaps(events, gap_minutes)[:_TOP_GAPS]

    total_messages = sum(c.messageCount for c in conversations)
    total_minutes = sum(c.activeMinutes for c in conversations)
    # Chart.js reads days oldest first.
    daily = list(reversed(conversations))
    charts = {
        "daily": {
            "labels": [c.date for c in daily],
            "messages": [c.messageCount for c in daily],
            "conversationMinutes": [c.activeMinutes for c in daily],
        },
        "hourly": {
            "labels": [f"{h.hour:02d}:00" for h in hourly],
            "messages": [h.messageCount for h in hourly],
        },
        "projects": {
            "labels": [p.projectName for p in projects],
            "messages": [p.messageCount for p in projects],
            "conversationMinutes": [p.activeMinutes for p in projects],
        },
    }

    return {
        "active_days": len(conversations),
        "total_messages": total_messages,
        "total_sessions": sum(len(c.sessionIds) for c in conversations),
        "avg_messages_per_day": int(total_messages / len(conversations) + 0.5) if conversations else 0,
        "total_time": format_duration(total_minutes),
        "conversations": conversations,
        "projects": projects,
        "sessions": [
            {
                "start": to_local(s.start, tz).strftime("%Y-%m-%d %H:%M"),
                "end": to_local(s.end, tz).strftime("%H:%M"),
                "duration": format_duration(s.durationMinutes),
                "messages": s.messageCount,
                "project": s.project,
            }
            for s in sessions
        ],
        "gaps": [
            {
                "timestamp": to_local(g.timestamp, tz).strftime("%Y-%m-%d %H:%M"),
                "gap": format_duration(g.gapMinutes),
                "project": g.project,
            }
            for g in gaps
        ],
        # embedded raw in a <script>; keep markup out of it
        "chart_json": json.dumps(charts).replace("<", "\\u003c"),
        "generated_at": datetime.now().astimezone(tz).strftime("%Y-%m-%d %H:%M"),
    }


def render_html_report(
    conversations: list[DailySummary],
    events: list[Event],
    tz: tzinfo | None = None,
) -> str:
    context = build_report_context(conversations, events, tz)
    return get_template("report.html").render(**context)


def generate_html_report(
    conversations: list[DailySummary],
    events: list[Event],
    filename: str | Path,
    tz: tzinfo | None = None,
) -> Path:
    output = Path(filename).expanduser()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_html_report(conversations, events, tz), encoding="utf-8")
    logger.info("HTML report written to %s", output)
    return output
