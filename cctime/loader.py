"""Load Claude conversation logs and aggregate them into daily summaries."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from cctime import config
from cctime.aggregation import aggregate_with_events
from cctime.date_utils import parse_compact_date, resolve_timezone
from cctime.discovery import find_usage_files, get_claude_paths
from cctime.errors import DataSourceError
from cctime.models import Event, LoadOptions, LoadResult
from cctime.parsers.usage import load_events

logger = logging.getLogger("cctime.loader")


def _resolve_claude_paths(claude_path: Optional[str]) -> list[Path]:
    if not claude_path:
        return get_claude_paths()
    path = Path(claude_path).expanduser()
    if not path.is_dir():
        raise DataSourceError(f"Claude data directory not found: {path}")
    return [path.resolve()]


def load_all_events(claude_paths: list[Path]) -> list[Event]:
    usage_files = find_usage_files(claude_paths)
    if not usage_files:
        logger.warning("No usage files found")
        logger.debug("Searched pattern %s in %s", config.USAGE_FILE_GLOB, claude_paths)
        return []

    logger.debug("Found %s usage files", len(usage_files))
    events: list[Event] = []
    for path in usage_files:
        events.extend(load_events(path))
    logger.debug("Loaded %s events", len(events))
    return events


def load_daily_conversation_data(options: LoadOptions | None = None) -> LoadResult:
    """Discover, parse and aggregate conversation logs.

    Raises ``ValidationError`` for malformed ``since``/``until``/``timezone``
    values and ``DataSourceError`` when an explicit ``claudePath`` is missing.
    """
    options = options or LoadOptions()
    since = parse_compact_date(options.since)
    until = parse_compact_date(options.until)
    tz = resolve_timezone(options.timezone if options.timezone is not None else config.TIMEZONE)

    claude_paths = _resolve_claude_paths(options.claudePath)
    if not claude_paths:
        logger.warning("No Claude data directories found")
        logger.debug(
            "Checked paths: %s, %s",
            config.DEFAULT_CLAUDE_CONFIG_PATH,
            config.DEFAULT_CLAUDE_CODE_PATH,
        )
        return LoadResult()
    logger.debug("Found Claude paths: %s", claude_paths)

    events = load_all_events(claude_paths)
    conversations, filtered = aggregate_with_events(events, since, until, tz, config.SESSION_GAP_MINUTES)
    return LoadResult(conversations=conversations, events=filtered)
