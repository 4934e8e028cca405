"""Parse Claude JSONL conversation logs into events."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError as SchemaError

from cctime.errors import ValidationError
from cctime.models import Event, UsageEntry
from cctime.primitives import SessionId

logger = logging.getLogger("cctime.parsers")

_IGNORED_PARENT_DIRS = {"", ".", ".claude"}
_IGNORED_FILE_STEMS = {"", "usage", "chat"}
_UNKNOWN_SESSION = "unknown"


def parse_usage_line(line: str, path: Path) -> UsageEntry | None:
    """Parse one JSONL line, returning ``None`` for anything malformed."""
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        logger.debug("Skipping invalid JSON line in %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.debug("Skipping non-object line in %s", path)
        return None
    try:
        return UsageEntry.model_validate(data)
    except SchemaError as exc:
        logger.debug("Skipping line with invalid schema in %s: %s", path, exc.errors()[:1])
        return None


def load_usage_file(path: Path) -> list[UsageEntry]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read file %s: %s", path, exc)
        return []

    entries: list[UsageEntry] = []
    for line in content.splitlines():
        if not line.strip():
            continue
        entry = parse_usage_line(line, path)
        if entry is not None:
            entries.append(entry)
    return entries


def extract_session_id_from_path(path: Path) -> SessionId:
    """Derive a fallback session ID from ``.../<sessionId>/file.jsonl`` or ``<sessionId>.jsonl``."""
    parent = path.parent.name
    if parent not in _IGNORED_PARENT_DIRS:
        return SessionId(parent)
    if path.stem not in _IGNORED_FILE_STEMS:
        return SessionId(path.stem)
    return SessionId(_UNKNOWN_SESSION)


def to_event(entry: UsageEntry, path: Path, fallback_session_id: SessionId | None = None) -> Event:
    session_id = entry.sessionId or fallback_session_id
    return Event(
        timestamp=entry.timestamp.to_datetime(),
        sessionId=session_id,
        role=entry.message.role if entry.message else None,
        cwd=entry.cwd,
        filePath=str(path),
    )


def load_events(path: Path) -> list[Event]:
    entries = load_usage_file(path)
    if not entries:
        return []
    try:
        fallback = extract_session_id_from_path(path)
    except ValidationError:
        fallback = SessionId(_UNKNOWN_SESSION)
    return [to_event(entry, path, fallback) for entry in entries]
