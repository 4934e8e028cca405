"""Locate Claude data directories and their JSONL log files."""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from cctime import config

logger = logging.getLogger("cctime.discovery")


def _add_unique(paths: list[Path], seen: set[Path], candidate: Path) -> None:
    resolved = candidate.expanduser().resolve()
    if not resolved.is_dir() or resolved in seen:
        return
    seen.add(resolved)
    paths.append(resolved)


def get_claude_paths(env: Mapping[str, str] | None = None) -> list[Path]:
    """Return existing Claude data directories.

    ``CLAUDE_CONFIG_DIR`` may hold a comma-separated list; when none of its
    entries exist the default ``~/.config/claude`` and ``~/.claude`` are used.
    """
    environ = os.environ if env is None else env
    paths: list[Path] = []
    seen: set[Path] = set()

    raw = (environ.get(config.CLAUDE_CONFIG_DIR_ENV) or "").strip()
    if raw:
        for token in raw.split(","):
            token = token.strip()
            if token:
                _add_unique(paths, seen, Path(token))
        if paths:
            return paths
        logger.debug("No directory from %s exists: %s", config.CLAUDE_CONFIG_DIR_ENV, raw)

    for default_path in (config.DEFAULT_CLAUDE_CONFIG_PATH, config.DEFAULT_CLAUDE_CODE_PATH):
        _add_unique(paths, seen, default_path)
    return paths


def find_usage_files(claude_paths: list[Path]) -> list[Path]:
    files: set[Path] = set()
    for claude_path in claude_paths:
        logger.debug("Searching recursively in: %s", claude_path)
        found = [p for p in claude_path.glob(config.USAGE_FILE_GLOB) if p.is_file()]
        logger.debug("Found %s .jsonl files in %s", len(found), claude_path)
        files.update(found)
    return sorted(files)
