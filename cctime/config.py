"""cctime configuration."""
import os
from pathlib import Path


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default

# Environment variable holding a comma-separated list of Claude data directories
CLAUDE_CONFIG_DIR_ENV = "CLAUDE_CONFIG_DIR"

# Default locations of Claude data
USER_HOME_DIR = Path.home()
DEFAULT_CLAUDE_CONFIG_PATH = USER_HOME_DIR / ".config" / "claude"
DEFAULT_CLAUDE_CODE_PATH = USER_HOME_DIR / ".claude"
USAGE_FILE_GLOB = "**/*.jsonl"

# Aggregation policy
SESSION_GAP_MINUTES = 3
MAX_DAYS = _env_int("CCTIME_MAX_DAYS", 30)

# Empty means the system-local zone
TIMEZONE = os.getenv("CCTIME_TIMEZONE", "").strip()
DEBUG = _env_bool("CCTIME_DEBUG", False)
