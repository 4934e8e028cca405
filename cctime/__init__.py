"""cctime: daily Claude Code conversation time tracker."""

__version__ = "0.1.0"
