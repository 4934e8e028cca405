"""cctime command line entry point.

Usage:
  cctime
  cctime --days 7
  cctime --since 20241201 --until 20241231
  cctime --claude-path ~/.claude --timezone Europe/Paris
  cctime --html report.html
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from rich.console import Console

from cctime import config
from cctime.aggregation import events_on_dates
from cctime.date_utils import resolve_timezone
from cctime.display import create_conversation_table, format_summary
from cctime.errors import CctimeError
from cctime.html_report import generate_html_report
from cctime.loader import load_daily_conversation_data
from cctime.models import LoadOptions

logger = logging.getLogger("cctime")

_DESCRIPTION = """\
Analyze your Claude Code conversation data and display a daily summary showing
when you started and ended conversations each day, along with estimated
conversation duration and message counts.

Data is read from ~/.config/claude and ~/.claude, or from the directories
listed in the CLAUDE_CONFIG_DIR environment variable.
"""


def _days(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        days = 0
    if days < 1 or days > config.MAX_DAYS:
        raise argparse.ArgumentTypeError(f"--days must be a number between 1 and {config.MAX_DAYS}")
    return days


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cctime",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--debug", action="store_true", default=config.DEBUG, help="Show debug information about file discovery and sessions")
    parser.add_argument("--days", type=_days, default=None, help=f"Show only the last N days (1-{config.MAX_DAYS}, default: all)")
    parser.add_argument("--since", default=None, metavar="YYYYMMDD", help="Filter conversations since date (e.g. 20241201)")
    parser.add_argument("--until", default=None, metavar="YYYYMMDD", help="Filter conversations until date (e.g. 20241231)")
    parser.add_argument("--claude-path", default=None, metavar="PATH", help="Custom path to Claude data directory")
    parser.add_argument("--timezone", default=None, metavar="NAME", help="IANA zone used for day boundaries (default: system local)")
    parser.add_argument("--html", default=None, metavar="FILE", help="Also write an HTML report to FILE")
    parser.add_argument("--json", action="store_true", help="Print daily summaries as JSON")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    console = Console()

    options = LoadOptions(
        claudePath=args.claude_path,
        since=args.since,
        until=args.until,
        timezone=args.timezone,
    )
    try:
        result = load_daily_conversation_data(options)
        tz = resolve_timezone(args.timezone if args.timezone is not None else config.TIMEZONE)
    except CctimeError as exc:
        console.print(f"[red]Error loading conversation data:[/red] {exc}")
        return 1

    conversations = result.conversations
    events = result.events
    if args.days:
        conversations = conversations[: args.days]
        events = events_on_dates(events, [c.date for c in conversations], tz)

    if args.json:
        payload = [c.model_dump(mode="json") for c in conversations]
        print(json.dumps(payload, indent=2))
    else:
        console.print("[bold cyan]cctime - Claude Code Conversation Time Tracker[/bold cyan]")
        console.print("")
        console.print(create_conversation_table(conversations))
        console.print("")
        console.print(format_summary(conversations))

    if args.html:
        try:
            path = generate_html_report(conversations, events, args.html, tz)
        except OSError as exc:
            console.print(f"[red]Failed to write HTML report:[/red] {exc}")
            return 1
        if not args.json:
            console.print(f"\nHTML report written to [green]{path}[/green]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
