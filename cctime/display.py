"""Terminal rendering of daily conversation summaries."""
from __future__ import annotations

from rich.table import Table

from cctime.date_utils import format_duration
from cctime.models import DailySummary

_COLUMNS: list[tuple[str, str]] = [
    ("Date", "left"),
    ("First Message", "center"),
    ("Last Message", "center"),
    ("Conv. Time", "center"),
    ("Messages", "right"),
    ("Sessions", "right"),
]


def create_conversation_table(conversations: list[DailySummary]) -> Table:
    table = Table(header_style="cyan")
    for title, justify in _COLUMNS:
        table.add_column(title, justify=justify)

    if not conversations:
        table.add_row("[yellow]No conversation data found[/yellow]", *([""] * (len(_COLUMNS) - 1)))
        return table

    for conv in conversations:
        table.add_row(
            conv.date,
            conv.firstMessageTime,
            conv.lastMessageTime,
            conv.estimatedConversationTime,
            str(conv.messageCount),
            str(len(conv.sessionIds)),
        )
    return table


def format_summary(conversations: list[DailySummary]) -> str:
    """Rich-markup block of totals across the displayed days."""
    if not conversations:
        return "[yellow]No data to summarize[/yellow]"

    total_days = len(conversations)
    total_messages = sum(c.messageCount for c in conversations)
    total_sessions = sum(len(c.sessionIds) for c in conversations)
    total_minutes = sum(c.activeMinutes for c in conversations)
    # round half away from zero, not banker's rounding
    avg_messages = int(total_messages / total_days + 0.5)

    lines = [
        "[bold]Summary:[/bold]",
        f"  Days with activity: [green]{total_days}[/green]",
        f"  Total messages: [green]{total_messages}[/green]",
        f"  Total sessions: [green]{total_sessions}[/green]",
        f"  Avg messages/day: [green]{avg_messages}[/green]",
        f"  Total conv. time: [green]{format_duration(total_minutes)}[/green]",
    ]
    return "\n".join(lines)
