"""Rich rendering for command hints."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cronhint.core.types import CommandHints, CrontabEntry

_MISSING = "[dim]-[/dim]"


def render_hints(hints: CommandHints, console: Console) -> None:
    """Render the hints of a single command as a key/value table."""

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Key", style="dim", width=12)
    table.add_column("Value", style="white", overflow="fold")

    table.add_row("Command", escape(hints.command))
    table.add_row("Script", _cell(hints.script_path))
    table.add_row("Name", _cell(hints.job_name))
    table.add_row("Log file", _cell(hints.log_file))
    if len(hints.log_files) > 1:
        table.add_row("Other logs", escape(", ".join(hints.log_files[1:])))

    console.print(table)


def render_scan(rows: Sequence[tuple[CrontabEntry, CommandHints]], console: Console) -> None:
    """Render one row per crontab entry."""

    if not rows:
        console.print("[dim]No cron jobs found.[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan", padding=(0, 1))
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Schedule", style="bold green", no_wrap=True)
    table.add_column("Name", overflow="fold")
    table.add_column("Script", overflow="fold")
    table.add_column("Log file", overflow="fold")

    for entry, hints in rows:
        schedule = escape(entry.schedule) if entry.enabled else f"[dim]#{escape(entry.schedule)}[/dim]"
        table.add_row(
            str(entry.line_number),
            schedule,
            _cell(hints.job_name),
            _cell(hints.script_path),
            _cell(hints.log_file),
        )

    console.print(table)


def hints_to_json(hints: CommandHints) -> str:
    return json.dumps(hints.to_dict(), ensure_ascii=False, indent=2)


def scan_to_json(rows: Sequence[tuple[CrontabEntry, CommandHints]]) -> str:
    payload = [
        {
            "line_number": entry.line_number,
            "schedule": entry.schedule,
            "enabled": entry.enabled,
            "job_id": entry.job_id,
            "log_stderr": entry.log_stderr,
            **hints.to_dict(),
        }
        for entry, hints in rows
    ]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _cell(value: str | None) -> str:
    return escape(value) if value else _MISSING
