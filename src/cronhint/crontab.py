"""Read-only crontab parsing."""

from __future__ import annotations

import re
import shutil
import subprocess
from pathlib import Path

from loguru import logger

from cronhint.core.types import CrontabEntry
from cronhint.errors import CrontabReadError

MARKER_PREFIX = "# CRON-MANAGER:"
# Marker key -> CrontabEntry field.
MARKER_FIELDS = {"ID": "job_id", "NAME": "name", "LOG": "log_file", "LOGERR": "log_stderr"}
ENV_LINE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\s*=")
FIELD_LINE_RE = re.compile(r"^(\S+\s+\S+\s+\S+\s+\S+\s+\S+)\s+(\S.*)$")
SHORTCUT_LINE_RE = re.compile(r"^(@[a-z]+)\s+(\S.*)$")
SCHEDULE_SHORTCUTS = frozenset(
    {"@reboot", "@yearly", "@annually", "@monthly", "@weekly", "@daily", "@midnight", "@hourly"}
)
_FIELD_ATOM = r"(?:[0-9]+|jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec|sun|mon|tue|wed|thu|fri|sat)"
_FIELD_ITEM = rf"(?:\*|{_FIELD_ATOM}(?:-{_FIELD_ATOM})?)(?:/[0-9]+)?"
SCHEDULE_FIELD_RE = re.compile(rf"^{_FIELD_ITEM}(?:,{_FIELD_ITEM})*$", re.IGNORECASE)
CRONTAB_TIMEOUT_SECONDS = 10


def parse_crontab(text: str) -> list[CrontabEntry]:
    """Parse crontab text into job entries.

    Commented-out job lines are returned as disabled entries; environment
    assignments, blank lines and other comments are skipped. ``# CRON-MANAGER:``
    marker lines attach their ID, NAME, LOG and LOGERR values to the next job;
    a blank line drops markers that were not used yet.
    """
    entries: list[CrontabEntry] = []
    metadata: dict[str, str] = {}
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            metadata = {}
            continue

        if line.startswith(MARKER_PREFIX):
            _read_marker(line[len(MARKER_PREFIX) :].strip(), metadata)
            continue

        enabled = True
        if line.startswith("#"):
            line = line.lstrip("#").strip()
            enabled = False
            if not line:
                continue
        elif ENV_LINE_RE.match(line):
            continue

        parsed = _parse_job_line(line)
        if parsed is None:
            if enabled:
                logger.debug("skipping unrecognized crontab line {}: {}", line_number, raw)
            continue
        schedule, command = parsed
        entries.append(
            CrontabEntry(
                line_number=line_number,
                schedule=schedule,
                command=command,
                enabled=enabled,
                **metadata,
            )
        )
        metadata = {}
    return entries


def _read_marker(body: str, metadata: dict[str, str]) -> None:
    key, sep, value = body.partition(":")
    field_name = MARKER_FIELDS.get(key.strip())
    if not sep or field_name is None:
        # DESC, ENV, TAGS and WORKDIR carry nothing cronhint reports.
        return
    value = value.strip()
    if value:
        metadata[field_name] = value


def _parse_job_line(line: str) -> tuple[str, str] | None:
    shortcut = SHORTCUT_LINE_RE.match(line)
    if shortcut is not None:
        if shortcut.group(1) not in SCHEDULE_SHORTCUTS:
            return None
        return shortcut.group(1), shortcut.group(2).strip()

    fields = FIELD_LINE_RE.match(line)
    if fields is None:
        return None
    schedule = " ".join(fields.group(1).split())
    # A comment such as "# run the backup every 2 hours" is not a job.
    if not all(SCHEDULE_FIELD_RE.match(field) for field in schedule.split()):
        return None
    if not any(ch.isdigit() or ch == "*" for ch in schedule):
        return None
    return schedule, fields.group(2).strip()


def read_crontab(path: str | Path) -> str:
    """Read crontab text from a file."""

    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CrontabReadError(f"cannot read crontab {file_path}: {e}") from e


def read_user_crontab() -> str:
    """Read the current user's crontab through ``crontab -l``."""

    binary = shutil.which("crontab")
    if binary is None:
        raise CrontabReadError("crontab command not found")

    try:
        completed = subprocess.run(  # noqa: S603
            [binary, "-l"],
            capture_output=True,
            text=True,
            check=False,
            timeout=CRONTAB_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise CrontabReadError(f"crontab -l failed: {e}") from e

    if completed.returncode != 0:
        stderr = completed.stderr.strip()
        if "no crontab for" in stderr:
            logger.info("no crontab installed for the current user")
            return ""
        raise CrontabReadError(f"crontab -l exited with {completed.returncode}: {stderr}")
    return completed.stdout
