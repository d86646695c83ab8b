"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Kinds of tokens produced when scanning a command line."""

    WORD = "word"
    REDIRECT = "redirect"  # >, >>, 2>, 2>>, &>, &>>
    DUPLICATE = "duplicate"  # 2>&1, >&2
    CONTROL = "control"  # |, ||, &&, ;, &


@dataclass(frozen=True)
class ShellToken:
    """One word or operator found in a command line."""

    kind: TokenKind
    value: str
    start: int

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD


@dataclass(frozen=True)
class CommandHints:
    """Everything derived from a single command line."""

    command: str
    script_path: str | None
    log_files: tuple[str, ...] = ()
    job_name: str = ""

    @property
    def log_file(self) -> str | None:
        """First redirection target, the one shown as the job's log file."""
        return self.log_files[0] if self.log_files else None

    def to_dict(self) -> dict[str, object]:
        return {
            "command": self.command,
            "script_path": self.script_path,
            "log_files": list(self.log_files),
            "log_file": self.log_file,
            "job_name": self.job_name,
        }


@dataclass(frozen=True)
class CrontabEntry:
    """A job line read from crontab text."""

    line_number: int
    schedule: str
    command: str
    enabled: bool = True
    job_id: str | None = None
    name: str | None = None  # explicit name from a CRON-MANAGER marker
    log_file: str | None = None
    log_stderr: str | None = None
