"""cronhint - script path and log file hints for cron command lines."""

from .core import (
    CommandHints,
    CrontabEntry,
    LogFileExtractor,
    ScriptPathExtractor,
    derive_job_name,
    extract_log_files,
    extract_script_path,
    inspect_command,
)
from .crontab import parse_crontab

__version__ = "0.1.0"

__all__ = [
    "CommandHints",
    "CrontabEntry",
    "LogFileExtractor",
    "ScriptPathExtractor",
    "derive_job_name",
    "extract_log_files",
    "extract_script_path",
    "inspect_command",
    "parse_crontab",
]
