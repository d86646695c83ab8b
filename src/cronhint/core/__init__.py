"""Core parsing helpers for cronhint."""

from cronhint.core.hints import apply_entry_metadata, inspect_command
from cronhint.core.job_name import derive_job_name
from cronhint.core.log_files import DEFAULT_EXCLUDED_DEVICES, LogFileExtractor, extract_log_files
from cronhint.core.script_path import DEFAULT_INTERPRETERS, ScriptPathExtractor, extract_script_path
from cronhint.core.tokens import CommandTokens, tokenize_command
from cronhint.core.types import CommandHints, CrontabEntry, ShellToken, TokenKind

__all__ = [
    "DEFAULT_EXCLUDED_DEVICES",
    "DEFAULT_INTERPRETERS",
    "CommandHints",
    "CommandTokens",
    "CrontabEntry",
    "LogFileExtractor",
    "ScriptPathExtractor",
    "ShellToken",
    "TokenKind",
    "apply_entry_metadata",
    "derive_job_name",
    "extract_log_files",
    "extract_script_path",
    "inspect_command",
    "tokenize_command",
]
