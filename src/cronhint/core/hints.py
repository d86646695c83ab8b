"""Bundle every hint derived from one command line."""

from __future__ import annotations

from dataclasses import replace

from cronhint.core.job_name import derive_job_name
from cronhint.core.log_files import LogFileExtractor
from cronhint.core.script_path import ScriptPathExtractor
from cronhint.core.types import CommandHints, CrontabEntry


def inspect_command(
    command: str,
    *,
    script_paths: ScriptPathExtractor | None = None,
    log_files: LogFileExtractor | None = None,
) -> CommandHints:
    """Run the script path, log file and job name extractors on ``command``."""

    script_paths = script_paths or ScriptPathExtractor()
    log_files = log_files or LogFileExtractor()
    return CommandHints(
        command=command,
        script_path=script_paths.extract(command),
        log_files=tuple(log_files.extract(command)),
        job_name=derive_job_name(command, extractor=script_paths),
    )


def apply_entry_metadata(hints: CommandHints, entry: CrontabEntry) -> CommandHints:
    """Let an entry's explicit name and log file win over the derived ones."""

    log_files = hints.log_files
    if entry.log_file:
        log_files = (entry.log_file, *(path for path in log_files if path != entry.log_file))
    return replace(hints, job_name=entry.name or hints.job_name, log_files=log_files)
