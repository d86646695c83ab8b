"""Job name suggestions derived from commands."""

from __future__ import annotations

from cronhint.core.script_path import ScriptPathExtractor, extract_script_path

MAX_FALLBACK_LENGTH = 50
NAME_DEPTH = 3  # two directories and the file
SCRIPT_EXTENSIONS = (".js", ".ts", ".py", ".sh", ".php", ".rb", ".pl")


def derive_job_name(command: str, *, extractor: ScriptPathExtractor | None = None) -> str:
    """Suggest a readable job name for ``command``.

    Uses the last two directories and the file name of the script path,
    without a known script extension. Falls back to the head of the command
    when no script path can be found.

    Args:
        command: Raw command line.
        extractor: Script path extractor to use instead of the default one.

    Returns:
        Suggested name, possibly empty for an empty command.
    """
    command = command.strip()
    script_path = extractor.extract(command) if extractor is not None else extract_script_path(command)
    if not script_path:
        return command[:MAX_FALLBACK_LENGTH]

    parts = [part for part in script_path.split("/") if part]
    if not parts:
        return command[:MAX_FALLBACK_LENGTH]

    name = "/".join(parts[-NAME_DEPTH:])
    for extension in SCRIPT_EXTENSIONS:
        if name.endswith(extension):
            return name[: -len(extension)]
    return name
