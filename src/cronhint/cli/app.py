"""CLI main module for cronhint."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from cronhint.cli.render import hints_to_json, render_hints, render_scan, scan_to_json
from cronhint.config import build_extractors, get_settings
from cronhint.core.hints import apply_entry_metadata, inspect_command
from cronhint.core.job_name import derive_job_name
from cronhint.core.log_files import LogFileExtractor
from cronhint.core.script_path import ScriptPathExtractor
from cronhint.crontab import parse_crontab, read_crontab, read_user_crontab
from cronhint.errors import ConfigurationError, CronhintError
from cronhint.logging_utils import configure_logging

app = typer.Typer(
    name="cronhint",
    help="Script path and log file hints for cron command lines.",
    add_completion=False,
    rich_markup_mode="rich",
)

EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


@dataclass(frozen=True)
class _Extractors:
    script_paths: ScriptPathExtractor
    log_files: LogFileExtractor


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    try:
        settings = get_settings()
    except ValueError as e:
        # pydantic ValidationError and SettingsError are both ValueErrors.
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(EXIT_ERROR) from e

    configure_logging(level="DEBUG" if verbose else settings.log_level)
    try:
        script_paths, log_files = build_extractors(settings)
    except ConfigurationError as e:
        logger.error("configuration rejected: {}", e)
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(EXIT_ERROR) from e

    logger.debug(
        "loaded settings interpreters={} excluded_devices={}",
        sorted(settings.interpreters),
        sorted(settings.excluded_devices),
    )
    ctx.obj = _Extractors(script_paths=script_paths, log_files=log_files)


@app.command("script-path")
def script_path(
    ctx: typer.Context,
    command: str = typer.Argument(..., help="Command line to inspect"),
) -> None:
    """Print the script or program a command runs."""

    extractors: _Extractors = ctx.obj
    path = extractors.script_paths.extract(command)
    if path is None:
        logger.debug("no script path in command={!r}", command)
        raise typer.Exit(EXIT_NOT_FOUND)
    typer.echo(path)


@app.command("log-files")
def log_files(
    ctx: typer.Context,
    command: str = typer.Argument(..., help="Command line to inspect"),
) -> None:
    """Print every file the command redirects output to, one per line."""

    extractors: _Extractors = ctx.obj
    for path in extractors.log_files.extract(command):
        typer.echo(path)


@app.command("name")
def name(
    ctx: typer.Context,
    command: str = typer.Argument(..., help="Command line to inspect"),
) -> None:
    """Print a suggested job name for the command."""

    extractors: _Extractors = ctx.obj
    typer.echo(derive_job_name(command, extractor=extractors.script_paths))


@app.command("inspect")
def inspect(
    ctx: typer.Context,
    command: str = typer.Argument(..., help="Command line to inspect"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Show every hint derived from one command."""

    extractors: _Extractors = ctx.obj
    hints = inspect_command(command, script_paths=extractors.script_paths, log_files=extractors.log_files)
    if as_json:
        typer.echo(hints_to_json(hints))
        return
    render_hints(hints, Console())


@app.command("scan")
def scan(
    ctx: typer.Context,
    path: str | None = typer.Argument(None, help="Crontab file to read, '-' for stdin"),
    system: bool = typer.Option(False, "--system", help="Read the current user's crontab via 'crontab -l'"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Show hints for every job in a crontab."""

    extractors: _Extractors = ctx.obj
    if system == (path is not None):
        typer.echo("Pass either a crontab PATH or --system.", err=True)
        raise typer.Exit(EXIT_ERROR)

    try:
        text = _read_source(path, system=system)
    except CronhintError as e:
        logger.error("cannot read crontab: {}", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_ERROR) from e

    entries = parse_crontab(text)
    logger.info("parsed {} cron entries", len(entries))
    rows = [
        (
            entry,
            apply_entry_metadata(
                inspect_command(entry.command, script_paths=extractors.script_paths, log_files=extractors.log_files),
                entry,
            ),
        )
        for entry in entries
    ]
    if as_json:
        typer.echo(scan_to_json(rows))
        return
    render_scan(rows, Console())


def _read_source(path: str | None, *, system: bool) -> str:
    if system:
        return read_user_crontab()
    if path == "-":
        return sys.stdin.read()
    return read_crontab(Path(path or ""))


if __name__ == "__main__":
    app()
