"""Redirection target (log file) detection for command lines."""

from __future__ import annotations

from collections.abc import Iterable

from cronhint.core.tokens import tokenize_command
from cronhint.core.types import TokenKind

DEFAULT_EXCLUDED_DEVICES: frozenset[str] = frozenset({"/dev/null", "/dev/stdout", "/dev/stderr"})


class LogFileExtractor:
    """Collect the files a command line redirects output to.

    Targets are returned once each, in order of first appearance. Stream
    duplications such as ``2>&1`` name no file and are skipped wherever they
    appear. Pipes and ``&&``/``;`` chains do not stop the scan.
    """

    def __init__(self, excluded_devices: Iterable[str] = DEFAULT_EXCLUDED_DEVICES) -> None:
        self.excluded_devices = frozenset(excluded_devices)

    def extract(self, command: str) -> list[str]:
        if not command:
            return []

        found: dict[str, None] = {}
        expecting_target = False
        for token in tokenize_command(command):
            if expecting_target:
                expecting_target = False
                if token.is_word:
                    self._collect(token.value, found)
                    continue
            if token.kind is TokenKind.REDIRECT:
                expecting_target = True
        return list(found)

    __call__ = extract

    def _collect(self, candidate: str, found: dict[str, None]) -> None:
        if not candidate or candidate in self.excluded_devices:
            return
        found.setdefault(candidate, None)


_default_extractor = LogFileExtractor()


def extract_log_files(command: str) -> list[str]:
    """Return the unique redirection targets of ``command`` in source order."""

    return _default_extractor.extract(command)
