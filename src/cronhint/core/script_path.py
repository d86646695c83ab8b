"""Script path detection for command lines."""

from __future__ import annotations

from collections.abc import Iterable

from cronhint.core.tokens import tokenize_command
from cronhint.core.types import TokenKind

DEFAULT_INTERPRETERS: frozenset[str] = frozenset(
    {"node", "python", "python3", "bash", "sh", "php", "ruby", "perl"}
)


class ScriptPathExtractor:
    """Find the program or script a command line runs.

    When the first word names an interpreter, the script is the word right
    after it; otherwise the first word is the program itself.
    """

    def __init__(self, interpreters: Iterable[str] = DEFAULT_INTERPRETERS) -> None:
        self.interpreters = frozenset(interpreters)

    def extract(self, command: str) -> str | None:
        if not command or not command.strip():
            return None

        tokens = iter(tokenize_command(command))
        for token in tokens:
            if token.kind is TokenKind.REDIRECT:
                # "> out.log cmd": the target is not the program.
                next(tokens, None)
                continue
            if not token.is_word:
                continue
            if token.value not in self.interpreters:
                return token.value or None
            script = next(tokens, None)
            if script is None or not script.is_word:
                return None
            return script.value or None
        return None

    __call__ = extract


_default_extractor = ScriptPathExtractor()


def extract_script_path(command: str) -> str | None:
    """Return the script path or bare program name of ``command``, if any."""

    return _default_extractor.extract(command)
