"""Shell-like tokenizer for single command lines.

The scanner visits every character once and never backtracks. Quoting
follows the usual shell rules closely enough for crontab commands:

* single quotes keep their content literally;
* double quotes keep their content except for ``\\"`` and ``\\\\``;
* outside quotes a backslash escapes the next character;
* quoted spans glue onto adjacent unquoted text (``~/'logs/a.log'``).

Redirection and control operators are split out of words even when no
whitespace surrounds them (``cmd>>out.log&&next``).
"""

from __future__ import annotations

from collections.abc import Iterator

from cronhint.core.types import ShellToken, TokenKind

# Longest first. A leading file-descriptor digit is handled separately.
REDIRECT_OPERATORS = ("&>>", "&>", ">>", ">")
CONTROL_OPERATORS = ("&&", "||", "|", ";", "&")
_OPERATOR_CHARS = frozenset("&|;>")
_DOUBLE_QUOTE_ESCAPES = frozenset('"\\')
_DIGITS = frozenset("0123456789")
# Characters that may follow a duplicated descriptor ("2>&1;" but not "2>&1x").
_DESCRIPTOR_BOUNDARY = _OPERATOR_CHARS | {"<"}


class CommandTokens:
    """Finite token sequence for one command line.

    Every iteration starts a fresh lazy scan, so callers that only need
    the first couple of tokens stop paying for the rest of the string.
    """

    __slots__ = ("command",)

    def __init__(self, command: str) -> None:
        self.command = command

    def __iter__(self) -> Iterator[ShellToken]:
        return _scan(self.command)

    def words(self) -> Iterator[str]:
        """Iterate over the dequoted word tokens only."""
        for token in self:
            if token.is_word:
                yield token.value

    def __repr__(self) -> str:
        return f"CommandTokens({self.command!r})"


def tokenize_command(command: str) -> CommandTokens:
    """Return the restartable token sequence for ``command``."""

    return CommandTokens(command or "")


def _scan(text: str) -> Iterator[ShellToken]:
    length = len(text)
    buf: list[str] = []
    word_start: int | None = None
    index = 0

    while index < length:
        ch = text[index]

        if ch.isspace():
            if word_start is not None:
                yield ShellToken(TokenKind.WORD, "".join(buf), word_start)
                buf.clear()
                word_start = None
            index += 1
            continue

        if ch == "'":
            if word_start is None:
                word_start = index
            end = text.find("'", index + 1)
            if end == -1:
                buf.append(text[index + 1 :])
                index = length
            else:
                buf.append(text[index + 1 : end])
                index = end + 1
            continue

        if ch == '"':
            if word_start is None:
                word_start = index
            index = _read_double_quoted(text, index + 1, buf)
            continue

        if ch == "\\":
            if word_start is None:
                word_start = index
            if index + 1 < length:
                buf.append(text[index + 1])
                index += 2
            else:
                buf.append(ch)
                index += 1
            continue

        if ch in _OPERATOR_CHARS or ch in _DIGITS:
            matched = _match_operator(text, index, at_word_start=word_start is None)
            if matched is not None:
                kind, end = matched
                if word_start is not None:
                    yield ShellToken(TokenKind.WORD, "".join(buf), word_start)
                    buf.clear()
                    word_start = None
                yield ShellToken(kind, text[index:end], index)
                index = end
                continue

        if word_start is None:
            word_start = index
        buf.append(ch)
        index += 1

    if word_start is not None:
        yield ShellToken(TokenKind.WORD, "".join(buf), word_start)


def _read_double_quoted(text: str, index: int, buf: list[str]) -> int:
    length = len(text)
    while index < length:
        ch = text[index]
        if ch == '"':
            return index + 1
        if ch == "\\" and index + 1 < length and text[index + 1] in _DOUBLE_QUOTE_ESCAPES:
            buf.append(text[index + 1])
            index += 2
            continue
        buf.append(ch)
        index += 1
    return length


def _match_operator(text: str, index: int, *, at_word_start: bool) -> tuple[TokenKind, int] | None:
    """Match the longest operator at ``index`` and return its kind and end offset."""

    ch = text[index]
    if ch == "&":
        for operator in REDIRECT_OPERATORS[:2]:
            if text.startswith(operator, index):
                return TokenKind.REDIRECT, index + len(operator)
        if text.startswith("&&", index):
            return TokenKind.CONTROL, index + 2
        return TokenKind.CONTROL, index + 1

    if ch in "|;":
        for operator in CONTROL_OPERATORS[1:4]:
            if text.startswith(operator, index):
                return TokenKind.CONTROL, index + len(operator)
        return None

    cursor = index
    if ch in _DIGITS:
        # Only "2>" style prefixes; "abc2>x" is the word "abc2" then ">".
        if not at_word_start or not text.startswith(">", index + 1):
            return None
        cursor += 1

    if text.startswith(">&", cursor):
        end = _descriptor_end(text, cursor + 2)
        if end is not None:
            return TokenKind.DUPLICATE, end
        # ">&file" sends both streams to file, like "&>".
        return TokenKind.REDIRECT, cursor + 2
    if text.startswith(">>", cursor):
        return TokenKind.REDIRECT, cursor + 2
    return TokenKind.REDIRECT, cursor + 1


def _descriptor_end(text: str, index: int) -> int | None:
    """End offset of a duplicated descriptor ("1", "2", "-") starting at ``index``.

    ``None`` when the text is a file name instead, as in ``>&2file``.
    """

    if text.startswith("-", index):
        end = index + 1
    else:
        end = index
        while end < len(text) and text[end] in _DIGITS:
            end += 1
        if end == index:
            return None
    if end < len(text) and not (text[end].isspace() or text[end] in _DESCRIPTOR_BOUNDARY):
        return None
    return end
