"""Split BEL script text into logical lines.

A logical line is one physical line, or several joined by a trailing ``\\``,
with any ``//`` comment split off. A trailing ``\\`` inside an open quoted
string continues the string on the next line. Quoted strings are scanned with
escape awareness so ``"http://..."`` and ``"a \\" // b"`` stay intact.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import MalformedLineError

_ESCAPE = re.compile(r'\\(["\\])')


def unquote(body: str) -> str:
    """Decode the inside of a quoted string: ``\\"`` and ``\\\\`` only, other escapes kept."""
    return _ESCAPE.sub(r"\1", body)


@dataclass(frozen=True)
class LogicalLine:
    number: int  # 1-based physical line the logical line starts on
    text: str
    comment: str | None = None


def _scan(text: str, number: int) -> tuple[str, str | None, bool]:
    """Return (code, comment, open_quote) for one logical line.

    ``open_quote`` is True when the text ends with ``\\`` inside a quoted
    string, i.e. the string continues on the next physical line.
    """
    in_quote = False
    quote_col = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if in_quote:
            if ch == "\\":
                if i + 1 == len(text):
                    return text, None, True
                i += 2
                continue
            if ch == '"':
                in_quote = False
        elif ch == '"':
            in_quote = True
            quote_col = i + 1
        elif text.startswith("//", i):
            return text[:i], text[i + 2 :], False
        i += 1

    if in_quote:
        raise MalformedLineError("unterminated quoted string", number, quote_col)
    return text, None, False


def split_lines(source: str | Iterable[str]) -> Iterator[LogicalLine]:
    """Yield logical lines in source order, skipping blank and comment-only lines."""
    if isinstance(source, str):
        source = source.splitlines()

    start = 0
    pending: str | None = None
    escape_col = 0  # column of a trailing "\" left inside an open string

    for number, raw in enumerate(source, 1):
        raw = raw.rstrip("\r\n")
        if pending is None:
            if raw.lstrip().startswith("#"):
                continue
            start, text = number, raw
        else:
            text = f"{pending} {raw.lstrip()}"

        code, comment, open_quote = _scan(text, start)
        stripped = code.rstrip()
        if open_quote or (comment is None and stripped.endswith("\\")):
            escape_col = len(text) if open_quote else 0
            pending = stripped[:-1].rstrip()
            continue
        pending = None

        code = stripped.strip()
        if not code:
            continue
        if comment is not None:
            comment = comment.strip() or None
        yield LogicalLine(start, code, comment)

    if pending is not None:
        if escape_col:
            raise MalformedLineError("dangling escape in quoted string", start, escape_col)
        if pending.strip():
            yield LogicalLine(start, pending.strip())
