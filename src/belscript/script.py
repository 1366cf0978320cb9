"""Drive a parse pass over a whole BEL script.

Example:
    from belscript import parse

    for obj in parse(open("small_corpus.bel").read()):
        print(obj.type)

    # or push-style
    parse(text, handler=objects.append)

Each statement line emits its parameters and terms (innermost first) and then
the statement itself. Directive lines emit one object each.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .directives import parse_directive
from .lines import split_lines
from .model import BELObject, Statement
from .parser import Lexer, Parser

logger = logging.getLogger(__name__)

Handler = Callable[[BELObject], None]


def iter_objects(source: str | Iterable[str]) -> Iterator[BELObject]:
    """Generate parsed objects in source order.

    Raises the first ParseError encountered; nothing after it is produced.
    """
    lines = 0
    emitted = 0
    for line in split_lines(source):
        lines += 1
        directive = parse_directive(line)
        if directive is not None:
            logger.debug("line %d: %s", line.number, directive.type)
            emitted += 1
            yield directive
            continue

        parser = Parser(Lexer(line.text, line.number).tokens)
        statement = parser.parse_line_statement(line.comment)
        logger.debug("line %d: %s statement", line.number, statement.shape.value)
        for node in statement.walk():
            emitted += 1
            yield node
        emitted += 1
        yield statement

    logger.debug("parsed %d lines into %d objects", lines, emitted)


class Script:
    """Lazily parsed BEL script.

    Iterating starts a fresh pass every time; a partially consumed iterator
    can't be resumed by a new ``iter()``.
    """

    def __init__(self, source: str | None = None, path: str | Path | None = None,
                 encoding: str = "utf-8"):
        if (source is None) == (path is None):
            raise ValueError("exactly one of source or path is required")
        self.source = source
        self.path = Path(path) if path is not None else None
        self.encoding = encoding

    def __iter__(self) -> Iterator[BELObject]:
        if self.path is None:
            return iter_objects(self.source)
        return self._iter_file()

    def _iter_file(self) -> Iterator[BELObject]:
        with self.path.open(encoding=self.encoding) as f:
            yield from iter_objects(f)

    def each(self, handler: Handler) -> None:
        """Push every object to ``handler`` in source order."""
        for obj in self:
            handler(obj)

    def statements(self) -> list[Statement]:
        return [obj for obj in self if isinstance(obj, Statement)]

    def __repr__(self) -> str:
        where = str(self.path) if self.path else f"{len(self.source)} chars"
        return f"Script({where})"


def parse(source: str, handler: Handler | None = None) -> Script:
    """Parse BEL script text.

    With a handler, every object is pushed to it before this returns; the
    returned Script can still be iterated again.
    """
    script = Script(source)
    if handler is not None:
        script.each(handler)
    return script


def parse_file(filepath: str | Path, handler: Handler | None = None,
               encoding: str = "utf-8") -> Script:
    """Parse a BEL script file, read line by line on each pass."""
    script = Script(path=filepath, encoding=encoding)
    if handler is not None:
        script.each(handler)
    return script
