"""Errors raised while parsing BEL script.

Every error is fatal to the parse pass that raised it.
"""


class ParseError(Exception):
    def __init__(self, msg: str, line: int, col: int | None = None):
        where = f"line {line}" if col is None else f"line {line}, col {col}"
        super().__init__(f"{where}: {msg}")
        self.msg = msg
        self.line = line
        self.column = col


class MalformedLineError(ParseError):
    """Unterminated quoted string or dangling escape."""


class InvalidDirectiveError(ParseError):
    """SET/UNSET/DEFINE keyword recognised but the rest of the line is malformed."""


class UnrecognizedTokenError(ParseError):
    def __init__(self, substring: str, line: int, col: int):
        super().__init__(f"unrecognized token: {substring!r}", line, col)
        self.substring = substring


class UnexpectedTokenError(ParseError):
    def __init__(self, expected: str, found: str, line: int, col: int):
        super().__init__(f"expected {expected}, got {found}", line, col)
        self.expected = expected
        self.found = found

    @property
    def position(self) -> tuple[int, int]:
        return self.line, self.column


class UnbalancedParenthesesError(ParseError):
    pass
