"""Tokenizer and recursive descent parser for BEL statement lines.

Grammar:
    statement       = term [relationship statement_object]
    statement_object = term | "(" statement ")"
    term            = IDENT "(" [arg ("," arg)*] ")"
    arg             = term | [IDENT ":"] (IDENT | QSTRING)
    relationship    = RELATION | IDENT naming a relationship ("increases")

At most one relationship per level; a parenthesised object without one is
just a term.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import UnbalancedParenthesesError, UnexpectedTokenError, UnrecognizedTokenError
from .language import IDENTIFIER, RELATIONSHIP_SYMBOLS, Relationship
from .lines import unquote
from .model import Parameter, Statement, Term


class TokenType(Enum):
    IDENT = "IDENT"
    QSTRING = "QSTRING"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    COLON = ":"
    RELATION = "RELATION"
    EOF = "EOF"


@dataclass
class Token:
    type: TokenType
    value: str
    line: int
    column: int

    def describe(self) -> str:
        if self.type == TokenType.EOF:
            return "end of line"
        return f"{self.type.name} {self.value!r}"


class Lexer:
    """Tokenizes a single logical line."""

    TOKEN_PATTERNS = [
        (re.compile(r"\s+"), None),
        (re.compile(r'"(?:[^"\\]|\\.)*"'), TokenType.QSTRING),
        (re.compile("|".join(re.escape(s) for s in RELATIONSHIP_SYMBOLS)), TokenType.RELATION),
        (re.compile(r":"), TokenType.COLON),
        (re.compile(r"\("), TokenType.LPAREN),
        (re.compile(r"\)"), TokenType.RPAREN),
        (re.compile(r","), TokenType.COMMA),
        (IDENTIFIER, TokenType.IDENT),
    ]
    # Reported on failure: the run up to the next delimiter, or one character
    UNRECOGNIZED = re.compile(r'[^\s(),:"]+|\S')

    def __init__(self, source: str, line: int = 1):
        self.source = source
        self.line = line
        self.pos = 0
        self.tokens: list[Token] = []
        self._tokenise()

    def _tokenise(self) -> None:
        while self.pos < len(self.source):
            for pattern, ttype in self.TOKEN_PATTERNS:
                m = pattern.match(self.source, self.pos)
                if m:
                    value = m.group(0)
                    if ttype is not None:
                        if ttype == TokenType.QSTRING:
                            value = unquote(value[1:-1])
                        self.tokens.append(Token(ttype, value, self.line, self.pos + 1))
                    self.pos = m.end()
                    break
            else:
                bad = self.UNRECOGNIZED.match(self.source, self.pos).group(0)
                raise UnrecognizedTokenError(bad, self.line, self.pos + 1)

        self.tokens.append(Token(TokenType.EOF, "", self.line, len(self.source) + 1))


class Parser:
    """Recursive descent parser over one line's tokens."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        idx = self.pos + offset
        if idx >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[idx]

    def at(self, *types: TokenType) -> bool:
        return self.peek().type in types

    def consume(self, ttype: TokenType, expected: str) -> Token:
        tok = self.peek()
        if tok.type != ttype:
            raise UnexpectedTokenError(expected, tok.describe(), tok.line, tok.column)
        self.pos += 1
        return tok

    def match(self, *types: TokenType) -> Token | None:
        if self.at(*types):
            tok = self.peek()
            self.pos += 1
            return tok
        return None

    def check_parentheses(self) -> None:
        """Raise UnbalancedParenthesesError unless every "(" has a matching ")"."""
        open_parens: list[Token] = []
        for tok in self.tokens:
            if tok.type == TokenType.LPAREN:
                open_parens.append(tok)
            elif tok.type == TokenType.RPAREN:
                if not open_parens:
                    raise UnbalancedParenthesesError("unmatched ')'", tok.line, tok.column)
                open_parens.pop()
        if open_parens:
            tok = open_parens[-1]
            raise UnbalancedParenthesesError("unclosed '('", tok.line, tok.column)

    def parse_line_statement(self, comment: str | None = None) -> Statement:
        """Parse a whole line as a statement."""
        self.check_parentheses()
        statement = self.parse_statement()
        self.consume(TokenType.EOF, "relationship or end of line")
        if comment is not None:
            statement = statement.model_copy(update={"comment": comment})
        return statement

    def parse_line_term(self) -> Term:
        """Parse a whole line as a single term."""
        self.check_parentheses()
        term = self.parse_term()
        self.consume(TokenType.EOF, "end of line")
        return term

    def parse_statement(self) -> Statement:
        subject = self.parse_term()
        relationship = self._match_relationship()
        if relationship is None:
            return Statement(subject=subject)

        obj = self._parse_statement_object()
        if self._at_relationship():
            tok = self.peek()
            raise UnexpectedTokenError(
                "end of statement (relationships do not chain)",
                tok.describe(),
                tok.line,
                tok.column,
            )
        return Statement(subject=subject, relationship=relationship, object=obj)

    def _at_relationship(self) -> bool:
        tok = self.peek()
        if tok.type == TokenType.RELATION:
            return True
        return tok.type == TokenType.IDENT and Relationship.lookup(tok.value) is not None

    def _match_relationship(self) -> Relationship | None:
        if self._at_relationship():
            return Relationship.lookup(self.match(TokenType.RELATION, TokenType.IDENT).value)
        return None

    def _parse_statement_object(self) -> Term | Statement:
        if self.match(TokenType.LPAREN):
            inner = self.parse_statement()
            self.consume(TokenType.RPAREN, "')'")
            if inner.subject_only:
                return inner.subject
            return inner
        return self.parse_term()

    def parse_term(self) -> Term:
        function = self.consume(TokenType.IDENT, "function name").value
        self.consume(TokenType.LPAREN, "'('")

        args: list[Term | Parameter] = []
        if not self.at(TokenType.RPAREN):
            args.append(self._parse_arg())
            while self.match(TokenType.COMMA):
                args.append(self._parse_arg())

        self.consume(TokenType.RPAREN, "',' or ')'")
        return Term(function=function, arguments=tuple(args))

    def _parse_arg(self) -> Term | Parameter:
        if tok := self.match(TokenType.QSTRING):
            return Parameter(value=tok.value)

        if self.at(TokenType.IDENT):
            if self.peek(1).type == TokenType.LPAREN:
                return self.parse_term()
            name = self.consume(TokenType.IDENT, "value").value
            if self.match(TokenType.COLON):
                tok = self.peek()
                if not self.match(TokenType.IDENT, TokenType.QSTRING):
                    raise UnexpectedTokenError(
                        "namespace value", tok.describe(), tok.line, tok.column
                    )
                return Parameter(prefix=name, value=tok.value)
            return Parameter(value=name)

        tok = self.peek()
        raise UnexpectedTokenError("term or value", tok.describe(), tok.line, tok.column)


def parse_statement(source: str, line: int = 1, comment: str | None = None) -> Statement:
    """Parse one statement line (without its comment) into a Statement."""
    lexer = Lexer(source, line)
    parser = Parser(lexer.tokens)
    return parser.parse_line_statement(comment)


def parse_term(source: str, line: int = 1) -> Term:
    """Parse a single BEL term such as ``p(HGNC:AKT1)``."""
    lexer = Lexer(source, line)
    parser = Parser(lexer.tokens)
    return parser.parse_line_term()
