"""Directive lines: SET, UNSET and DEFINE.

    SET DOCUMENT <key> = <value>
    SET STATEMENT_GROUP = <value>
    SET <annotation> = <value> | {<value>, ...}
    UNSET <annotation> | {<annotation>, ...}
    DEFINE NAMESPACE <prefix> AS URL|PATTERN|LIST <value>
    DEFINE ANNOTATION <name> AS URL|PATTERN|LIST <value>

Keywords are case-insensitive. A value is a quoted string or a bare token.
"""

import re

from .errors import InvalidDirectiveError
from .lines import LogicalLine, unquote
from .model import (
    Annotation,
    AnnotationDefinition,
    DocumentProperty,
    NamespaceDefinition,
    ReferenceKind,
    StatementGroup,
    Unset,
)

KEYWORD_PATTERN = re.compile(r"(SET|UNSET|DEFINE)(?:\s+|$)", re.IGNORECASE)

DOCUMENT_PATTERN = re.compile(r"DOCUMENT\s+([^\s=]+)\s*=\s*(.*)", re.IGNORECASE)
STATEMENT_GROUP_PATTERN = re.compile(r"STATEMENT_GROUP\s*=\s*(.*)", re.IGNORECASE)
ASSIGNMENT_PATTERN = re.compile(r"([^\s={}]+)\s*=\s*(.*)")
DEFINE_PATTERN = re.compile(
    r"(NAMESPACE|ANNOTATION)\s+([^\s]+)\s+AS\s+([A-Za-z]+)\s+(.*)", re.IGNORECASE
)

QUOTED_PATTERN = re.compile(r'"((?:[^"\\]|\\.)*)"')
BARE_PATTERN = re.compile(r'[^\s"{},]+')
LIST_ITEM_PATTERN = re.compile(r'\s*(?:"((?:[^"\\]|\\.)*)"|([^\s"{},]+))\s*')


def _parse_list(body: str, number: int) -> tuple[str, ...]:
    inner = body[1:-1]
    items = []
    pos = 0
    while True:
        m = LIST_ITEM_PATTERN.match(inner, pos)
        if not m:
            raise InvalidDirectiveError(f"malformed list item in {body}", number)
        quoted, bare = m.groups()
        items.append(unquote(quoted) if quoted is not None else bare)
        pos = m.end()
        if pos == len(inner):
            return tuple(items)
        if inner[pos] != ",":
            raise InvalidDirectiveError(f"expected ',' in list {body}", number)
        pos += 1


def _parse_value(text: str, number: int, allow_list: bool) -> str | tuple[str, ...]:
    text = text.strip()
    if not text:
        raise InvalidDirectiveError("missing value", number)
    if text.startswith("{"):
        if not allow_list:
            raise InvalidDirectiveError(f"list value not allowed here: {text}", number)
        if not text.endswith("}"):
            raise InvalidDirectiveError(f"unterminated list: {text}", number)
        return _parse_list(text, number)
    if m := QUOTED_PATTERN.fullmatch(text):
        return unquote(m.group(1))
    if BARE_PATTERN.fullmatch(text):
        return text
    raise InvalidDirectiveError(f"malformed value: {text}", number)


def _parse_set(body: str, number: int):
    first = body.split(None, 1)[0].upper() if body else ""

    if first == "DOCUMENT":
        m = DOCUMENT_PATTERN.fullmatch(body)
        if not m:
            raise InvalidDirectiveError("expected 'SET DOCUMENT <key> = <value>'", number)
        return DocumentProperty(name=m.group(1), value=_parse_value(m.group(2), number, False))

    if m := STATEMENT_GROUP_PATTERN.fullmatch(body):
        return StatementGroup(name=_parse_value(m.group(1), number, False))

    m = ASSIGNMENT_PATTERN.fullmatch(body)
    if not m:
        raise InvalidDirectiveError("expected 'SET <annotation> = <value>'", number)
    return Annotation(name=m.group(1), value=_parse_value(m.group(2), number, True))


def _parse_unset(body: str, number: int) -> Unset:
    if not body:
        raise InvalidDirectiveError("expected 'UNSET <annotation>'", number)
    if body.startswith("{"):
        if not body.endswith("}"):
            raise InvalidDirectiveError(f"unterminated list: {body}", number)
        return Unset(names=_parse_list(body, number))
    if not BARE_PATTERN.fullmatch(body):
        raise InvalidDirectiveError(f"malformed annotation name: {body}", number)
    return Unset(names=(body,))


def _parse_define(body: str, number: int):
    m = DEFINE_PATTERN.fullmatch(body)
    if not m:
        raise InvalidDirectiveError(
            "expected 'DEFINE NAMESPACE|ANNOTATION <name> AS URL|PATTERN|LIST <value>'",
            number,
        )
    what, name, kind_text, value_text = m.groups()
    try:
        kind = ReferenceKind(kind_text.upper())
    except ValueError:
        raise InvalidDirectiveError(f"unknown reference kind: {kind_text}", number) from None

    reference = _parse_value(value_text, number, allow_list=kind is ReferenceKind.LIST)
    if kind is ReferenceKind.LIST and not isinstance(reference, tuple):
        raise InvalidDirectiveError("LIST requires a {...} value", number)

    if what.upper() == "NAMESPACE":
        return NamespaceDefinition(prefix=name, kind=kind, reference=reference)
    return AnnotationDefinition(name=name, kind=kind, reference=reference)


def parse_directive(line: LogicalLine):
    """Parse a directive line.

    Returns None when the line does not start with a directive keyword, so the
    caller can try it as a statement instead.
    """
    m = KEYWORD_PATTERN.match(line.text)
    if not m:
        return None

    keyword = m.group(1).upper()
    body = line.text[m.end() :].strip()
    if keyword == "SET":
        return _parse_set(body, line.number)
    if keyword == "UNSET":
        return _parse_unset(body, line.number)
    return _parse_define(body, line.number)
