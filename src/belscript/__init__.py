"""belscript - parse BEL (Biological Expression Language) scripts.

Pipeline: split logical lines -> directives or tokenize + parse statements ->
ordered stream of objects.

Example:
    from belscript import parse, Statement

    script = parse(open("corpus.bel").read())
    statements = [obj for obj in script if isinstance(obj, Statement)]
    nested = sum(1 for s in statements if s.nested)
"""

__version__ = "0.1.0"

from .errors import (
    InvalidDirectiveError,
    MalformedLineError,
    ParseError,
    UnbalancedParenthesesError,
    UnexpectedTokenError,
    UnrecognizedTokenError,
)
from .language import FUNCTIONS, Function, Relationship, function_for
from .model import (
    Annotation,
    AnnotationDefinition,
    BELObject,
    DocumentProperty,
    NamespaceDefinition,
    Parameter,
    ReferenceKind,
    Statement,
    StatementGroup,
    StatementShape,
    Term,
    Unset,
)
from .parser import Lexer, Parser, Token, TokenType, parse_statement, parse_term
from .script import Script, iter_objects, parse, parse_file

__all__ = [
    # Parse
    "parse",
    "parse_file",
    "iter_objects",
    "Script",
    "parse_statement",
    "parse_term",
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    # Objects
    "BELObject",
    "DocumentProperty",
    "NamespaceDefinition",
    "AnnotationDefinition",
    "ReferenceKind",
    "Annotation",
    "Unset",
    "StatementGroup",
    "Parameter",
    "Term",
    "Statement",
    "StatementShape",
    # Language
    "Relationship",
    "Function",
    "FUNCTIONS",
    "function_for",
    # Errors
    "ParseError",
    "MalformedLineError",
    "InvalidDirectiveError",
    "UnrecognizedTokenError",
    "UnexpectedTokenError",
    "UnbalancedParenthesesError",
]
