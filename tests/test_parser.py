"""Tests for the statement tokenizer and grammar parser."""

import pytest

from belscript import (
    Parameter,
    Relationship,
    Statement,
    Term,
    UnbalancedParenthesesError,
    UnexpectedTokenError,
    UnrecognizedTokenError,
)
from belscript.parser import Lexer, TokenType, parse_statement, parse_term


def _types(source: str) -> list[TokenType]:
    return [tok.type for tok in Lexer(source).tokens[:-1]]


def _values(source: str) -> list[str]:
    return [tok.value for tok in Lexer(source).tokens[:-1]]


class TestLexer:
    def test_empty_line(self):
        tokens = Lexer("").tokens
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_namespaced_term(self):
        assert _types("p(HGNC:AKT1)") == [
            TokenType.IDENT,
            TokenType.LPAREN,
            TokenType.IDENT,
            TokenType.COLON,
            TokenType.IDENT,
            TokenType.RPAREN,
        ]

    @pytest.mark.parametrize("symbol", ["->", "-|", "=>", "=|", "--", ">>", ":>"])
    def test_relationship_symbols(self, symbol):
        tokens = Lexer(f"g(HGNC:A) {symbol} r(HGNC:A)").tokens
        assert tokens[6].type == TokenType.RELATION
        assert tokens[6].value == symbol

    def test_relationship_without_spaces(self):
        assert _values("p(A)->p(B)") == ["p", "(", "A", ")", "->", "p", "(", "B", ")"]

    def test_hyphenated_identifier(self):
        assert _values("p(HGNC:HLA-A)")[4] == "HLA-A"

    def test_numeric_identifier(self):
        assert _values("pmod(P,S,473)")[-2] == "473"

    def test_quoted_string_decoded(self):
        tokens = Lexer('bp(GOBP:"lipid oxidation")').tokens
        assert tokens[4].type == TokenType.QSTRING
        assert tokens[4].value == "lipid oxidation"

    def test_escaped_quote_in_string(self):
        assert _values('a("say \\"hi\\"")')[2] == 'say "hi"'

    def test_columns(self):
        tokens = Lexer("p(A) -> p(B)").tokens
        assert [tok.column for tok in tokens] == [1, 2, 3, 4, 6, 9, 10, 11, 12, 13]

    def test_unrecognized_token(self):
        with pytest.raises(UnrecognizedTokenError) as exc:
            Lexer("p(A) ~ p(B)", line=9)
        assert exc.value.substring == "~"
        assert exc.value.line == 9
        assert exc.value.column == 6

    def test_unicode_identifier(self):
        assert _values("a(CHEBI:βcarotene)") == ["a", "(", "CHEBI", ":", "βcarotene", ")"]
        assert _types("a(CHEBI:βcarotene)")[4] == TokenType.IDENT

    def test_unrecognized_token_stops_at_delimiter(self):
        with pytest.raises(UnrecognizedTokenError) as exc:
            Lexer("p(A ~)")
        assert exc.value.substring == "~"
        assert exc.value.column == 5


class TestTerms:
    def test_nested_term(self):
        term = parse_term("p(MGI:Akt1,pmod(P,S,473))")
        assert term == Term(
            function="p",
            arguments=(
                Parameter(prefix="MGI", value="Akt1"),
                Term(
                    function="pmod",
                    arguments=(Parameter(value="P"), Parameter(value="S"), Parameter(value="473")),
                ),
            ),
        )

    def test_quoted_namespace_value(self):
        term = parse_term('bp(GOBP:"lipid oxidation")')
        assert term.arguments == (Parameter(prefix="GOBP", value="lipid oxidation"),)

    def test_bare_quoted_argument(self):
        term = parse_term('a("free text")')
        assert term.arguments == (Parameter(value="free text"),)

    def test_non_ascii_value(self):
        term = parse_term("a(CHEBI:βcarotene)")
        assert term.arguments == (Parameter(prefix="CHEBI", value="βcarotene"),)
        assert term.to_bel() == "a(CHEBI:βcarotene)"

    def test_no_arguments(self):
        assert parse_term("list()") == Term(function="list")

    def test_trailing_comma(self):
        with pytest.raises(UnexpectedTokenError) as exc:
            parse_term("p(A,)")
        assert exc.value.expected == "term or value"
        assert exc.value.found == "RPAREN ')'"

    def test_missing_namespace_value(self):
        with pytest.raises(UnexpectedTokenError, match="namespace value"):
            parse_term("p(HGNC:)")

    def test_not_a_function_call(self):
        with pytest.raises(UnexpectedTokenError) as exc:
            parse_statement("HGNC:AKT1")
        assert exc.value.position == (1, 5)


class TestStatements:
    def test_subject_only(self):
        statement = parse_statement("path(MESHD:Atherosclerosis)")
        assert statement.subject_only
        assert statement.relationship is None
        assert statement.object is None

    def test_simple(self):
        statement = parse_statement('path(MESHD:Atherosclerosis) => bp(GOBP:"lipid oxidation")')
        assert statement.simple
        assert statement.relationship is Relationship.DIRECTLY_INCREASES
        assert statement.object == parse_term('bp(GOBP:"lipid oxidation")')

    def test_nested(self):
        statement = parse_statement(
            'path(MESHD:Atherosclerosis) =| (p(HGNC:MYC) -> bp(GOBP:"apoptotic process"))'
        )
        assert statement.nested
        assert statement.relationship is Relationship.DIRECTLY_DECREASES
        inner = statement.object
        assert isinstance(inner, Statement)
        assert inner.simple
        assert inner.relationship is Relationship.INCREASES

    def test_deep_nesting(self):
        statement = parse_statement("p(A) -> (p(B) -> (p(C) -| p(D)))")
        assert statement.nested
        assert statement.object.nested
        assert statement.object.object.simple
        assert statement.object.object.relationship is Relationship.DECREASES

    def test_long_form_relationship(self):
        assert parse_statement("p(HGNC:A) increases p(HGNC:B)") == parse_statement(
            "p(HGNC:A) -> p(HGNC:B)"
        )

    def test_long_only_relationship(self):
        statement = parse_statement("p(HGNC:A) positiveCorrelation p(HGNC:B)")
        assert statement.relationship is Relationship.POSITIVE_CORRELATION

    def test_parenthesised_term_is_unwrapped(self):
        statement = parse_statement("p(A) -> (p(B))")
        assert statement.simple
        assert statement.object == parse_term("p(B)")

    def test_comment_attached(self):
        statement = parse_statement("p(A) -> p(B)", comment="Comment2")
        assert statement.comment == "Comment2"

    def test_relationships_do_not_chain(self):
        with pytest.raises(UnexpectedTokenError) as exc:
            parse_statement("p(A) -> p(B) -> p(C)")
        assert exc.value.found == "RELATION '->'"
        assert exc.value.column == 14

    def test_no_chaining_inside_nested(self):
        with pytest.raises(UnexpectedTokenError):
            parse_statement("p(A) -> (p(B) -> p(C) => p(D))")

    def test_two_terms_without_relationship(self):
        with pytest.raises(UnexpectedTokenError, match="relationship or end of line"):
            parse_statement("p(A) p(B)")

    def test_missing_object(self):
        with pytest.raises(UnexpectedTokenError):
            parse_statement("p(A) ->")


class TestParentheses:
    def test_unclosed(self):
        with pytest.raises(UnbalancedParenthesesError) as exc:
            parse_statement("p(HGNC:MYC ->", line=12)
        assert exc.value.line == 12
        assert exc.value.column == 2

    def test_unmatched_close(self):
        with pytest.raises(UnbalancedParenthesesError, match="unmatched"):
            parse_statement("p(A))")

    def test_unclosed_nested_object(self):
        with pytest.raises(UnbalancedParenthesesError):
            parse_statement("p(A) -> (p(B) -> p(C)")
