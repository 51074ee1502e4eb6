"""
Unit and property-based tests for clause parsing.

Core claims:
    - "!C|R" parses to (!C, R, or)
    - Strings with no literal token, or an unknown connective, raise ParseError
    - A connective character never gets mistaken for part of a symbol
    - One bad string aborts parse_clause_list
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from refute.core.state import Literal, Connective, Clause
from refute.core.parse import (
    ParseError, tokenize, parse_literal, parse_clause, parse_clause_list,
)


# ── Generators ────────────────────────────────────────────────────────────────

symbols = st.sampled_from("ABCDEFGHPQRSXYZabc0123456789")
markers = st.sampled_from(["", "!"])
connectives = st.sampled_from(["|", "&"])


# ── Unit tests ────────────────────────────────────────────────────────────────

class TestTokenize:
    def test_spans(self):
        assert tokenize("!C|R") == [("!C", 0, 2), ("R", 3, 4)]

    def test_no_tokens(self):
        assert tokenize("||") == []

    def test_negation_markers_stack(self):
        assert tokenize("!!C") == [("!!C", 0, 3)]


class TestParseLiteral:
    def test_positive(self):
        assert parse_literal("P") == Literal("P", False)

    def test_negated(self):
        assert parse_literal("!C") == Literal("C", True)

    def test_repeated_markers_stay_negated(self):
        assert parse_literal("!!C") == Literal("C", True)

    @pytest.mark.parametrize("token", ["", "!", "CP", "C!", "|"])
    def test_malformed(self, token):
        with pytest.raises(ParseError):
            parse_literal(token)


class TestParseClause:
    def test_two_literal_or(self):
        c = parse_clause("!C|R")
        assert c.first == Literal("C", True)
        assert c.second == Literal("R", False)
        assert c.connective is Connective.OR

    def test_single_literal(self):
        c = parse_clause("!H")
        assert c.first == Literal("H", True)
        assert c.second is None
        assert c.connective is Connective.NONE

    def test_and(self):
        assert parse_clause("A&B").connective is Connective.AND

    def test_not_connective(self):
        c = parse_clause("C ! R")
        assert c.connective is Connective.NOT
        assert c.literals == (Literal("C"), Literal("R"))

    def test_whitespace_around_connective(self):
        assert parse_clause(" C | P ") == parse_clause("C|P")

    def test_no_word_character(self):
        with pytest.raises(ParseError):
            parse_clause("||")

    def test_empty_string(self):
        with pytest.raises(ParseError):
            parse_clause("")

    def test_unknown_connective(self):
        with pytest.raises(ParseError) as exc:
            parse_clause("C^P")
        assert exc.value.text == "C^P"

    def test_missing_connective(self):
        with pytest.raises(ParseError):
            parse_clause("C!R")  # "!R" is a literal, nothing is left over

    def test_third_literal_ignored(self):
        c = parse_clause("A|B|C")
        assert c == Clause(Literal("A"), Literal("B"), Connective.OR)
        assert not c.contains_symbol("C")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_clause("||")


class TestParseClauseList:
    def test_preserves_order(self):
        texts = ["C|P", "!C|R", "!P|H", "!H"]
        result = parse_clause_list(texts)
        assert [c.name for c in result] == texts

    def test_empty_list(self):
        assert parse_clause_list([]) == []

    def test_one_bad_string_aborts(self):
        with pytest.raises(ParseError):
            parse_clause_list(["C|P", "||", "!H"])


# ── Property-based tests ──────────────────────────────────────────────────────

class TestParseProperties:

    @given(markers, symbols, connectives, markers, symbols)
    def test_well_formed_clause(self, m1, s1, conn, m2, s2):
        c = parse_clause(f"{m1}{s1}{conn}{m2}{s2}")
        assert c.first == Literal(s1, m1 == "!")
        assert c.second == Literal(s2, m2 == "!")
        assert c.connective is Connective.from_char(conn)

    @given(markers, symbols)
    def test_unit_clause(self, m, s):
        c = parse_clause(f"{m}{s}")
        assert c == Clause.unit(Literal(s, m == "!"))

    @given(st.text(alphabet="|&^ ", max_size=8))
    def test_no_symbol_never_parses(self, text):
        with pytest.raises(ParseError):
            parse_clause(text)
