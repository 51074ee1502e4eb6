"""
Clause parsing.

Grammar of one clause string:

    ["!"] SYMBOL [ ("|" | "&" | "!") ["!"] SYMBOL ]

SYMBOL is a single word character. A literal token is any run of "!"
markers directly followed by one symbol character, so "!!C" is a negated C
(markers do not cancel). The connective is read from the characters left
over once the first two literal tokens are cut out of the text. Anything
after the second literal is ignored: "A|B|C" reads as A|B.
"""

import re

from .state import Literal, Connective, Clause


TOKEN = re.compile(r"!*\w")
LITERAL = re.compile(r"(!*)(\w)")


class ParseError(ValueError):
    """A clause or literal string that does not fit the grammar."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(f"{message}: {text!r}")
        self.text = text


def tokenize(text: str) -> list:
    """Literal tokens of text as (token, start, end), in order of appearance."""
    return [(m.group(), m.start(), m.end()) for m in TOKEN.finditer(text)]


def parse_literal(token: str) -> Literal:
    m = LITERAL.fullmatch(token)
    if m is None:
        raise ParseError("not a literal", token)
    markers, symbol = m.groups()
    return Literal(symbol, negated=len(markers) > 0)


def _connective_between(text: str, spans: list) -> Connective:
    """First non-blank character outside the token spans, as a Connective."""
    covered = set()
    for _, start, end in spans:
        covered.update(range(start, end))
    for i, ch in enumerate(text):
        if i in covered or ch.isspace():
            continue
        connective = Connective.from_char(ch)
        if connective is None:
            raise ParseError(f"unknown connective {ch!r}", text)
        return connective
    raise ParseError("missing connective", text)


def parse_clause(text: str) -> Clause:
    tokens = tokenize(text)
    if not tokens:
        raise ParseError("no literal found", text)

    first = parse_literal(tokens[0][0])
    if len(tokens) == 1:
        return Clause(first, None, Connective.NONE)

    second = parse_literal(tokens[1][0])
    return Clause(first, second, _connective_between(text, tokens[:2]))


def parse_clause_list(texts) -> list:
    """Parse every string in order. The first bad string aborts the lot."""
    return [parse_clause(text) for text in texts]
