"""
Refute: resolution refutation over two-literal propositional clauses.

Clauses are written as compact strings ("C|P", "!C|R", "!H"). To test a
literal, its negation is resolved against the folded clause set; deriving
the empty clause proves the literal is entailed.

Usage:
    python -m refute                                 (demo problem)
    python -m refute --domain syllogism
    python -m refute --clauses "C|P" "!C|R" --query R
    python -m refute --list
"""

from .core.state import Literal, Connective, Clause
from .core.parse import ParseError, tokenize, parse_literal, parse_clause, parse_clause_list
from .core.proof import ResolutionStep, Refutation, print_proof
from .core.engine import negated_query, fold_resolvents, refute
from .inference.resolve import resolvent

__all__ = [
    "Literal", "Connective", "Clause",
    "ParseError", "tokenize", "parse_literal", "parse_clause", "parse_clause_list",
    "ResolutionStep", "Refutation", "print_proof",
    "negated_query", "fold_resolvents", "refute",
    "resolvent",
]
