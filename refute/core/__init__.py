from .state import Literal, Connective, Clause
from .parse import ParseError, tokenize, parse_literal, parse_clause, parse_clause_list
from .proof import ResolutionStep, Refutation, print_proof
from .engine import negated_query, fold_resolvents, refute

__all__ = [
    "Literal", "Connective", "Clause",
    "ParseError", "tokenize", "parse_literal", "parse_clause", "parse_clause_list",
    "ResolutionStep", "Refutation", "print_proof",
    "negated_query", "fold_resolvents", "refute",
]
