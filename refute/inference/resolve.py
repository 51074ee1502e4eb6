"""
Two-literal resolution: the core inference rule of the refutation.

Given two clauses, look for a complementary pair (same symbol, exactly one
occurrence negated), vacate that symbol in both clauses and join whatever
is left into a new "or" clause. If nothing is left, the empty clause has
been derived.

This is deliberately not textbook resolution. Removal is by symbol, not by
occurrence, and there are two passes (a against b, then b against a), so
the outcome depends on slot order. The sample problems rely on exactly
this behaviour.
"""

from ..core.state import Clause, Connective


def _eliminate(source: Clause, target: Clause):
    """
    First symbol of source (slot order) that target holds negated gets
    removed from both clauses. At most one symbol per call.
    """
    for symbol in (lit.symbol if lit is not None else None
                   for lit in (source.first, source.second)):
        if symbol is not None and target.contains_negation_of(symbol):
            target.remove_symbol(symbol)
            source.remove_symbol(symbol)
            return symbol
    return None


def resolvent(a: Clause, b: Clause) -> Clause:
    """
    Resolve a against b. Destructive: both operands lose their eliminated
    slots. Always returns a fresh clause, possibly the empty one.
    """
    source = (a.name, b.name)

    # Slot symbols are read once per pass; the second pass sees the
    # clauses as the first pass left them.
    _eliminate(a, b)
    _eliminate(b, a)

    return Clause(
        a.first or a.second,
        b.first or b.second,
        Connective.OR,
        source=source,
    )
