"""
The refutation driver.

Fold the clause set left to right through resolvent, then resolve the
result against the negated query. The fold order is fixed: the first two
clauses seed the accumulator, every later clause is resolved *against* the
accumulator (clause first, accumulator second). There is no search and no
backtracking; one pass either reaches the empty clause or it does not.
"""

from typing import Optional

from .state import Clause
from .parse import parse_clause, parse_literal
from .proof import Refutation, ResolutionStep
from ..inference.resolve import resolvent


def negated_query(query: str) -> Clause:
    """Unit clause holding the negation of the query literal."""
    return Clause.unit(parse_literal(query).negate(), label="negated query")


def _record(steps, verbose, left, right, result):
    result.step = len(steps) + 1
    steps.append(ResolutionStep(result.step, left, right, result.name))
    if verbose:
        print(f"  [{result.step}] {left} + {right} -> {result.name}")


def fold_resolvents(
    clauses: list,
    steps: Optional[list] = None,
    verbose: bool = False,
) -> Optional[Clause]:
    """
    Resolve clauses[0] with clauses[1], then each later clause with the
    running result. One clause folds to itself; none folds to None.

    Args:
        clauses:  parsed clauses; consumed (resolvent mutates its operands)
        steps:    list to append a ResolutionStep to per resolvent
        verbose:  print each step
    """
    if steps is None:
        steps = []
    if not clauses:
        return None
    if len(clauses) == 1:
        return clauses[0]

    acc = resolvent(clauses[0], clauses[1])
    _record(steps, verbose, *acc.source, acc)
    for clause in clauses[2:]:
        acc = resolvent(clause, acc)
        _record(steps, verbose, *acc.source, acc)
    return acc


def refute(clauses: list, query: str, verbose: bool = False) -> Refutation:
    """
    Try to prove query by refutation.

    Args:
        clauses:  clause strings ("C|P"), Clause objects, or a mix of both
        query:    the literal to test, e.g. "R"
        verbose:  print progress

    Raises:
        ParseError: a clause string or the query does not parse.
    """
    parsed = [parse_clause(c) if isinstance(c, str) else c for c in clauses]
    goal = negated_query(query)

    refutation = Refutation(
        initial=[c.name for c in parsed],
        query=parse_literal(query).name,
        negated_query=goal.first.name,
    )
    if verbose:
        print(f"Refuting {goal.name} against {len(parsed)} clause(s)")

    acc = fold_resolvents(parsed, refutation.steps, verbose)
    if acc is None:
        refutation.final = goal
    else:
        final = resolvent(goal, acc)
        _record(refutation.steps, verbose, *final.source, final)
        refutation.final = final

    if verbose:
        print(f"  Result: {'empty clause' if refutation.proved else refutation.final.name}")
    return refutation
