"""
Domain: two-literal resolution problems.

Each maker returns (clauses, query): the clause strings in fold order and
the literal to prove. Fold order matters; the clauses are listed in the
order the chain of resolvents needs them.

demo           -- C|P, !C|R, !P|H, !H entail R
syllogism      -- humans are mortal, H holds, so M
modus_tollens  -- A implies B, B fails, so !A
unproved       -- the fold does not reach the empty clause
"""


def make_demo_problem():
    """
    Axioms:
        C or P
        C implies R:    !C|R
        P implies H:    !P|H
        not H:          !H

    Negated goal: !R. The fold runs C|P -> P|R -> H|R -> R -> [].
    """
    return ["C|P", "!C|R", "!P|H", "!H"], "R"


def make_syllogism_problem():
    """
    Axioms:
        all humans are mortal:  !H|M
        socrates is human:      H

    Negated goal: !M.
    """
    return ["!H|M", "H"], "M"


def make_modus_tollens_problem():
    """
    Axioms:
        A implies B:  !A|B
        not B:        !B

    Negated goal: A, which clashes with the derived !A.
    """
    return ["!A|B", "!B"], "!A"


def make_unproved_problem():
    """
    Axioms:
        C or P
        C implies R:  !C|R

    H is not entailed: the fold ends on !H|P.
    """
    return ["C|P", "!C|R"], "H"
