"""
Domain registry.

Each domain is a dict describing one sample problem:
    make_problem:  () -> (list[str], str)   clause strings and query
    expected:      bool                     whether the query is proved
    description:   str
"""

from .resolution import (
    make_demo_problem, make_syllogism_problem,
    make_modus_tollens_problem, make_unproved_problem,
)


DOMAINS = {
    "demo": {
        "make_problem": make_demo_problem,
        "expected":     True,
        "description":  "Chain of implications: C|P, !C|R, !P|H, !H entail R",
    },
    "syllogism": {
        "make_problem": make_syllogism_problem,
        "expected":     True,
        "description":  "All humans are mortal, H is human, so M",
    },
    "modus_tollens": {
        "make_problem": make_modus_tollens_problem,
        "expected":     True,
        "description":  "A implies B and not B, so not A",
    },
    "unproved": {
        "make_problem": make_unproved_problem,
        "expected":     False,
        "description":  "A query the clause set does not entail",
    },
}
