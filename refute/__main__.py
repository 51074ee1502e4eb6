"""
CLI entry point. Run as: python -m refute [--domain <name> | --clauses ... --query X]
"""

import argparse

from .core.engine import refute
from .core.parse import ParseError
from .core.proof import print_proof
from .visualization import print_report, export_dot
from .domains import DOMAINS


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="refute",
        description="Two-literal resolution refutation",
    )
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="demo",
        help="Which sample problem to run",
    )
    parser.add_argument("--clauses", nargs="+", default=None, metavar="CLAUSE",
                        help='Clause strings, e.g. "C|P" "!C|R" (overrides --domain)')
    parser.add_argument("--query",  type=str, default=None,
                        help="Literal to prove (required with --clauses)")
    parser.add_argument("--trace",  action="store_true",    help="Print the proof trace")
    parser.add_argument("--verbose", action="store_true",   help="Print each step as it is resolved")
    parser.add_argument("--save",   type=str, default=None, help="Save refutation to file")
    parser.add_argument("--dot",    type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--list",   action="store_true",    help="List sample problems")
    args = parser.parse_args(argv)

    if args.list:
        for name, domain in DOMAINS.items():
            print(f"  {name:<14} {domain['description']}")
        return 0

    if args.clauses is not None:
        if args.query is None:
            parser.error("--query is required with --clauses")
        clauses, query = args.clauses, args.query
    else:
        clauses, query = DOMAINS[args.domain]["make_problem"]()
        if args.query is not None:
            query = args.query

    try:
        refutation = refute(clauses, query, verbose=args.verbose)
    except ParseError as e:
        parser.error(str(e))

    print_report(refutation)

    if args.trace:
        print_proof(refutation)

    if args.dot:
        export_dot(refutation, args.dot)

    if args.save:
        refutation.save(args.save)
        print(f"Refutation saved to {args.save}")

    return 0


if __name__ == "__main__":
    main()
