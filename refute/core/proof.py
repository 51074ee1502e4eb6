"""
Refutation record and proof display.

A Refutation is the full trace of one run: the clause set that went in,
the query, every resolution step of the fold and the clause it ended on.
It serializes to JSON for later inspection.
"""

import json
from dataclasses import dataclass, field
from typing import Optional

from .state import Clause


@dataclass
class ResolutionStep:
    """One resolvent computed during the fold."""
    step: int
    left: str
    right: str
    result: str

    def to_dict(self):
        return {"step": self.step, "left": self.left,
                "right": self.right, "result": self.result}

    @classmethod
    def from_dict(cls, d):
        return cls(d["step"], d["left"], d["right"], d["result"])


@dataclass
class Refutation:
    initial: list
    query: str
    negated_query: str
    steps: list = field(default_factory=list)
    final: Optional[Clause] = None

    @property
    def proved(self) -> bool:
        """Empty clause derived -> the negated query is contradictory."""
        return self.final is not None and self.final.is_empty

    def to_dict(self):
        return {
            "initial": list(self.initial),
            "query": self.query,
            "negated_query": self.negated_query,
            "steps": [s.to_dict() for s in self.steps],
            "final": self.final.to_dict() if self.final is not None else None,
            "proved": self.proved,
        }

    @classmethod
    def from_dict(cls, d):
        final = d.get("final")
        return cls(
            list(d["initial"]),
            d["query"],
            d["negated_query"],
            [ResolutionStep.from_dict(s) for s in d.get("steps", [])],
            Clause.from_dict(final) if final is not None else None,
        )

    def save(self, path="refutation.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="refutation.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))


def print_proof(refutation: Refutation):
    """Pretty-print the derivation, one resolvent per line."""
    print(f"\n{'='*60}")
    print("PROOF (refutation)")
    print(f"{'='*60}")
    for i, text in enumerate(refutation.initial):
        print(f"  {i+1}. {text}  [axiom]")
    offset = len(refutation.initial)
    print(f"  {offset+1}. {refutation.negated_query}  [negated query]")
    for s in refutation.steps:
        print(f"  {offset+1+s.step}. {s.result}  [from: {s.left} + {s.right}]")
    print(f"{'='*60}")
    if refutation.proved:
        print(f"  QED: empty clause derived -> !{refutation.query} is contradictory"
              f" -> {refutation.query} holds.")
    else:
        final = refutation.final.name if refutation.final is not None else "(nothing)"
        print(f"  No refutation: fold ended on {final}.")
