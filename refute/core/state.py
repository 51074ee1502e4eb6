"""
Core data structures: Literal, Connective, Clause.

These are the atoms of the whole system. Nothing in here depends on
parsing, inference, or the sample problems.

Literals:   a single-character propositional symbol plus a polarity
            Literal("C", False)  ->  C
            Literal("C", True)   ->  !C

A Clause holds at most two literal slots. A slot is either a Literal or
None (absent). The empty clause [] is a contradiction -> refutation found.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Literal:
    """One occurrence of a propositional symbol, optionally negated."""
    symbol: str
    negated: bool = False

    @property
    def name(self):
        return f"{'!' if self.negated else ''}{self.symbol}"

    def matches(self, symbol: str) -> bool:
        """Same symbol, whatever the polarity."""
        return self.symbol == symbol

    def negate(self) -> 'Literal':
        return replace(self, negated=not self.negated)

    def to_dict(self):
        return {"symbol": self.symbol, "negated": self.negated}

    @classmethod
    def from_dict(cls, d):
        return cls(d["symbol"], d.get("negated", False))

    def __repr__(self):
        return f"Literal({self.name})"


class Connective(Enum):
    """The connective a clause was written with. Recorded, not interpreted."""
    NONE = ""
    OR = "|"
    AND = "&"
    NOT = "!"

    @classmethod
    def from_char(cls, ch: str) -> Optional['Connective']:
        for connective in cls:
            if connective.value and connective.value == ch:
                return connective
        return None


@dataclass
class Clause:
    """
    A disjunction of at most two literals.

    Slots are vacated (set to None) by resolution; the clause itself is
    never re-identified. Equality looks at the slots and connective only,
    so derived clauses compare equal to their parsed counterparts.
    """
    first: Optional[Literal] = None
    second: Optional[Literal] = None
    connective: Connective = Connective.NONE
    source: tuple = field(default=(), compare=False)
    step: int = field(default=0, compare=False)
    label: str = field(default="", compare=False)

    @classmethod
    def unit(cls, literal: Literal, label: str = "") -> 'Clause':
        return cls(literal, None, Connective.NONE, label=label)

    @property
    def literals(self) -> tuple:
        return tuple(lit for lit in (self.first, self.second) if lit is not None)

    @property
    def symbols(self) -> tuple:
        return tuple(lit.symbol for lit in self.literals)

    @property
    def name(self):
        if self.is_empty:
            name = "[]"
        else:
            sep = self.connective.value or Connective.OR.value
            name = sep.join(lit.name for lit in self.literals)
        if self.label:
            name = f"[{self.label}] {name}"
        return name

    @property
    def is_empty(self):
        return self.first is None and self.second is None

    def contains_symbol(self, symbol: str) -> bool:
        return any(lit.matches(symbol) for lit in self.literals)

    def contains_negation_of(self, symbol: str) -> bool:
        """A present slot carries symbol AND is negated."""
        return any(lit.matches(symbol) and lit.negated for lit in self.literals)

    def remove_symbol(self, symbol: Optional[str]):
        """Vacate every slot carrying symbol, negated or not."""
        if symbol is None:
            return
        if self.first is not None and self.first.matches(symbol):
            self.first = None
        if self.second is not None and self.second.matches(symbol):
            self.second = None

    def to_dict(self):
        def serialize(lit):
            return lit.to_dict() if lit is not None else None

        return {
            "first": serialize(self.first),
            "second": serialize(self.second),
            "connective": self.connective.name.lower(),
            "source": list(self.source),
            "step": self.step,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, d):
        def deserialize(data):
            return Literal.from_dict(data) if data is not None else None

        return cls(
            deserialize(d.get("first")),
            deserialize(d.get("second")),
            Connective[d.get("connective", "none").upper()],
            tuple(d.get("source", ())),
            d.get("step", 0),
            d.get("label", ""),
        )

    def __repr__(self):
        return f"Clause({self.name})"
