"""Compound selector: two serialized selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompoundSelector:
    """An immutable ``<left> <combinator> <right>`` selector.

    The operands are stored already serialized, so mutating a fragment after
    it has been combined does not change the compound.  A compound is itself
    a valid operand for another combine, which is how nested selectors such as
    ``div + table ~ tr td`` are built.

    Attributes:
        left: Serialized left-hand selector.
        combinator: The combinator token, verbatim.
        right: Serialized right-hand selector.
    """

    left: str
    combinator: str
    right: str

    @property
    def is_descendant(self) -> bool:
        """True when the combinator is whitespace (the descendant combinator)."""
        return self.combinator.isspace()

    def serialize(self) -> str:
        if self.is_descendant:
            return f"{self.left} {self.right}"
        return f"{self.left} {self.combinator} {self.right}"

    stringify = serialize

    def __str__(self) -> str:
        return self.serialize()
