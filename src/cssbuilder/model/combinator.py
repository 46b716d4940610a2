"""The CSS combinators used to join selectors."""

from __future__ import annotations

from enum import Enum


class Combinator(Enum):
    """A combinator token placed between two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
    COLUMN = "||"

    @classmethod
    def lookup(cls, token: str) -> Combinator | None:
        """Return the combinator for a symbol or member name, else ``None``.

        Names are matched case-insensitively with ``-`` and ``_`` treated
        alike, so ``next-sibling`` finds ``NEXT_SIBLING``.
        """
        if token.isspace():
            return cls.DESCENDANT
        for member in cls:
            if token == member.value:
                return member
        return cls.__members__.get(token.strip().upper().replace("-", "_"))
