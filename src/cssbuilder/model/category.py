"""Selector part categories and their fixed CSS order."""

from __future__ import annotations

from enum import Enum

from cssbuilder.errors import UnknownCategoryError


class Category(Enum):
    """One kind of simple-selector part."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def index(self) -> int:
        return CATEGORY_ORDER.index(self)

    @property
    def repeatable(self) -> bool:
        return self in _REPEATABLE

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @property
    def suffix(self) -> str:
        return "]" if self is Category.ATTRIBUTE else ""

    def render(self, value: str) -> str:
        """Render *value* with this category's CSS punctuation."""
        return f"{self.prefix}{value}{self.suffix}"

    @classmethod
    def from_name(cls, name: str) -> Category:
        """Look up a category by name.

        Accepts the enum value (``pseudo-class``), snake_case
        (``pseudo_class``), camelCase (``pseudoClass``) and ``attribute``.
        """
        key = "".join(ch for ch in name.strip().lower() if ch not in "-_")
        try:
            return _BY_KEY[key]
        except KeyError:
            raise UnknownCategoryError(name) from None


# Parts must be supplied, and are always serialized, in this order.
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.ELEMENT,
    Category.ID,
    Category.CLASS,
    Category.ATTRIBUTE,
    Category.PSEUDO_CLASS,
    Category.PSEUDO_ELEMENT,
)

_REPEATABLE = frozenset({Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS})

_PREFIXES: dict[Category, str] = {
    Category.ELEMENT: "",
    Category.ID: "#",
    Category.CLASS: ".",
    Category.ATTRIBUTE: "[",
    Category.PSEUDO_CLASS: ":",
    Category.PSEUDO_ELEMENT: "::",
}

_BY_KEY: dict[str, Category] = {
    c.value.replace("-", ""): c for c in Category
}
_BY_KEY["attribute"] = Category.ATTRIBUTE
