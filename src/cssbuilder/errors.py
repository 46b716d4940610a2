"""Error hierarchy for selector construction."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model.category import Category


DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
INVALID_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateSelectorPartError(SelectorError):
    """An element, id or pseudo-element was set a second time."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            f"{DUPLICATE_PART_MESSAGE} (duplicate {category.value})",
            category=category,
        )


class InvalidOrderError(SelectorError):
    """A part was supplied after a part of a later category."""

    def __init__(self, category: Category, blocking: Category) -> None:
        super().__init__(
            f"{INVALID_ORDER_MESSAGE} ({category.value} after {blocking.value})",
            category=category,
        )
        self.blocking = blocking


class UnknownCategoryError(SelectorError, ValueError):
    """A category name does not match any selector part."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown selector part: {name!r}")
        self.name = name
