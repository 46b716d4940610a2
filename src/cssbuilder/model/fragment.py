"""Selector fragment: accumulates simple-selector parts in CSS order."""

from __future__ import annotations

import logging

from cssbuilder.errors import DuplicateSelectorPartError, InvalidOrderError
from cssbuilder.model.category import CATEGORY_ORDER, Category

logger = logging.getLogger(__name__)


class SelectorFragment:
    """A mutable compound of element, id, classes, attributes and pseudos.

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element.  Element, id and pseudo-element may be set
    once; classes, attributes and pseudo-classes accumulate in insertion
    order.  Every setter returns the fragment itself so calls chain::

        SelectorFragment().element("a").id("main").class_("nav").serialize()
        # 'a#main.nav'

    The fragment's state is the highest category populated so far.  It only
    moves forward: adding a part of a category earlier than a populated one
    raises :class:`InvalidOrderError`.

    Once a fragment has been passed to ``combine`` it should be treated as
    frozen.  The compound keeps the text serialized at that moment, so later
    changes are not reflected in it.
    """

    def __init__(self) -> None:
        self._parts: dict[Category, list[str]] = {c: [] for c in CATEGORY_ORDER}

    # --- state ----------------------------------------------------------------

    @property
    def state(self) -> Category | None:
        """The latest populated category, or ``None`` for an empty fragment."""
        for category in reversed(CATEGORY_ORDER):
            if self._parts[category]:
                return category
        return None

    @property
    def is_empty(self) -> bool:
        return self.state is None

    def get(self, category: Category) -> str | tuple[str, ...] | None:
        """Return the stored value(s) for *category*.

        Repeatable categories give a tuple in insertion order; the others give
        the single value or ``None``.
        """
        values = self._parts[category]
        if category.repeatable:
            return tuple(values)
        return values[0] if values else None

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._parts[Category.CLASS])

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._parts[Category.ATTRIBUTE])

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return tuple(self._parts[Category.PSEUDO_CLASS])

    # --- setters --------------------------------------------------------------

    def add(self, category: Category, value: str) -> SelectorFragment:
        """Add *value* as a part of *category*."""
        if not category.repeatable and self._parts[category]:
            logger.debug("Rejected duplicate %s %r", category.value, value)
            raise DuplicateSelectorPartError(category)
        self._check_order(category)
        self._parts[category].append(value)
        return self

    def _check_order(self, category: Category) -> None:
        for later in CATEGORY_ORDER[category.index + 1 :]:
            if self._parts[later]:
                logger.debug(
                    "Rejected %s after %s in %r",
                    category.value,
                    later.value,
                    self.serialize(),
                )
                raise InvalidOrderError(category, later)

    def set_element(self, value: str) -> SelectorFragment:
        return self.add(Category.ELEMENT, value)

    def set_id(self, value: str) -> SelectorFragment:
        return self.add(Category.ID, value)

    def add_class(self, value: str) -> SelectorFragment:
        return self.add(Category.CLASS, value)

    def add_attribute(self, value: str) -> SelectorFragment:
        return self.add(Category.ATTRIBUTE, value)

    def add_pseudo_class(self, value: str) -> SelectorFragment:
        return self.add(Category.PSEUDO_CLASS, value)

    def set_pseudo_element(self, value: str) -> SelectorFragment:
        return self.add(Category.PSEUDO_ELEMENT, value)

    # Chainable names matching the builder facade.
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    # --- output ---------------------------------------------------------------

    def serialize(self) -> str:
        """Render the fragment as CSS selector text."""
        return "".join(
            category.render(value)
            for category in CATEGORY_ORDER
            for value in self._parts[category]
        )

    stringify = serialize

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"SelectorFragment({self.serialize()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorFragment):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]
