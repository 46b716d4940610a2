"""Selector builder facade: one factory per part, plus combine."""

from __future__ import annotations

import logging
from typing import Iterable

from cssbuilder.model.category import Category
from cssbuilder.model.combinator import Combinator
from cssbuilder.model.compound import CompoundSelector
from cssbuilder.model.fragment import SelectorFragment
from cssbuilder.model.selector import Selector

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "build",
]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Entry point for building selectors.

    Each factory returns a new :class:`SelectorFragment` holding one part,
    ready for further chained calls::

        b = SelectorBuilder()
        b.id("main").class_("container").class_("editable").serialize()
        # '#main.container.editable'
    """

    def element(self, value: str) -> SelectorFragment:
        return SelectorFragment().set_element(value)

    def id(self, value: str) -> SelectorFragment:
        return SelectorFragment().set_id(value)

    def class_(self, value: str) -> SelectorFragment:
        return SelectorFragment().add_class(value)

    def attr(self, value: str) -> SelectorFragment:
        return SelectorFragment().add_attribute(value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return SelectorFragment().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return SelectorFragment().set_pseudo_element(value)

    def build(self, parts: Iterable[tuple[Category | str, str]]) -> SelectorFragment:
        """Build a fragment from ``(category, value)`` pairs, in the given order.

        Categories may be :class:`Category` members or names accepted by
        :meth:`Category.from_name`.
        """
        fragment = SelectorFragment()
        for category, value in parts:
            if not isinstance(category, Category):
                category = Category.from_name(category)
            fragment.add(category, value)
        return fragment

    def combine(
        self,
        left: Selector,
        combinator: Combinator | str,
        right: Selector,
    ) -> CompoundSelector:
        """Join two selectors with *combinator*.

        The combinator is not validated; any token is placed verbatim between
        the operands.  Both operands are serialized now.
        """
        for operand in (left, right):
            if not isinstance(operand, Selector):
                raise TypeError(
                    f"combine() operands must have serialize(), got {type(operand).__name__}"
                )
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        compound = CompoundSelector(
            left=left.serialize(), combinator=token, right=right.serialize()
        )
        logger.debug("Combined selector %r", compound.serialize())
        return compound


css_selector_builder = SelectorBuilder()

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
build = css_selector_builder.build
