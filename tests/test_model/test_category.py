"""Tests for selector part categories."""

import pytest

from cssbuilder.errors import SelectorError, UnknownCategoryError
from cssbuilder.model import CATEGORY_ORDER, Category


class TestOrder:
    def test_fixed_css_order(self):
        assert CATEGORY_ORDER == (
            Category.ELEMENT,
            Category.ID,
            Category.CLASS,
            Category.ATTRIBUTE,
            Category.PSEUDO_CLASS,
            Category.PSEUDO_ELEMENT,
        )

    def test_index_matches_position(self):
        assert [c.index for c in CATEGORY_ORDER] == [0, 1, 2, 3, 4, 5]

    def test_repeatable(self):
        repeatable = {c for c in Category if c.repeatable}
        assert repeatable == {Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS}


class TestRender:
    @pytest.mark.parametrize(
        "category, expected",
        [
            (Category.ELEMENT, "div"),
            (Category.ID, "#div"),
            (Category.CLASS, ".div"),
            (Category.ATTRIBUTE, "[div]"),
            (Category.PSEUDO_CLASS, ":div"),
            (Category.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_render(self, category, expected):
        assert category.render("div") == expected

    def test_value_passed_through_verbatim(self):
        assert Category.ATTRIBUTE.render('href$=".png"') == '[href$=".png"]'


class TestFromName:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("element", Category.ELEMENT),
            ("ID", Category.ID),
            ("class", Category.CLASS),
            ("attr", Category.ATTRIBUTE),
            ("attribute", Category.ATTRIBUTE),
            ("pseudo-class", Category.PSEUDO_CLASS),
            ("pseudo_class", Category.PSEUDO_CLASS),
            ("pseudoClass", Category.PSEUDO_CLASS),
            ("pseudoElement", Category.PSEUDO_ELEMENT),
        ],
    )
    def test_known_names(self, name, expected):
        assert Category.from_name(name) is expected

    def test_unknown_name(self):
        with pytest.raises(UnknownCategoryError) as exc_info:
            Category.from_name("tag")
        assert exc_info.value.name == "tag"

    def test_unknown_name_is_selector_and_value_error(self):
        with pytest.raises(SelectorError):
            Category.from_name("nope")
        with pytest.raises(ValueError):
            Category.from_name("nope")
