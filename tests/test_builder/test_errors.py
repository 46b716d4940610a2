"""Tests for the error hierarchy."""

from cssbuilder.errors import (
    DuplicateSelectorPartError,
    InvalidOrderError,
    SelectorError,
    UnknownCategoryError,
)
from cssbuilder.model import Category


class TestHierarchy:
    def test_all_are_selector_errors(self):
        for cls in (DuplicateSelectorPartError, InvalidOrderError, UnknownCategoryError):
            assert issubclass(cls, SelectorError)

    def test_duplicate_message(self):
        err = DuplicateSelectorPartError(Category.ID)
        assert "should not occur more then one time" in str(err)
        assert "id" in str(err)
        assert err.category is Category.ID

    def test_order_message(self):
        err = InvalidOrderError(Category.CLASS, Category.ATTRIBUTE)
        assert str(err).startswith(
            "Selector parts should be arranged in the following order"
        )
        assert err.category is Category.CLASS
        assert err.blocking is Category.ATTRIBUTE
