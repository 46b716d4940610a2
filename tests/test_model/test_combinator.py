"""Tests for the Combinator enum."""

import pytest

from cssbuilder.model import Combinator


class TestLookup:
    @pytest.mark.parametrize(
        "token, expected",
        [
            (" ", Combinator.DESCENDANT),
            (">", Combinator.CHILD),
            ("+", Combinator.NEXT_SIBLING),
            ("~", Combinator.SUBSEQUENT_SIBLING),
            ("||", Combinator.COLUMN),
        ],
    )
    def test_symbols(self, token, expected):
        assert Combinator.lookup(token) is expected

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("descendant", Combinator.DESCENDANT),
            ("CHILD", Combinator.CHILD),
            ("next-sibling", Combinator.NEXT_SIBLING),
            ("subsequent_sibling", Combinator.SUBSEQUENT_SIBLING),
        ],
    )
    def test_names(self, token, expected):
        assert Combinator.lookup(token) is expected

    def test_any_whitespace_is_descendant(self):
        assert Combinator.lookup("   ") is Combinator.DESCENDANT

    def test_unknown_token(self):
        assert Combinator.lookup("/deep/") is None
