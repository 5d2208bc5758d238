"""Tests for selector categories, combinators and raw operands."""

import pytest

from selectorkit.selector import Category, Combinator, RawSelector, Renderable, SelectorBuilder


class TestCategory:
    def test_ranks_follow_css_order(self):
        assert [c.name for c in sorted(Category)] == [
            "ELEMENT",
            "ID",
            "CLASS",
            "ATTRIBUTE",
            "PSEUDO_CLASS",
            "PSEUDO_ELEMENT",
        ]

    def test_singletons(self):
        assert {c for c in Category if c.is_singleton} == {
            Category.ELEMENT,
            Category.ID,
            Category.PSEUDO_ELEMENT,
        }

    @pytest.mark.parametrize(
        "category, expected",
        [
            (Category.ELEMENT, "x"),
            (Category.ID, "#x"),
            (Category.CLASS, ".x"),
            (Category.ATTRIBUTE, "[x]"),
            (Category.PSEUDO_CLASS, ":x"),
            (Category.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_format(self, category, expected):
        assert category.format("x") == expected

    def test_label(self):
        assert Category.PSEUDO_CLASS.label == "pseudo-class"


class TestCombinator:
    def test_values(self):
        assert Combinator.DESCENDANT.value == " "
        assert str(Combinator.SIBLING) == "~"


class TestRenderable:
    def test_builder_and_raw_are_renderable(self):
        assert isinstance(SelectorBuilder(), Renderable)
        assert isinstance(RawSelector("a"), Renderable)

    def test_plain_string_is_not(self):
        assert not isinstance("a", Renderable)

    def test_raw_selector_is_frozen(self):
        raw = RawSelector("a")
        with pytest.raises(AttributeError):
            raw.text = "b"  # type: ignore[misc]
