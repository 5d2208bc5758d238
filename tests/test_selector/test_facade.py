"""Tests for the standalone selector constructors."""

import pytest

from selectorkit.selector import DuplicateError, OrderError, SelectorBuilder
from selectorkit.selector.facade import (
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)


class TestConstructors:
    @pytest.mark.parametrize(
        "factory, expected",
        [
            (element, "div"),
            (id_, "#div"),
            (class_, ".div"),
            (attr, "[div]"),
            (pseudo_class, ":div"),
            (pseudo_element, "::div"),
        ],
    )
    def test_each_constructor(self, factory, expected):
        b = factory("div")
        assert isinstance(b, SelectorBuilder)
        assert b.render() == expected

    def test_each_call_is_a_fresh_builder(self):
        first = element("div")
        second = element("div")
        assert first is not second
        first.add_class("x")
        assert second.render() == "div"

    def test_chaining_from_constructor(self):
        assert id_("main").add_class("container").add_class("editable").render() == (
            "#main.container.editable"
        )

    def test_errors_come_from_builder(self):
        with pytest.raises(DuplicateError):
            element("div").set_element("p")
        with pytest.raises(OrderError):
            pseudo_element("after").add_pseudo_class("hover")

    def test_combine_is_variadic(self):
        b = combine(element("ul"), ">", element("li"))
        assert b.render() == "ul > li"


class TestFacadeObject:
    def test_worked_example(self):
        builder = css_selector_builder
        selector = builder.combine(
            builder.element("div").set_id("main").add_class("container").add_class("draggable"),
            "+",
            builder.combine(
                builder.element("table").set_id("data"),
                "~",
                builder.combine(
                    builder.element("tr").add_pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").add_pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert selector.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_class_reachable_by_keyword_name(self):
        make_class = getattr(css_selector_builder, "class")
        assert make_class("btn").render() == ".btn"
        assert css_selector_builder.class_("btn").render() == ".btn"

    def test_remaining_operations(self):
        assert css_selector_builder.id("x").render() == "#x"
        assert css_selector_builder.attr("lang").render() == "[lang]"
        assert css_selector_builder.pseudo_class("hover").render() == ":hover"
        assert css_selector_builder.pseudo_element("marker").render() == "::marker"
