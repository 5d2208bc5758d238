"""Standalone constructors: each call starts a fresh SelectorBuilder."""

from __future__ import annotations

from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.model import Combinator, Renderable

__all__ = [
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().set_element(value)


def id_(value: str) -> SelectorBuilder:
    return SelectorBuilder().set_id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().add_class(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().add_attribute(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().add_pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().set_pseudo_element(value)


def combine(*parts: Renderable | Combinator | str) -> SelectorBuilder:
    """Combine alternating selectors and combinator tokens.

    >>> combine(element("ul"), ">", element("li")).render()
    'ul > li'
    """
    return SelectorBuilder().combine(parts)


class _SelectorFacade:
    """Namespace object exposing the constructors under their CSS names.

    ``class`` is a keyword, so that operation is reachable as ``class_`` or
    via ``getattr(css_selector_builder, "class")``.
    """

    element = staticmethod(element)
    id = staticmethod(id_)
    class_ = staticmethod(class_)
    attr = staticmethod(attr)
    pseudo_class = staticmethod(pseudo_class)
    pseudo_element = staticmethod(pseudo_element)
    combine = staticmethod(combine)

    def __repr__(self) -> str:
        return "css_selector_builder"


# "class" cannot be a name in the class body, so it is attached afterwards.
setattr(_SelectorFacade, "class", staticmethod(class_))

css_selector_builder = _SelectorFacade()
