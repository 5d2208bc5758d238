"""Selector model: part categories, combinators and renderable operands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol, runtime_checkable


class Category(IntEnum):
    """A selector part type, valued by its rank in the mandatory order.

    Ranks:
        0 = element (div)
        1 = id (#main)
        2 = class (.container)
        3 = attribute ([href$=".png"])
        4 = pseudo-class (:focus)
        5 = pseudo-element (::before)
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def is_singleton(self) -> bool:
        """Element, id and pseudo-element may appear only once."""
        return self in _SINGLETONS

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def format(self, value: str) -> str:
        """Render a single part value with this category's prefix/wrapper."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(Enum):
    """The standard CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT = "+"
    SIBLING = "~"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to a selector string."""

    def render(self) -> str: ...


@dataclass(frozen=True)
class RawSelector:
    """An already-rendered selector string usable as a combine operand."""

    text: str

    def render(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
