"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Category


class SelectorError(Exception):
    """Base class for invalid selector construction."""


class DuplicateError(SelectorError):
    """Raised when element, id or pseudo-element is set twice."""

    def __init__(self, category: Category | None = None):
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        )


class OrderError(SelectorError):
    """Raised when a selector part arrives after a later part."""

    def __init__(self, category: Category | None = None):
        self.category = category
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class CombinatorError(SelectorError):
    """Raised in strict mode for an unknown combinator token."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown combinator: {token!r}")
