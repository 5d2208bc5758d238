"""Chainable builder for compound and complex CSS selectors."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from selectorkit.selector.errors import CombinatorError, DuplicateError, OrderError
from selectorkit.selector.model import Category, Combinator, Renderable

logger = logging.getLogger(__name__)

_KNOWN_COMBINATORS = frozenset(c.value for c in Combinator)

# Cursor position once the builder holds a combined selector; above every rank.
_COMBINED = len(Category)


class SelectorBuilder:
    """Accumulates validated selector parts and renders a selector string.

    Parts must be supplied in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may be set
    only once. Every setter returns the builder itself so calls can be
    chained::

        SelectorBuilder().set_id("main").add_class("container").render()
        # '#main.container'

    After :meth:`combine` the builder holds a complex selector and rejects
    further part setters with :class:`OrderError`.
    """

    def __init__(self, *, strict_combinators: bool = False) -> None:
        self.strict_combinators = strict_combinators
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._combined: str | None = None
        self._cursor = -1

    # --- read-only views ------------------------------------------------------

    @property
    def element(self) -> str | None:
        return self._element

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._attributes)

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return tuple(self._pseudo_classes)

    @property
    def pseudo_element(self) -> str | None:
        return self._pseudo_element

    @property
    def combined(self) -> str | None:
        return self._combined

    # --- ordering -------------------------------------------------------------

    def _advance(self, category: Category) -> None:
        """Move the category cursor forward or raise if *category* is illegal here."""
        if self._cursor > category:
            logger.debug(
                "Rejected %s after cursor reached rank %d", category.label, self._cursor
            )
            raise OrderError(category)
        if category.is_singleton and self._cursor == category:
            logger.debug("Rejected duplicate %s", category.label)
            raise DuplicateError(category)
        self._cursor = int(category)

    # --- part setters ---------------------------------------------------------

    def set_element(self, name: str) -> SelectorBuilder:
        self._advance(Category.ELEMENT)
        self._element = name
        return self

    def set_id(self, name: str) -> SelectorBuilder:
        self._advance(Category.ID)
        self._id = name
        return self

    def add_class(self, name: str) -> SelectorBuilder:
        self._advance(Category.CLASS)
        self._classes.append(name)
        return self

    def add_attribute(self, body: str) -> SelectorBuilder:
        """Append a raw attribute body, e.g. ``href$=".png"`` (brackets are added)."""
        self._advance(Category.ATTRIBUTE)
        self._attributes.append(body)
        return self

    def add_pseudo_class(self, name: str) -> SelectorBuilder:
        self._advance(Category.PSEUDO_CLASS)
        self._pseudo_classes.append(name)
        return self

    def set_pseudo_element(self, name: str) -> SelectorBuilder:
        self._advance(Category.PSEUDO_ELEMENT)
        self._pseudo_element = name
        return self

    # --- combination ----------------------------------------------------------

    def combine(self, parts: Sequence[Renderable | Combinator | str]) -> SelectorBuilder:
        """Join selectors with combinators into a complex selector.

        *parts* alternates operands and combinator tokens: even indexes are
        renderable selectors, odd indexes are tokens. Each token is written
        between single spaces, so the descendant combinator ``" "`` comes
        out as three spaces.
        """
        chunks: list[str] = []
        for index, part in enumerate(parts):
            if index % 2 == 0:
                if not isinstance(part, Renderable):
                    raise TypeError(
                        f"Selector operand at index {index} has no render(): {part!r}"
                    )
                chunks.append(part.render())
                continue
            token = part.value if isinstance(part, Combinator) else str(part)
            if self.strict_combinators and token not in _KNOWN_COMBINATORS:
                raise CombinatorError(token)
            chunks.append(f" {token} ")

        logger.debug("Combined %d part(s)", len(parts))
        self._combined = "".join(chunks)
        self._cursor = _COMBINED
        return self

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the selector string. Has no side effects."""
        if self._combined is not None:
            return self._combined

        rendered: list[str] = []
        if self._element is not None:
            rendered.append(Category.ELEMENT.format(self._element))
        if self._id is not None:
            rendered.append(Category.ID.format(self._id))
        rendered.extend(Category.CLASS.format(c) for c in self._classes)
        rendered.extend(Category.ATTRIBUTE.format(a) for a in self._attributes)
        rendered.extend(Category.PSEUDO_CLASS.format(p) for p in self._pseudo_classes)
        if self._pseudo_element is not None:
            rendered.append(Category.PSEUDO_ELEMENT.format(self._pseudo_element))
        return "".join(rendered)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"
