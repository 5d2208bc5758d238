from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.errors import (
    CombinatorError,
    DuplicateError,
    OrderError,
    SelectorError,
)
from selectorkit.selector.facade import css_selector_builder
from selectorkit.selector.model import Category, Combinator, RawSelector, Renderable

__all__ = [
    "SelectorBuilder",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "CombinatorError",
    "css_selector_builder",
    "Category",
    "Combinator",
    "RawSelector",
    "Renderable",
]
