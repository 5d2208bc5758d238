"""selectorkit: build CSS selector strings from ordered, validated parts."""

from selectorkit.selector import (
    CombinatorError,
    DuplicateError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "SelectorBuilder",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "CombinatorError",
    "css_selector_builder",
    "__version__",
]
