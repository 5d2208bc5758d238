"""CLI command: selectorkit build -- render a compound selector from parts."""

from __future__ import annotations

import sys
from collections.abc import Callable

import click

from selectorkit.selector import SelectorBuilder, SelectorError

_SETTERS: dict[str, Callable[[SelectorBuilder, str], SelectorBuilder]] = {
    "element": SelectorBuilder.set_element,
    "id": SelectorBuilder.set_id,
    "class": SelectorBuilder.add_class,
    "attr": SelectorBuilder.add_attribute,
    "pseudo-class": SelectorBuilder.add_pseudo_class,
    "pseudo-element": SelectorBuilder.set_pseudo_element,
}


def _split_part(raw: str) -> tuple[str, str]:
    kind, sep, value = raw.partition("=")
    if not sep or kind not in _SETTERS:
        raise click.BadParameter(
            f"{raw!r} is not KIND=VALUE with KIND one of: {', '.join(_SETTERS)}",
            param_hint="PART",
        )
    return kind, value


@click.command()
@click.argument("parts", metavar="PART...", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts, applied in the given order.

    Example: selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    steps = [_split_part(raw) for raw in parts]

    builder = SelectorBuilder()
    try:
        for kind, value in steps:
            _SETTERS[kind](builder, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.render())
