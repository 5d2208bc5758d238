"""CLI command: selectorkit combine -- join selectors with combinators."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.selector import RawSelector, SelectorBuilder, SelectorError


@click.command()
@click.argument("tokens", metavar="TOKEN...", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Only accept ' ', '>', '+' and '~'")
@click.pass_obj
def combine(config: SelectorkitConfig | None, tokens: tuple[str, ...], strict: bool) -> None:
    """Combine alternating SELECTOR COMBINATOR SELECTOR ... tokens.

    Selectors are taken as already rendered. Each combinator is written
    between single spaces.
    """
    strict = strict or (config is not None and config.strict_combinators)
    parts = [
        RawSelector(token) if index % 2 == 0 else token
        for index, token in enumerate(tokens)
    ]

    try:
        builder = SelectorBuilder(strict_combinators=strict).combine(parts)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.render())
