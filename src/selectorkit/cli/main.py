"""Selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (defaults to $SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Selectorkit - build CSS selector strings from ordered parts."""
    try:
        config = SelectorkitConfig.from_env(log_level=log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="SELECTORKIT_LOG_LEVEL")
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("selectorkit").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.combine import combine  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
