"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selectors from their parts."""
    config = SelectorKitConfig.from_env()
    level = (log_level or config.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
