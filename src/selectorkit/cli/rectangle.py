"""CLI command: selectorkit rectangle -- show a rectangle's area or JSON form."""

from __future__ import annotations

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.model.rectangle import Rectangle
from selectorkit.serialization import serialize


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rectangle(config: SelectorKitConfig, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width=width, height=height)
    if as_json:
        click.echo(serialize(rect, config))
    else:
        click.echo(f"{rect.area:g}")
