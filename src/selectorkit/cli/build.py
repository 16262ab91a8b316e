"""CLI command: selectorkit build -- assemble a selector from KIND=VALUE tokens."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import css_selector_builder
from selectorkit.errors import SelectorError
from selectorkit.model.part import PartKind
from selectorkit.model.selector import Selector

_KINDS: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "attribute": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}


def _split_token(token: str) -> tuple[str, str]:
    key, sep, value = token.partition("=")
    if not sep or not key:
        raise click.BadParameter(
            f"expected KIND=VALUE, got {token!r}", param_hint="TOKENS"
        )
    if key != "combine" and key not in _KINDS:
        raise click.BadParameter(f"unknown part kind {key!r}", param_hint="TOKENS")
    return key, value


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND=VALUE tokens.

    KIND is one of element, id, class, attr, pseudo-class or pseudo-element.
    Tokens are applied in the order given. A combine=COMBINATOR token joins
    the selector built so far with the one that follows it.

    Example: selectorkit build element=div id=main combine=+ element=table
    """
    compounds: list[Selector] = [Selector()]
    combinators: list[str] = []

    try:
        for token in tokens:
            key, value = _split_token(token)
            if key == "combine":
                if not compounds[-1].fragments():
                    raise click.UsageError("combine=... must follow a selector part")
                combinators.append(value)
                compounds.append(Selector())
                continue
            compounds[-1].add(_KINDS[key], value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not compounds[-1].fragments():
        raise click.UsageError("combine=... must be followed by a selector part")

    result = compounds[0]
    for combinator, right in zip(combinators, compounds[1:]):
        result = css_selector_builder.combine(result, combinator, right)
    click.echo(result.render())
