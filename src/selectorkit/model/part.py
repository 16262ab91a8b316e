"""Part kinds: the six building blocks of a compound CSS selector."""

from __future__ import annotations

from enum import Enum


class PartKind(Enum):
    """Kinds of selector parts, declared in canonical order.

    A compound selector must list its parts in this order:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def index(self) -> int:
        """Position of this kind in the canonical order."""
        return _CANONICAL_ORDER.index(self)

    @property
    def is_single(self) -> bool:
        """True if a selector may hold at most one part of this kind."""
        return self in _SINGLE_KINDS

    def render(self, value: str) -> str:
        """Render *value* as a fragment of this kind, prefix included."""
        return _TEMPLATES[self].format(value)


_CANONICAL_ORDER: list[PartKind] = list(PartKind)

_SINGLE_KINDS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_TEMPLATES: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}
