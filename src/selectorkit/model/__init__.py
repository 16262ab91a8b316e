"""selectorkit model layer -- public type re-exports."""

from selectorkit.model.part import PartKind
from selectorkit.model.rectangle import Rectangle
from selectorkit.model.selector import Selector

__all__ = [
    "PartKind",
    "Selector",
    "Rectangle",
]
