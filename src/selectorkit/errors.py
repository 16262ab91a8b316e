"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.part import PartKind


class SelectorError(Exception):
    """Base error for selector assembly failures."""

    def __init__(self, message: str, *, kind: PartKind) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicatePartError(SelectorError):
    """A single-valued part (element, id, pseudo-element) was set twice."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector",
            kind=kind,
        )


class OrderViolationError(SelectorError):
    """A part was added after a part that must come later in the selector."""

    def __init__(self, kind: PartKind, after: PartKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )
        self.after = after


class SerializationError(Exception):
    """Raised when a value cannot be converted to or from JSON."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
