"""Selector model: accumulates selector parts and renders them to CSS."""

from __future__ import annotations

import logging

from selectorkit.errors import DuplicatePartError, OrderViolationError
from selectorkit.model.part import PartKind

logger = logging.getLogger("selectorkit.selector")


class Selector:
    """A compound CSS selector assembled one part at a time.

    Every part-adding method mutates the selector in place and returns it,
    so calls can be chained::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    Parts must be added in canonical order (see :class:`PartKind`); element,
    id and pseudo-element may each appear only once. A rejected call leaves
    the selector unchanged.

    A selector filled by :meth:`combine` renders from its combined chain
    only.
    """

    def __init__(self) -> None:
        self._slots: list[list[str]] = [[] for _ in PartKind]
        self._chain: list[str] = []
        self._max_index = -1

    # --- part adders ----------------------------------------------------------

    def add(self, kind: PartKind, value: str) -> Selector:
        """Add a part of *kind* with the raw *value*."""
        slot = self._slots[kind.index]
        if kind.is_single and slot:
            logger.debug("Rejected duplicate %s part %r", kind.value, value)
            raise DuplicatePartError(kind)
        if kind.index < self._max_index:
            after = list(PartKind)[self._max_index]
            logger.debug(
                "Rejected %s part %r after %s", kind.value, value, after.value
            )
            raise OrderViolationError(kind, after)
        slot.append(kind.render(value))
        self._max_index = kind.index
        return self

    def element(self, value: str) -> Selector:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    # --- combination ----------------------------------------------------------

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join *left* and *right* with *combinator* into this selector.

        Fragments are copied at call time; *left* and *right* are not
        modified. The combinator is used verbatim, padded with one space on
        each side.
        """
        self._chain.extend(left.fragments())
        self._chain.append(f" {combinator} ")
        self._chain.extend(right.fragments())
        logger.debug("Combined selectors with %r", combinator)
        return self

    # --- inspection -----------------------------------------------------------

    @property
    def is_combined(self) -> bool:
        return bool(self._chain)

    def parts(self, kind: PartKind) -> tuple[str, ...]:
        """Rendered fragments of a single kind, in insertion order."""
        return tuple(self._slots[kind.index])

    def fragments(self) -> list[str]:
        """Part fragments in canonical order followed by the combined chain."""
        result = [fragment for slot in self._slots for fragment in slot]
        result.extend(self._chain)
        return result

    def render(self) -> str:
        """Return the CSS text for this selector."""
        if self._chain:
            return "".join(self._chain)
        return "".join(fragment for slot in self._slots for fragment in slot)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"
