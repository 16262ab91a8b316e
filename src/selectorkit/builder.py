"""Selector builder facade: one entry point per selector part kind."""

from __future__ import annotations

from selectorkit.model.selector import Selector

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Factory that starts a fresh :class:`Selector` for every call.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").render()
        # => '#main.container.editable'

        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).render()
        # => 'div#main + table#data'
    """

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, selector1: Selector, combinator: str, selector2: Selector) -> Selector:
        return Selector().combine(selector1, combinator, selector2)


css_selector_builder = SelectorBuilder()
