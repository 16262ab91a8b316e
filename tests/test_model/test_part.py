"""Tests for PartKind canonical order and fragment rendering."""

import pytest

from selectorkit.model import PartKind


class TestCanonicalOrder:
    def test_indices(self):
        assert [kind.index for kind in PartKind] == [0, 1, 2, 3, 4, 5]
        assert PartKind.ELEMENT.index == 0
        assert PartKind.PSEUDO_ELEMENT.index == 5

    def test_order(self):
        assert list(PartKind) == [
            PartKind.ELEMENT,
            PartKind.ID,
            PartKind.CLASS,
            PartKind.ATTRIBUTE,
            PartKind.PSEUDO_CLASS,
            PartKind.PSEUDO_ELEMENT,
        ]


class TestSingleKinds:
    @pytest.mark.parametrize(
        "kind", [PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT]
    )
    def test_single(self, kind):
        assert kind.is_single

    @pytest.mark.parametrize(
        "kind", [PartKind.CLASS, PartKind.ATTRIBUTE, PartKind.PSEUDO_CLASS]
    )
    def test_repeatable(self, kind):
        assert not kind.is_single


class TestRender:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            (PartKind.ELEMENT, "x"),
            (PartKind.ID, "#x"),
            (PartKind.CLASS, ".x"),
            (PartKind.ATTRIBUTE, "[x]"),
            (PartKind.PSEUDO_CLASS, ":x"),
            (PartKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_prefixes(self, kind, expected):
        assert kind.render("x") == expected

    def test_braces_in_value_are_literal(self):
        assert PartKind.ATTRIBUTE.render("data-x={y}") == "[data-x={y}]"
