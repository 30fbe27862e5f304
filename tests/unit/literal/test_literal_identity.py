# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for literal naming and namespace resolution."""

from __future__ import annotations

import pytest

from jcrkit.literal import (
    NodeLiteral,
    PropertyLiteral,
    QueryLiteral,
    Scope,
    StandardMixin,
    StandardNodeType,
    basename,
    initials,
    namespace_of,
    qualify,
)
from jcrkit.path import Element, MappingNamespaceBinding, Path
from jcrkit.schema import NodeDeclaration, PropertyDeclaration
from tests.fixtures.structure import NS, TEST, Nodes, Properties


pytestmark = [pytest.mark.unit]


OUTER = Scope("Outer", namespace="http://x")
MIDDLE = Scope("Middle", parent=OUTER)
INNER = Scope("Inner", parent=MIDDLE, namespace="http://inner")
UNQUALIFIED = Scope("Unqualified", parent=OUTER, namespace="")
PLAIN = Scope("Plain")


class Inherited(NodeLiteral, scope=MIDDLE):
    ORDER_DATE = None


class Overridden(NodeLiteral, scope=INNER):
    ORDER_DATE = None


class Cleared(NodeLiteral, scope=UNQUALIFIED):
    ORDER_DATE = None


class Bare(PropertyLiteral, scope=PLAIN):
    ORDER_DATE = None


class Unscoped(PropertyLiteral):
    STATUS = None


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [
        pytest.param("ORDER_DATE", "orderDate", id="two-tokens"),
        pytest.param("STATUS", "status", id="one-token"),
        pytest.param("A_B_C", "aBC", id="single-letters"),
        pytest.param("HIERARCHY_NODE", "hierarchyNode", id="standard"),
    ],
)
def test_basename(symbol: str, expected: str):
    assert basename(symbol) == expected


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [
        pytest.param("CUSTOMER", "c", id="one-token"),
        pytest.param("CREATED_INVOICE", "ci", id="two-tokens"),
        pytest.param("A__B", "ab", id="empty-token"),
    ],
)
def test_initials(symbol: str, expected: str):
    assert initials(symbol) == expected


def test_qualify():
    assert qualify("http://x", "orderDate") == "{http://x}orderDate"
    assert qualify("", "orderDate") == "orderDate"


def test_fullname_in_namespaced_scope():
    assert Properties.ORDER_DATE.namespace == NS
    assert Properties.ORDER_DATE.basename == "orderDate"
    assert Properties.ORDER_DATE.fullname == f"{{{NS}}}orderDate"
    assert str(Properties.ORDER_DATE) == Properties.ORDER_DATE.fullname


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        pytest.param(Inherited.ORDER_DATE, "{http://x}orderDate", id="inherited"),
        pytest.param(Overridden.ORDER_DATE, "{http://inner}orderDate", id="innermost-wins"),
        pytest.param(Cleared.ORDER_DATE, "orderDate", id="explicitly-unqualified"),
        pytest.param(Bare.ORDER_DATE, "orderDate", id="no-namespace"),
        pytest.param(Unscoped.STATUS, "status", id="no-scope"),
    ],
)
def test_namespace_resolution_walks_outward(literal, expected: str):
    assert literal.fullname == expected


def test_namespace_is_memoized_per_group():
    assert namespace_of(Inherited) == "http://x"
    assert namespace_of(Inherited) is namespace_of(Inherited)


def test_element_matches_fullname():
    element = Properties.ORDER_DATE.element
    assert element == Element("orderDate", NS)
    assert str(element) == Properties.ORDER_DATE.fullname
    assert Element.from_qualified(Properties.ORDER_DATE.fullname) == element


def test_literal_renders_with_binding(binding: MappingNamespaceBinding):
    assert Path.of(Nodes.INVOICE.element).render(binding) == "test:invoice"
    assert Path.of(StandardNodeType.HIERARCHY_NODE.element).render(binding) == "nt:hierarchyNode"
    assert StandardMixin.REFERENCEABLE.element.render(binding) == "mix:referenceable"


def test_declarations_are_exposed():
    assert Nodes.INVOICE.declaration == NodeDeclaration(supertypes=("nt:resource",))
    assert Nodes.CUSTOMER.declaration is None
    assert Nodes.declaring_scope() is TEST


def test_equal_declarations_do_not_alias():
    class Twins(NodeLiteral, scope=PLAIN):
        LEFT = NodeDeclaration()
        RIGHT = NodeDeclaration()

    assert Twins.LEFT is not Twins.RIGHT
    assert len(Twins) == 2
    assert Twins.members() == (Twins.LEFT, Twins.RIGHT)


def test_wrong_declaration_kind_is_rejected():
    with pytest.raises(TypeError, match="accept NodeDeclaration"):

        class Wrong(NodeLiteral):
            ITEM = PropertyDeclaration()


def test_query_literals_take_no_declaration():
    with pytest.raises(TypeError, match="no declaration"):

        class Wrong(QueryLiteral):
            ITEM = NodeDeclaration()


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("ORDER_DATE", id="symbol"),
        pytest.param("orderDate", id="basename"),
        pytest.param(f"{{{NS}}}orderDate", id="fullname"),
        pytest.param("order_date", id="snake"),
    ],
)
def test_from_string(text: str):
    assert Properties.from_string(text) is Properties.ORDER_DATE


def test_from_string_unknown():
    with pytest.raises(ValueError, match="not a valid"):
        Properties.from_string("missing")
