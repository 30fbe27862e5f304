# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for compiling node type definitions."""

from __future__ import annotations

import pytest

from jcrkit.literal import NodeLiteral, Scope, StandardMixin, StandardNodeType
from jcrkit.schema import (
    TYPE_DEFINITION_ADAPTER,
    ChildDefinition,
    NodeDeclaration,
    NodeTypeDefinition,
    PropertyDefinition,
    compile_definition,
    compile_node_type,
)
from tests.fixtures.structure import Children, Nodes, Properties, Queries


pytestmark = [pytest.mark.unit]

SCOPE = Scope("NodeTypes", namespace="http://example.com/types")


class Types(NodeLiteral, scope=SCOPE):
    FOLDER_LIKE = NodeDeclaration(supertypes=(StandardNodeType.HIERARCHY_NODE,))
    MARKER = NodeDeclaration(
        is_abstract=True,
        mixin=True,
        orderable_child_nodes=True,
        primary_item_name="jcr:content",
        queryable=False,
    )

    def supertypes(self):
        if self is Types.FOLDER_LIKE:
            return (StandardNodeType.HIERARCHY_NODE, StandardMixin.REFERENCEABLE)
        return ()


def test_declared_supertypes_come_first():
    definition = compile_node_type(Nodes.INVOICE)
    assert definition.supertype_names == ("nt:resource", "nt:hierarchyNode")


def test_name_is_fullname():
    assert compile_node_type(Nodes.INVOICE).name == Nodes.INVOICE.fullname


def test_supertypes_are_deduplicated():
    definition = compile_node_type(Types.FOLDER_LIKE)
    assert definition.supertype_names == (
        StandardNodeType.HIERARCHY_NODE.fullname,
        StandardMixin.REFERENCEABLE.fullname,
    )


def test_undeclared_node_uses_defaults():
    definition = compile_node_type(Nodes.CUSTOMER)
    assert definition == NodeTypeDefinition(name=Nodes.CUSTOMER.fullname)
    assert definition.queryable
    assert not definition.is_abstract
    assert definition.supertype_names == ()
    assert definition.primary_item_name is None


def test_declared_flags_are_applied():
    definition = compile_node_type(Types.MARKER)
    assert definition.is_abstract
    assert definition.mixin
    assert definition.orderable_child_nodes
    assert definition.primary_item_name == "jcr:content"
    assert not definition.queryable


def test_properties_and_children_are_attached():
    definition = compile_node_type(
        Nodes.INVOICE,
        properties=(Properties.STATUS, Properties.ORDER_DATE),
        children=(Children.LINE_ITEM,),
    )
    assert [prop.name for prop in definition.property_definitions] == [
        Properties.STATUS.fullname,
        Properties.ORDER_DATE.fullname,
    ]
    assert [child.name for child in definition.child_node_definitions] == [
        Children.LINE_ITEM.fullname
    ]


def test_compilation_is_fresh_each_time():
    first = compile_node_type(Nodes.INVOICE)
    second = compile_node_type(Nodes.INVOICE)
    assert first == second
    assert first is not second


def test_rejects_other_literal_kinds():
    with pytest.raises(TypeError, match="NodeLiteral"):
        compile_node_type(Properties.STATUS)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        pytest.param(Nodes.CUSTOMER, NodeTypeDefinition, id="node"),
        pytest.param(Properties.NAME, PropertyDefinition, id="property"),
        pytest.param(Children.CONTENT, ChildDefinition, id="child"),
    ],
)
def test_compile_definition_dispatches(literal, expected: type):
    assert isinstance(compile_definition(literal), expected)


def test_compile_definition_rejects_queries():
    with pytest.raises(TypeError, match="no type definition"):
        compile_definition(Queries.CREATED_INVOICES)


def test_definitions_validate_by_kind():
    definition = compile_node_type(Nodes.INVOICE, properties=(Properties.STATUS,))
    restored = TYPE_DEFINITION_ADAPTER.validate_python(definition.model_dump())
    assert isinstance(restored, NodeTypeDefinition)
    assert restored == definition
