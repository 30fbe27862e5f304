# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for compiling property definitions."""

from __future__ import annotations

from enum import Enum

import pytest

from jcrkit.exceptions import InvalidPropertyDefinitionError
from jcrkit.literal import PropertyLiteral, Scope
from jcrkit.schema import (
    DefaultValues,
    OnParentVersion,
    OtherValue,
    PropertyDeclaration,
    PropertyDefinition,
    PropertyType,
    QueryOperator,
    Value,
    compile_property,
)
from tests.fixtures.structure import InvoiceStatus, Properties


pytestmark = [pytest.mark.unit]

SCOPE = Scope("PropertyTests", namespace="http://example.com/props")


class Color(Enum):
    RED = 1
    GREEN = 2


class Invalid(PropertyLiteral, scope=SCOPE):
    BOTH_CONSTRAINTS = PropertyDeclaration(constrain_as_enum=InvoiceStatus, value_constraints=("x",))
    WRONG_TYPE = PropertyDeclaration(constrain_as_enum=InvoiceStatus, required_type=PropertyType.LONG)
    TWO_ENUMS = PropertyDeclaration(constrain_as_enum=(InvoiceStatus, Color))


class Valid(PropertyLiteral, scope=SCOPE):
    EXPLICIT_STRING = PropertyDeclaration(
        constrain_as_enum=InvoiceStatus, required_type=PropertyType.STRING
    )
    NO_DEFAULTS = PropertyDeclaration(constrain_as_enum=Color)
    MIXED_DEFAULTS = PropertyDeclaration(
        multiple=True,
        default_values=DefaultValues(
            booleans=(True,),
            doubles=(1.5, 1),
            longs=(3, 3, 1),
            strings=("a", "a"),
            other=(OtherValue(value="2024-01-01T00:00:00.000Z", type=PropertyType.DATE),),
        ),
    )
    FLAGS = PropertyDeclaration(
        mandatory=True,
        protected=True,
        query_orderable=False,
        full_text_searchable=False,
        on_parent_version=OnParentVersion.IGNORE,
        available_query_operators=(QueryOperator.EQUAL_TO, "jcr.operator.like"),
    )


def test_enum_constraint():
    definition = compile_property(Properties.STATUS)
    assert definition.required_type is PropertyType.STRING
    assert definition.value_constraints == ("CREATED", "STAGED", "SUBMITTED", "COMPLETED")
    assert definition.default_values == (Value(type=PropertyType.STRING, value="CREATED"),)
    assert definition.auto_created


def test_enum_constraint_with_explicit_string_type():
    definition = compile_property(Valid.EXPLICIT_STRING)
    assert definition.required_type is PropertyType.STRING
    assert len(definition.value_constraints) == 4


def test_enum_without_flagged_defaults():
    definition = compile_property(Valid.NO_DEFAULTS)
    assert definition.value_constraints == ("RED", "GREEN")
    assert definition.default_values == ()


@pytest.mark.parametrize(
    ("literal", "message"),
    [
        pytest.param(Invalid.BOTH_CONSTRAINTS, "both constrain_as_enum and value_constraints", id="both"),
        pytest.param(Invalid.WRONG_TYPE, "implies a STRING", id="wrong-type"),
        pytest.param(Invalid.TWO_ENUMS, "at most one", id="two-enums"),
    ],
)
def test_invalid_declarations_fail(literal: Invalid, message: str):
    with pytest.raises(InvalidPropertyDefinitionError, match=message) as exc_info:
        compile_property(literal)
    assert exc_info.value.literal == f"Invalid.{literal.name}"


def test_declared_type_and_constraints():
    assert compile_property(Properties.ORDER_DATE).required_type is PropertyType.DATE
    definition = compile_property(Properties.NAME)
    assert definition.required_type is PropertyType.STRING
    assert definition.value_constraints == (r"[A-Za-z\. ]+",)


def test_mixed_default_values_are_ordered_and_deduplicated():
    assert compile_property(Valid.MIXED_DEFAULTS).default_values == (
        Value(type=PropertyType.BOOLEAN, value=True),
        Value(type=PropertyType.DOUBLE, value=1.5),
        Value(type=PropertyType.DOUBLE, value=1.0),
        Value(type=PropertyType.LONG, value=3),
        Value(type=PropertyType.LONG, value=1),
        Value(type=PropertyType.STRING, value="a"),
        Value(type=PropertyType.DATE, value="2024-01-01T00:00:00.000Z"),
    )


def test_unset_fields_are_not_applied():
    definition = compile_property(Valid.MIXED_DEFAULTS)
    assert definition.required_type is None
    assert definition.on_parent_version is None
    assert definition.multiple


def test_declared_flags_are_applied():
    definition = compile_property(Valid.FLAGS)
    assert definition.mandatory
    assert definition.protected
    assert not definition.query_orderable
    assert not definition.full_text_searchable
    assert definition.on_parent_version is OnParentVersion.IGNORE
    assert definition.available_query_operators == (QueryOperator.EQUAL_TO, QueryOperator.LIKE)


def test_undeclared_property_uses_defaults():
    definition = compile_property(Properties.NOTES)
    assert definition == PropertyDefinition(name=Properties.NOTES.fullname)
    assert definition.query_orderable
    assert definition.full_text_searchable
    assert definition.required_type is None


def test_rejects_other_literal_kinds():
    from tests.fixtures.structure import Nodes

    with pytest.raises(TypeError, match="PropertyLiteral"):
        compile_property(Nodes.INVOICE)  # type: ignore[arg-type]
