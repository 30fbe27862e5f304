# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Compiled type definitions.

These are the structures a repository type manager registers. They are produced fresh by the
compiler on every request and are never cached. `None` on an optional field means the value was
not set and the repository default applies.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import ConfigDict, Field, TypeAdapter

from jcrkit.core.types.models import FROZEN_BASEDMODEL_CONFIG, FrozenModel
from jcrkit.schema.types import OnParentVersion, PropertyType, QueryOperator, Value


class PropertyDefinition(FrozenModel):
    """A compiled property definition."""

    model_config = FROZEN_BASEDMODEL_CONFIG | ConfigDict(str_strip_whitespace=False)

    kind: Literal["property"] = "property"
    name: Annotated[str, Field(description="Qualified property name.")]
    required_type: PropertyType | None = None
    auto_created: bool = False
    mandatory: bool = False
    multiple: bool = False
    protected: bool = False
    query_orderable: bool = True
    full_text_searchable: bool = True
    available_query_operators: tuple[QueryOperator, ...] = ()
    value_constraints: tuple[str, ...] = ()
    default_values: tuple[Value, ...] = ()
    on_parent_version: OnParentVersion | None = None


class ChildDefinition(FrozenModel):
    """A compiled child node definition."""

    kind: Literal["child"] = "child"
    name: Annotated[str, Field(description="Qualified child node name.")]
    auto_created: bool = False
    mandatory: bool = False
    protected: bool = False
    on_parent_version: OnParentVersion | None = None
    required_primary_type_names: tuple[str, ...] = ()
    default_primary_type_name: str | None = None
    same_name_siblings: bool = False


class NodeTypeDefinition(FrozenModel):
    """A compiled node type definition, with any property and child definitions it declares."""

    kind: Literal["node_type"] = "node_type"
    name: Annotated[str, Field(description="Qualified node type name.")]
    is_abstract: bool = False
    mixin: bool = False
    orderable_child_nodes: bool = False
    primary_item_name: str | None = None
    queryable: bool = True
    supertype_names: Annotated[
        tuple[str, ...], Field(description="Declared supertypes first, then programmatic ones.")
    ] = ()
    property_definitions: tuple[PropertyDefinition, ...] = ()
    child_node_definitions: tuple[ChildDefinition, ...] = ()


type TypeDefinition = Annotated[
    NodeTypeDefinition | PropertyDefinition | ChildDefinition, Field(discriminator="kind")
]

TYPE_DEFINITION_ADAPTER: TypeAdapter[TypeDefinition] = TypeAdapter(TypeDefinition)
"""Validates or dumps any `TypeDefinition`, dispatching on `kind`."""


__all__ = (
    "TYPE_DEFINITION_ADAPTER",
    "ChildDefinition",
    "NodeTypeDefinition",
    "PropertyDefinition",
    "TypeDefinition",
)
