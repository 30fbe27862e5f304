# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Compile literals and their declarations into type definitions.

Each `compile_*` function is a pure transform of a literal, its optional declaration record and
its programmatic capabilities into a fresh definition. Invalid declarations fail before anything
is produced.
"""

from __future__ import annotations

import logging

from collections.abc import Iterable
from typing import TYPE_CHECKING

from jcrkit.core.types.sentinel import is_unset
from jcrkit.exceptions import ConflictingDefaultPrimaryTypeError, InvalidPropertyDefinitionError
from jcrkit.literal.base import JcrLiteral, fullname_of
from jcrkit.literal.child import ChildLiteral
from jcrkit.literal.node import NodeLiteral
from jcrkit.literal.property import PropertyLiteral, flagged_defaults
from jcrkit.schema.declarations import ChildDeclaration, NodeDeclaration, PropertyDeclaration
from jcrkit.schema.definitions import ChildDefinition, NodeTypeDefinition, PropertyDefinition
from jcrkit.schema.types import PropertyType, Value


if TYPE_CHECKING:
    from jcrkit.schema.definitions import TypeDefinition


logger = logging.getLogger(__name__)


def _describe(literal: JcrLiteral) -> str:
    return f"{type(literal).__qualname__}.{literal.name}"


def _distinct(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))


def compile_node_type(
    literal: NodeLiteral,
    *,
    properties: Iterable[PropertyLiteral] = (),
    children: Iterable[ChildLiteral] = (),
) -> NodeTypeDefinition:
    """Compile a node type definition.

    The name is always the literal's fullname. Declared supertypes come first, followed by those
    from `literal.supertypes()`, without duplicates. `properties` and `children` are compiled and
    attached to the definition.
    """
    if not isinstance(literal, NodeLiteral):
        raise TypeError(f"Expected a NodeLiteral, got {type(literal).__name__}")
    declaration: NodeDeclaration = literal.declaration or NodeDeclaration()
    supertypes = _distinct((
        *declaration.supertypes,
        *(fullname_of(supertype) for supertype in literal.supertypes()),
    ))
    definition = NodeTypeDefinition(
        name=literal.fullname,
        is_abstract=declaration.is_abstract,
        mixin=declaration.mixin,
        orderable_child_nodes=declaration.orderable_child_nodes,
        primary_item_name=declaration.primary_item_name,
        queryable=declaration.queryable,
        supertype_names=supertypes,
        property_definitions=tuple(compile_property(prop) for prop in properties),
        child_node_definitions=tuple(compile_child(child) for child in children),
    )
    logger.debug("Compiled node type %s: %r", _describe(literal), definition)
    return definition


def _validate_property(literal: PropertyLiteral, declaration: PropertyDeclaration) -> None:
    described = _describe(literal)
    enum_types = declaration.constrain_as_enum
    if enum_types and declaration.value_constraints:
        raise InvalidPropertyDefinitionError(
            f"Cannot specify both constrain_as_enum and value_constraints: {described}",
            literal=described,
        )
    if enum_types and not (
        is_unset(declaration.required_type) or declaration.required_type is PropertyType.STRING
    ):
        raise InvalidPropertyDefinitionError(
            f"constrain_as_enum implies a STRING property type: {described}", literal=described
        )
    if len(enum_types) > 1:
        raise InvalidPropertyDefinitionError(
            f"constrain_as_enum accepts at most one enumeration: {described}", literal=described
        )


def compile_property(literal: PropertyLiteral) -> PropertyDefinition:
    """Compile a property definition.

    Raises:
        InvalidPropertyDefinitionError: If the declaration combines settings that cannot apply
            together.
    """
    if not isinstance(literal, PropertyLiteral):
        raise TypeError(f"Expected a PropertyLiteral, got {type(literal).__name__}")
    declaration: PropertyDeclaration | None = literal.declaration
    if declaration is None:
        definition = PropertyDefinition(name=literal.fullname)
        logger.debug("Compiled property %s: %r", _describe(literal), definition)
        return definition
    _validate_property(literal, declaration)
    required_type = None if is_unset(declaration.required_type) else declaration.required_type
    if declaration.constrain_as_enum:
        (enum_type,) = declaration.constrain_as_enum
        required_type = PropertyType.STRING
        value_constraints = tuple(member.name for member in enum_type)
        default_values = tuple(Value.of_enum(member) for member in flagged_defaults(enum_type))
    else:
        value_constraints = declaration.value_constraints
        default_values = declaration.default_values.to_values()
    definition = PropertyDefinition(
        name=literal.fullname,
        required_type=required_type,
        auto_created=declaration.auto_created,
        mandatory=declaration.mandatory,
        multiple=declaration.multiple,
        protected=declaration.protected,
        query_orderable=declaration.query_orderable,
        full_text_searchable=declaration.full_text_searchable,
        available_query_operators=declaration.available_query_operators,
        value_constraints=value_constraints,
        default_values=default_values,
        on_parent_version=(
            None if is_unset(declaration.on_parent_version) else declaration.on_parent_version
        ),
    )
    logger.debug("Compiled property %s: %r", _describe(literal), definition)
    return definition


def compile_child(literal: ChildLiteral) -> ChildDefinition:
    """Compile a child node definition.

    Required primary types are the declared names followed by those from
    `literal.required_primary_types()`. The default primary type comes from the declaration or
    `literal.default_primary_type()`; with neither, a sole required type becomes the default.

    Raises:
        ConflictingDefaultPrimaryTypeError: If the declared and programmatic defaults differ.
    """
    if not isinstance(literal, ChildLiteral):
        raise TypeError(f"Expected a ChildLiteral, got {type(literal).__name__}")
    declaration: ChildDeclaration = literal.declaration or ChildDeclaration()
    required = _distinct((
        *declaration.required_primary_type_names,
        *(fullname_of(required) for required in literal.required_primary_types()),
    ))
    candidates: list[str] = []
    if (programmatic := literal.default_primary_type()) is not None:
        candidates.append(fullname_of(programmatic))
    if declaration.default_primary_type_name.strip():
        candidates.append(declaration.default_primary_type_name)
    candidates = list(dict.fromkeys(candidates))
    if len(candidates) > 1:
        described = _describe(literal)
        raise ConflictingDefaultPrimaryTypeError(
            f"Multiple default primary types for {described}",
            literal=described,
            candidates=tuple(candidates),
        )
    if candidates:
        default_type: str | None = candidates[0]
    else:
        default_type = required[0] if len(required) == 1 else None
    definition = ChildDefinition(
        name=literal.fullname,
        auto_created=declaration.auto_created,
        mandatory=declaration.mandatory,
        protected=declaration.protected,
        on_parent_version=(
            None if is_unset(declaration.on_parent_version) else declaration.on_parent_version
        ),
        required_primary_type_names=required,
        default_primary_type_name=default_type,
        same_name_siblings=declaration.same_name_siblings,
    )
    logger.debug("Compiled child %s: %r", _describe(literal), definition)
    return definition


def compile_definition(literal: JcrLiteral) -> TypeDefinition:
    """Compile whichever definition fits the literal's kind."""
    match literal:
        case NodeLiteral():
            return compile_node_type(literal)
        case PropertyLiteral():
            return compile_property(literal)
        case ChildLiteral():
            return compile_child(literal)
        case _:
            raise TypeError(f"{type(literal).__name__} literals have no type definition")


__all__ = ("compile_child", "compile_definition", "compile_node_type", "compile_property")
