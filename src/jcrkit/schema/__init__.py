# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""
Declarative schema: declaration records, compiled type definitions and selector names.

Example:
    >>> from jcrkit.schema import compile_property
    >>> definition = compile_property(Properties.ORDER_DATE)
    >>> definition.required_type
    <PropertyType.DATE: 5>
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from jcrkit.core.utils.lazy_import import create_lazy_getattr


if TYPE_CHECKING:
    from jcrkit.schema.compiler import (
        compile_child,
        compile_definition,
        compile_node_type,
        compile_property,
    )
    from jcrkit.schema.declarations import (
        ChildDeclaration,
        DefaultValues,
        NodeDeclaration,
        OtherValue,
        PropertyDeclaration,
    )
    from jcrkit.schema.definitions import (
        TYPE_DEFINITION_ADAPTER,
        ChildDefinition,
        NodeTypeDefinition,
        PropertyDefinition,
        TypeDefinition,
    )
    from jcrkit.schema.selectors import (
        DefaultSelectorNameStrategy,
        SelectorNameStrategy,
        get_selector_names,
        load_strategy,
        resolve_schema,
        selector_names_for,
    )
    from jcrkit.schema.types import OnParentVersion, PropertyType, QueryOperator, Value


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "TYPE_DEFINITION_ADAPTER": (__spec__.parent, "definitions"),
    "ChildDeclaration": (__spec__.parent, "declarations"),
    "ChildDefinition": (__spec__.parent, "definitions"),
    "DefaultSelectorNameStrategy": (__spec__.parent, "selectors"),
    "DefaultValues": (__spec__.parent, "declarations"),
    "NodeDeclaration": (__spec__.parent, "declarations"),
    "NodeTypeDefinition": (__spec__.parent, "definitions"),
    "OnParentVersion": (__spec__.parent, "types"),
    "OtherValue": (__spec__.parent, "declarations"),
    "PropertyDeclaration": (__spec__.parent, "declarations"),
    "PropertyDefinition": (__spec__.parent, "definitions"),
    "PropertyType": (__spec__.parent, "types"),
    "QueryOperator": (__spec__.parent, "types"),
    "SelectorNameStrategy": (__spec__.parent, "selectors"),
    "TypeDefinition": (__spec__.parent, "definitions"),
    "Value": (__spec__.parent, "types"),
    "compile_child": (__spec__.parent, "compiler"),
    "compile_definition": (__spec__.parent, "compiler"),
    "compile_node_type": (__spec__.parent, "compiler"),
    "compile_property": (__spec__.parent, "compiler"),
    "get_selector_names": (__spec__.parent, "selectors"),
    "load_strategy": (__spec__.parent, "selectors"),
    "resolve_schema": (__spec__.parent, "selectors"),
    "selector_names_for": (__spec__.parent, "selectors"),
})


__getattr__ = create_lazy_getattr(_dynamic_imports, globals(), __name__)

__all__ = (
    "TYPE_DEFINITION_ADAPTER",
    "ChildDeclaration",
    "ChildDefinition",
    "DefaultSelectorNameStrategy",
    "DefaultValues",
    "NodeDeclaration",
    "NodeTypeDefinition",
    "OnParentVersion",
    "OtherValue",
    "PropertyDeclaration",
    "PropertyDefinition",
    "PropertyType",
    "QueryOperator",
    "SelectorNameStrategy",
    "TypeDefinition",
    "Value",
    "compile_child",
    "compile_definition",
    "compile_node_type",
    "compile_property",
    "get_selector_names",
    "load_strategy",
    "resolve_schema",
    "selector_names_for",
)


def __dir__() -> list[str]:
    """List available attributes for the module."""
    return list(__all__)
