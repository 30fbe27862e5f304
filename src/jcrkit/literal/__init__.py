# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""
Enum-modeled repository literals.

Literal groups are `Enum` subclasses declared in a `Scope`. Each member derives its namespace,
basename and fullname from its symbolic name and its declaring scope.

Example:
    >>> from jcrkit.literal import NodeLiteral, Scope
    >>> SHOP = Scope("Shop", namespace="http://example.com/shop")
    >>> class Nodes(NodeLiteral, scope=SHOP):
    ...     PURCHASE_ORDER = None
    >>> Nodes.PURCHASE_ORDER.fullname
    '{http://example.com/shop}purchaseOrder'
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from jcrkit.core.utils.lazy_import import create_lazy_getattr


if TYPE_CHECKING:
    from jcrkit.literal.base import (
        JcrLiteral,
        SourceLiteral,
        basename,
        fullname_of,
        initials,
        namespace_of,
        qualify,
    )
    from jcrkit.literal.child import ChildLiteral
    from jcrkit.literal.node import NodeLiteral
    from jcrkit.literal.property import (
        PropertyLiteral,
        QualifiedProperty,
        default_values,
        flagged_defaults,
        is_default_value,
    )
    from jcrkit.literal.query import QueryLiteral
    from jcrkit.literal.scope import SchemaTag, Scope
    from jcrkit.literal.standard import StandardMixin, StandardNodeType


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "ChildLiteral": (__spec__.parent, "child"),
    "JcrLiteral": (__spec__.parent, "base"),
    "NodeLiteral": (__spec__.parent, "node"),
    "PropertyLiteral": (__spec__.parent, "property"),
    "QualifiedProperty": (__spec__.parent, "property"),
    "QueryLiteral": (__spec__.parent, "query"),
    "SchemaTag": (__spec__.parent, "scope"),
    "Scope": (__spec__.parent, "scope"),
    "SourceLiteral": (__spec__.parent, "base"),
    "StandardMixin": (__spec__.parent, "standard"),
    "StandardNodeType": (__spec__.parent, "standard"),
    "basename": (__spec__.parent, "base"),
    "default_values": (__spec__.parent, "property"),
    "flagged_defaults": (__spec__.parent, "property"),
    "fullname_of": (__spec__.parent, "base"),
    "initials": (__spec__.parent, "base"),
    "is_default_value": (__spec__.parent, "property"),
    "namespace_of": (__spec__.parent, "base"),
    "qualify": (__spec__.parent, "base"),
})


__getattr__ = create_lazy_getattr(_dynamic_imports, globals(), __name__)

__all__ = (
    "ChildLiteral",
    "JcrLiteral",
    "NodeLiteral",
    "PropertyLiteral",
    "QualifiedProperty",
    "QueryLiteral",
    "SchemaTag",
    "Scope",
    "SourceLiteral",
    "StandardMixin",
    "StandardNodeType",
    "basename",
    "default_values",
    "flagged_defaults",
    "fullname_of",
    "initials",
    "is_default_value",
    "namespace_of",
    "qualify",
)


def __dir__() -> list[str]:
    """List available attributes for the module."""
    return list(__all__)
