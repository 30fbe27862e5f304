# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""jcrkit: typed literals, namespace-aware paths and declarative node type definitions for JCR repositories."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from jcrkit._version import __version__
from jcrkit.core.utils.lazy_import import create_lazy_getattr
from jcrkit.exceptions import (
    ConfigurationError,
    ConflictingDefaultPrimaryTypeError,
    InvalidPropertyDefinitionError,
    InvalidSelectorNamesError,
    JcrKitError,
    MalformedPathError,
    NamespaceUnknownError,
    PathError,
    SchemaError,
    SchemaInstantiationError,
    UnresolvedNamespacePrefixError,
)


if TYPE_CHECKING:
    from jcrkit.literal import (
        ChildLiteral,
        NodeLiteral,
        PropertyLiteral,
        QueryLiteral,
        Scope,
        default_values,
    )
    from jcrkit.path import Element, MappingNamespaceBinding, Path
    from jcrkit.schema import (
        ChildDeclaration,
        NodeDeclaration,
        PropertyDeclaration,
        PropertyType,
        compile_definition,
    )


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "ChildDeclaration": (__spec__.parent, "schema"),
    "ChildLiteral": (__spec__.parent, "literal"),
    "Element": (__spec__.parent, "path"),
    "MappingNamespaceBinding": (__spec__.parent, "path"),
    "NodeDeclaration": (__spec__.parent, "schema"),
    "NodeLiteral": (__spec__.parent, "literal"),
    "Path": (__spec__.parent, "path"),
    "PropertyDeclaration": (__spec__.parent, "schema"),
    "PropertyLiteral": (__spec__.parent, "literal"),
    "PropertyType": (__spec__.parent, "schema"),
    "QueryLiteral": (__spec__.parent, "literal"),
    "Scope": (__spec__.parent, "literal"),
    "compile_definition": (__spec__.parent, "schema"),
    "default_values": (__spec__.parent, "literal"),
})


__getattr__ = create_lazy_getattr(_dynamic_imports, globals(), __name__)

__all__ = (
    "ChildDeclaration",
    "ChildLiteral",
    "ConfigurationError",
    "ConflictingDefaultPrimaryTypeError",
    "Element",
    "InvalidPropertyDefinitionError",
    "InvalidSelectorNamesError",
    "JcrKitError",
    "MalformedPathError",
    "MappingNamespaceBinding",
    "NamespaceUnknownError",
    "NodeDeclaration",
    "NodeLiteral",
    "Path",
    "PathError",
    "PropertyDeclaration",
    "PropertyLiteral",
    "PropertyType",
    "QueryLiteral",
    "SchemaError",
    "SchemaInstantiationError",
    "Scope",
    "UnresolvedNamespacePrefixError",
    "__version__",
    "compile_definition",
    "default_values",
)


def __dir__() -> list[str]:
    """List available attributes for the module."""
    return list(__all__)
