# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Namespace-aware hierarchical paths."""

from jcrkit.path.model import Element, Path, PathBuilder
from jcrkit.path.namespaces import (
    STANDARD_NAMESPACES,
    MappingNamespaceBinding,
    NamespaceBinding,
    default_namespace_binding,
)
from jcrkit.path.parser import PathParser, parse_path


__all__ = (
    "STANDARD_NAMESPACES",
    "Element",
    "MappingNamespaceBinding",
    "NamespaceBinding",
    "Path",
    "PathBuilder",
    "PathParser",
    "default_namespace_binding",
    "parse_path",
)
