# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Declaring scopes for literal groups.

A `Scope` is the static context a literal group is declared in. Scopes nest through `parent`,
and carry the metadata literals inherit: a namespace URI, a schema tag, and whether the scope
is the root of derived query paths. Lookups walk from the innermost scope outward and stop at
the first scope that declares the value.

Example:
    ```python
    SHOP = Scope("Shop", namespace="http://example.com/shop")
    QUERIES = Scope("Queries", parent=SHOP, path_root=True)


    class Nodes(NodeLiteral, scope=SHOP):
        INVOICE = NodeDeclaration(supertypes=("nt:resource",))
        CUSTOMER = None


    SHOP.tag_schema(Nodes)
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jcrkit.exceptions import ConfigurationError


if TYPE_CHECKING:
    from jcrkit.schema.selectors import SelectorNameStrategy


@dataclass(frozen=True, slots=True)
class SchemaTag:
    """Declares a set of source literal groups whose selector names must be jointly unique.

    `strategy` is a `SelectorNameStrategy` class, an import path (`module:Class`), or None for
    the configured default. Tags compare by value and serve as selector-table cache keys.
    """

    members: tuple[type[Any], ...]
    strategy: type[SelectorNameStrategy] | str | None = None
    implicit: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        from jcrkit.literal.base import SourceLiteral

        if not self.members:
            raise ConfigurationError("A schema tag needs at least one member literal type")
        for member in self.members:
            if not (isinstance(member, type) and issubclass(member, SourceLiteral)):
                raise ConfigurationError(
                    f"Schema members must be SourceLiteral enums, got {member!r}",
                    details={"literal": repr(member)},
                )

    @classmethod
    def implicit_for(cls, source_type: type[Any]) -> SchemaTag:
        """The singleton group used when no enclosing scope declares a schema."""
        return cls((source_type,), implicit=True)


class Scope:
    """A named, optionally nested declaring scope."""

    __slots__ = ("_schema", "name", "namespace", "parent", "path_root")

    def __init__(
        self,
        name: str,
        *,
        namespace: str | None = None,
        parent: Scope | None = None,
        path_root: bool = False,
    ) -> None:
        self.name = name
        self.namespace = namespace.strip() if namespace is not None else None
        self.parent = parent
        self.path_root = path_root
        self._schema: SchemaTag | None = None

    @property
    def schema(self) -> SchemaTag | None:
        """The schema tag declared directly on this scope, if any."""
        return self._schema

    def tag_schema(
        self, *members: type[Any], strategy: type[SelectorNameStrategy] | str | None = None
    ) -> SchemaTag:
        """Declare this scope's schema. A scope can be tagged only once."""
        if self._schema is not None:
            raise ConfigurationError(
                f"Scope {self.qualname!r} already declares a schema",
                suggestions=["Declare all member literal types in a single tag_schema call."],
            )
        self._schema = SchemaTag(tuple(members), strategy)
        return self._schema

    def lineage(self) -> Iterator[Scope]:
        """Yield this scope, then each enclosing scope outward."""
        scope: Scope | None = self
        while scope is not None:
            yield scope
            scope = scope.parent

    def resolve_namespace(self) -> str:
        """The first namespace declared walking outward, or `""`."""
        return next(
            (scope.namespace for scope in self.lineage() if scope.namespace is not None), ""
        )

    def resolve_schema(self) -> SchemaTag | None:
        """The first schema tag declared walking outward, or None."""
        return next((scope.schema for scope in self.lineage() if scope.schema is not None), None)

    @property
    def qualname(self) -> str:
        """Dotted name from the outermost scope to this one."""
        return ".".join(reversed([scope.name for scope in self.lineage()]))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.qualname!r}, namespace={self.namespace!r})"


__all__ = ("SchemaTag", "Scope")
