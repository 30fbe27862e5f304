# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Literal identity: namespaced names for enum-modeled repository constants.

A literal group is an `Enum` subclass of one of the literal bases, declared in a `Scope`:

```python
class Properties(PropertyLiteral, scope=SHOP):
    ORDER_DATE = PropertyDeclaration(required_type=PropertyType.DATE)
    STATUS = None
```

Each member's value is its optional declaration record (`None` for none). Members get a unique
internal value, so equal records never make two members aliases of each other.

Identity is derived from the symbolic name and the declaring scope:

- `basename`: `ORDER_DATE` -> `orderDate`
- `namespace`: the first namespace declared walking the scope chain outward, else `""`
- `fullname`: `{namespace}basename`, or just `basename` when there is no namespace. This is the
  same string a qualified path `Element` renders to.
"""

from __future__ import annotations

from enum import Enum
from functools import cache
from threading import Lock
from typing import TYPE_CHECKING, Any, Self

from jcrkit.core.types.enum import name_variations
from jcrkit.path.model import Element


if TYPE_CHECKING:
    from jcrkit.literal.scope import Scope


_namespace_lock = Lock()
_namespaces: dict[type, str] = {}


@cache
def basename(symbol: str) -> str:
    """Convert an UPPER_SNAKE_CASE symbol to the camelCase basename.

    Every `_`-delimited token is capitalized, the tokens are joined, and the first character is
    lowercased: `ORDER_DATE` -> `orderDate`, `STATUS` -> `status`.
    """
    joined = "".join(token.capitalize() for token in symbol.split("_"))
    return joined[:1].lower() + joined[1:]


def initials(symbol: str) -> str:
    """Lowercase first letters of each `_`-delimited token: `CREATED_INVOICE` -> `ci`."""
    return "".join(token[0] for token in symbol.split("_") if token).lower()


def qualify(namespace: str, name: str) -> str:
    """Render `name` in expanded form under `namespace`, or bare when there is no namespace."""
    return f"{{{namespace}}}{name}" if namespace and namespace.strip() else name


def namespace_of(literal_type: type) -> str:
    """Resolve the namespace of a literal group from its declaring scope.

    Memoized per literal type for the life of the process; the result depends only on static
    declarations, so a racing first computation yields the same value.
    """
    if (namespace := _namespaces.get(literal_type)) is not None:
        return namespace
    scope: Scope | None = getattr(literal_type, "_declaring_scope", None)
    namespace = scope.resolve_namespace() if scope is not None else ""
    with _namespace_lock:
        return _namespaces.setdefault(literal_type, namespace)


class JcrLiteral(Enum):
    """Base class for enum-modeled repository literals.

    Subclasses declare their scope with a class keyword: `class Nodes(NodeLiteral, scope=S)`.
    """

    _declaration: Any

    def __new__(cls, declaration: Any = None) -> Self:
        """Create a member carrying `declaration`, with a unique ordinal value."""
        kind = cls._declaration_kind()
        if declaration is not None and (kind is None or not isinstance(declaration, kind)):
            expected = kind.__name__ if kind is not None else "no declaration"
            raise TypeError(
                f"{cls.__qualname__} members accept {expected}, got {type(declaration).__name__}"
            )
        member = object.__new__(cls)
        member._value_ = len(cls.__members__) + 1
        member._declaration = declaration
        return member

    def __init_subclass__(cls, *, scope: Scope | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._declaring_scope = scope

    @classmethod
    def _declaration_kind(cls) -> type | None:
        """The declaration record type members of this group may carry."""
        return None

    @classmethod
    def declaring_scope(cls) -> Scope | None:
        """The scope this literal group was declared in."""
        return getattr(cls, "_declaring_scope", None)

    @classmethod
    def members(cls) -> tuple[Self, ...]:
        """All members, in definition order."""
        return tuple(cls)

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Find a member by symbolic name, basename, fullname, or a case variation of the name."""
        text = value.strip()
        for member in cls:
            if text in (member.name, member.basename, member.fullname):
                return member
        for member in cls:
            if text in name_variations(member.name):
                return member
        raise ValueError(f"{value} is not a valid {cls.__qualname__} member")

    @property
    def declaration(self) -> Any:
        """The declaration record given at definition, or None."""
        return self._declaration

    @property
    def namespace(self) -> str:
        """The namespace URI resolved from the declaring scope, or `""`."""
        return namespace_of(type(self))

    @property
    def basename(self) -> str:
        """The camelCase form of the symbolic name."""
        return basename(self.name)

    @property
    def fullname(self) -> str:
        """The qualified name, `{namespace}basename`, or the basename when unqualified."""
        return qualify(self.namespace, self.basename)

    @property
    def element(self) -> Element:
        """This literal as a path `Element`."""
        return Element(self.basename, self.namespace)

    def __str__(self) -> str:
        return self.fullname


class SourceLiteral(JcrLiteral):
    """A literal usable as a query source, with a selector name unique within its schema."""

    @property
    def selector_name(self) -> str:
        """This source's selector name within its schema group."""
        from jcrkit.schema.selectors import get_selector_names

        return get_selector_names(type(self))[self]


def fullname_of(item: JcrLiteral | str) -> str:
    """Return a literal's fullname; strings are taken to be names already."""
    return item if isinstance(item, str) else item.fullname


__all__ = (
    "JcrLiteral",
    "SourceLiteral",
    "basename",
    "fullname_of",
    "initials",
    "namespace_of",
    "qualify",
)
