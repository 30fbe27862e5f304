# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Immutable, namespace-aware repository paths.

A `Path` is an ordered tuple of `Element`s plus an absolute flag. Qualified elements render in
expanded form (`{uri}local`) unless a `NamespaceBinding` is supplied, in which case they render
as `prefix:local` where the URI is known.
"""

from __future__ import annotations

import logging

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Annotated, Any, Self, overload

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass

from jcrkit.exceptions import MalformedPathError, NamespaceUnknownError, PathError


if TYPE_CHECKING:
    from jcrkit.path.namespaces import NamespaceBinding


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Element:
    """A single path element: a local name, optionally qualified by a namespace URI."""

    local_name: Annotated[str, Field(min_length=1, description="The unqualified name.")]
    namespace_uri: Annotated[
        str, Field(description="Namespace URI; empty for an unqualified element.")
    ] = ""

    @field_validator("namespace_uri", mode="before")
    @classmethod
    def _trim_namespace(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @classmethod
    def from_qualified(cls, text: str) -> Element:
        """Parse a single element in `{uri}local` or bare `local` form.

        Prefixed names are not resolved here; use `Path.parse` with a binding for those.
        """
        if text.startswith("{"):
            end = text.find("}")
            if end < 0:
                raise MalformedPathError("Unterminated namespace URI", path=text, offset=0)
            uri, local_name = text[1:end], text[end + 1 :]
            offset = end + 1
        else:
            uri, local_name, offset = "", text, 0
        if not local_name:
            raise MalformedPathError("Empty local name", path=text, offset=offset)
        return cls(local_name, uri)

    @property
    def is_qualified(self) -> bool:
        """Whether this element carries a namespace URI."""
        return bool(self.namespace_uri)

    def render(self, binding: NamespaceBinding | None = None) -> str:
        """Render as `prefix:local` when `binding` knows the URI, else in expanded form."""
        if not self.namespace_uri or binding is None:
            return str(self)
        try:
            prefix = binding.prefix_for(self.namespace_uri)
        except NamespaceUnknownError:
            return str(self)
        return f"{prefix}:{self.local_name}" if prefix else str(self)

    def __str__(self) -> str:
        return f"{{{self.namespace_uri}}}{self.local_name}" if self.namespace_uri else self.local_name


class PathBuilder:
    """Fluent, mutable builder for `Path`."""

    __slots__ = ("_absolute", "_elements")

    def __init__(self, elements: Iterable[Element] = (), *, absolute: bool = False) -> None:
        self._absolute = absolute
        self._elements: list[Element] = list(elements)

    def absolute(self, absolute: bool = True) -> Self:
        """Specify whether the built path is absolute."""
        self._absolute = absolute
        return self

    def next(self, local_name: str, namespace_uri: str = "") -> Self:
        """Append an element, qualified if `namespace_uri` is given."""
        self._elements.append(Element(local_name, namespace_uri))
        return self

    def next_element(self, element: Element) -> Self:
        """Append an existing element."""
        self._elements.append(element)
        return self

    def build(self) -> Path:
        """Return the built `Path`."""
        return Path(tuple(self._elements), absolute=self._absolute)


class Path:
    """An immutable repository path.

    Paths compare and hash by `(is_absolute, elements)`. The empty path is its own parent; `""`
    and `"/"` parse to the relative and absolute empty paths respectively.
    """

    __slots__ = ("_absolute", "_elements", "_rendered")

    def __init__(self, elements: Iterable[Element] = (), *, absolute: bool = False) -> None:
        self._absolute = absolute
        self._elements: tuple[Element, ...] = (
            elements if isinstance(elements, tuple) else tuple(elements)
        )
        self._rendered: str | None = None

    # ---------------------------------------------------------------- factories

    @classmethod
    def builder(cls) -> PathBuilder:
        """Obtain an empty path builder."""
        return PathBuilder()

    @classmethod
    def parse(cls, text: str, binding: NamespaceBinding | None = None) -> Path:
        """Parse `text`; `binding` is required if any segment uses a `prefix:` form."""
        from jcrkit.path.parser import PathParser

        try:
            return PathParser(text, binding).parse()
        except PathError as e:
            logger.debug("Failed to parse path %r: %s", text, e)
            raise

    @classmethod
    def of(cls, *names: str | Element, absolute: bool = False) -> Path:
        """Build a path from unqualified names and/or elements."""
        return cls(
            tuple(name if isinstance(name, Element) else Element(name) for name in names),
            absolute=absolute,
        )

    # ---------------------------------------------------------------- accessors

    @property
    def elements(self) -> tuple[Element, ...]:
        """The elements of this path, in order."""
        return self._elements

    @property
    def is_absolute(self) -> bool:
        return self._absolute

    @property
    def is_relative(self) -> bool:
        return not self._absolute

    @property
    def is_empty(self) -> bool:
        return not self._elements

    @property
    def name(self) -> Element | None:
        """The last element, or None for the empty path."""
        return self._elements[-1] if self._elements else None

    # ---------------------------------------------------------------- derived paths

    def parent(self) -> Path:
        """Return the parent path. An empty path is its own parent."""
        if not self._elements:
            return self
        return Path(self._elements[:-1], absolute=self._absolute)

    def absolute(self) -> Path:
        """Return this path in absolute form."""
        return self if self._absolute else Path(self._elements, absolute=True)

    def relative(self) -> Path:
        """Return this path in relative form."""
        return Path(self._elements, absolute=False) if self._absolute else self

    def child(self) -> PathBuilder:
        """Get a builder seeded with this path, for building descendants."""
        return PathBuilder(self._elements, absolute=self._absolute)

    def __truediv__(self, other: object) -> Path:
        """Append a name, element, literal, or relative path."""
        match other:
            case str():
                tail: tuple[Element, ...] = (Element(other),)
            case Element():
                tail = (other,)
            case Path() if other.is_absolute:
                raise ValueError(f"Cannot append absolute path {other} to {self}")
            case Path():
                tail = other.elements
            case _ if isinstance(element := getattr(other, "element", None), Element):
                tail = (element,)
            case _:
                return NotImplemented
        return Path(self._elements + tail, absolute=self._absolute)

    # ---------------------------------------------------------------- rendering

    def render(self, binding: NamespaceBinding | None = None) -> str:
        """Render this path, using `binding` to abbreviate known namespaces."""
        if binding is None:
            return str(self)
        lead = "/" if self._absolute else ""
        return lead + "/".join(element.render(binding) for element in self._elements)

    def __str__(self) -> str:
        if self._rendered is None:
            lead = "/" if self._absolute else ""
            self._rendered = lead + "/".join(str(element) for element in self._elements)
        return self._rendered

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    # ---------------------------------------------------------------- sequence protocol

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    @overload
    def __getitem__(self, index: int) -> Element: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Element, ...]: ...
    def __getitem__(self, index: int | slice) -> Element | tuple[Element, ...]:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Path):
            return NotImplemented
        return self._absolute == other._absolute and self._elements == other._elements

    def __hash__(self) -> int:
        return hash((self._absolute, self._elements))


__all__ = ("Element", "Path", "PathBuilder")
