# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Namespace prefix <-> URI bindings.

A `NamespaceBinding` is the read-only collaborator the path parser and renderer consult. A live
repository supplies its own registry; `MappingNamespaceBinding` covers everything else.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, Protocol, runtime_checkable

from jcrkit.exceptions import ConfigurationError, NamespaceUnknownError


STANDARD_NAMESPACES: Final[MappingProxyType[str, str]] = MappingProxyType({
    "": "",
    "jcr": "http://www.jcp.org/jcr/1.0",
    "nt": "http://www.jcp.org/jcr/nt/1.0",
    "mix": "http://www.jcp.org/jcr/mix/1.0",
    "xml": "http://www.w3.org/XML/1998/namespace",
    "sv": "http://www.jcp.org/jcr/sv/1.0",
})
"""The namespaces every JCR repository pre-registers."""


@runtime_checkable
class NamespaceBinding(Protocol):
    """Resolves namespace prefixes to URIs and back."""

    def uri_for(self, prefix: str) -> str:
        """Return the URI bound to `prefix`, or raise `NamespaceUnknownError`."""
        ...

    def prefix_for(self, uri: str) -> str:
        """Return the prefix bound to `uri`, or raise `NamespaceUnknownError`."""
        ...


class MappingNamespaceBinding:
    """A `NamespaceBinding` over an immutable prefix -> URI mapping."""

    __slots__ = ("_prefixes", "_uris")

    def __init__(self, bindings: Mapping[str, str] | None = None) -> None:
        uris = dict(bindings or {})
        prefixes: dict[str, str] = {}
        for prefix, uri in uris.items():
            if uri in prefixes:
                raise ConfigurationError(
                    f"Namespace {uri!r} is bound to both {prefixes[uri]!r} and {prefix!r}",
                    details={"uri": uri},
                )
            prefixes[uri] = prefix
        self._uris = MappingProxyType(uris)
        self._prefixes = MappingProxyType(prefixes)

    @classmethod
    def standard(cls, extra: Mapping[str, str] | None = None) -> MappingNamespaceBinding:
        """Create a binding with the JCR built-in namespaces plus `extra`."""
        return cls({**STANDARD_NAMESPACES, **(extra or {})})

    def uri_for(self, prefix: str) -> str:
        try:
            return self._uris[prefix]
        except KeyError:
            raise NamespaceUnknownError(
                f"Unknown namespace prefix {prefix!r}", details={"prefix": prefix}
            ) from None

    def prefix_for(self, uri: str) -> str:
        try:
            return self._prefixes[uri]
        except KeyError:
            raise NamespaceUnknownError(
                f"Unregistered namespace {uri!r}", details={"uri": uri}
            ) from None

    @property
    def bindings(self) -> MappingProxyType[str, str]:
        """The prefix -> URI mapping."""
        return self._uris

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._uris

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._uris)!r})"


def default_namespace_binding() -> MappingNamespaceBinding:
    """Return the built-in namespaces merged with `JcrKitSettings.namespaces`."""
    from jcrkit.config.settings import get_settings

    return MappingNamespaceBinding.standard(get_settings().namespaces)


__all__ = (
    "STANDARD_NAMESPACES",
    "MappingNamespaceBinding",
    "NamespaceBinding",
    "default_namespace_binding",
)
