# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Left-to-right path parser.

Grammar::

    Path    := ['/'] Segment ('/' Segment)*
    Segment := ('{' URI '}' | Prefix ':')? LocalName

A leading `/` marks an absolute path. A bracketed URI is taken literally and may itself contain
`/`. A prefix is resolved through the supplied `NamespaceBinding`. A single trailing `/` is
tolerated; any other empty segment is an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jcrkit.exceptions import MalformedPathError, NamespaceUnknownError, UnresolvedNamespacePrefixError
from jcrkit.path.model import Path, PathBuilder


if TYPE_CHECKING:
    from jcrkit.path.namespaces import NamespaceBinding


class PathParser:
    """Single-use cursor over one path string."""

    __slots__ = ("binding", "pos", "text")

    def __init__(self, text: str, binding: NamespaceBinding | None = None) -> None:
        self.text = text
        self.binding = binding
        self.pos = 0

    def parse(self) -> Path:
        """Parse the whole text into a `Path`; no partial result is ever returned."""
        builder = PathBuilder()
        if self.text.startswith("/"):
            builder.absolute()
            self.pos = 1
        while self._valid_position():
            namespace_uri = self._namespace()
            start = self.pos
            local_name = self._seek("/")
            if not local_name:
                raise MalformedPathError("Empty path segment", path=self.text, offset=start)
            builder.next(local_name, namespace_uri)
            if self._valid_position():
                # step over the separator
                self.pos += 1
        return builder.build()

    def _namespace(self) -> str:
        """Consume and return the namespace URI of the segment at the cursor, if any."""
        start = self.pos
        if self.text[start] == "{":
            end = self.text.find("}", start + 1)
            if end < 0:
                raise MalformedPathError("Unterminated namespace URI", path=self.text, offset=start)
            self.pos = end + 1
            return self.text[start + 1 : end]
        i = start
        while i < len(self.text) and self.text[i] != "/":
            if self.text[i] == ":":
                self.pos = i + 1
                return self._resolve(self.text[start:i])
            i += 1
        return ""

    def _resolve(self, prefix: str) -> str:
        if self.binding is None:
            raise UnresolvedNamespacePrefixError(
                f"No namespace binding given; cannot resolve prefix {prefix!r}",
                path=self.text,
                prefix=prefix,
            )
        try:
            return self.binding.uri_for(prefix)
        except NamespaceUnknownError as e:
            raise UnresolvedNamespacePrefixError(
                f"Unknown namespace prefix {prefix!r}", path=self.text, prefix=prefix
            ) from e

    def _seek(self, stop: str) -> str:
        """Consume up to (not including) `stop` or the end of the text."""
        start = self.pos
        end = self.text.find(stop, start)
        if end < 0:
            end = len(self.text)
        self.pos = end
        return self.text[start:end]

    def _valid_position(self) -> bool:
        return self.pos < len(self.text)


def parse_path(text: str, binding: NamespaceBinding | None = None) -> Path:
    """Parse `text` into a `Path`. Shorthand for `Path.parse`."""
    return Path.parse(text, binding)


__all__ = ("PathParser", "parse_path")
