# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Stored query literals.

A stored query is addressed by a path derived from its declaring scopes:

```python
SHOP = Scope("Shop", namespace="http://example.com/shop")
QUERIES = Scope("Queries", parent=SHOP, path_root=True)


class Queries(QueryLiteral, scope=QUERIES):
    VERIFIED_CUSTOMERS = None


Queries.VERIFIED_CUSTOMERS.query_path
# /{http://example.com/shop}Queries/{http://example.com/shop}VerifiedCustomers
```
"""

from __future__ import annotations

from jcrkit.literal.base import JcrLiteral, basename
from jcrkit.path.model import Element, Path


class QueryLiteral(JcrLiteral):
    """A literal naming a stored query."""

    @property
    def query_name(self) -> str:
        """The PascalCase form of the symbolic name: `VERIFIED_CUSTOMERS` -> `VerifiedCustomers`."""
        name = basename(self.name)
        return name[:1].upper() + name[1:]

    @property
    def query_path(self) -> Path:
        """Absolute path of the stored query.

        Walks outward from the declaring scope and stops at the first scope marked `path_root`,
        or at the outermost scope. Each scope contributes an element named after it and qualified
        by its resolved namespace.
        """
        segments: list[Element] = []
        if (scope := self.declaring_scope()) is not None:
            for enclosing in scope.lineage():
                segments.append(Element(enclosing.name, enclosing.resolve_namespace()))
                if enclosing.path_root:
                    break
        builder = Path.builder().absolute()
        for element in reversed(segments):
            builder.next_element(element)
        return builder.next(self.query_name, self.namespace).build()


__all__ = ("QueryLiteral",)
