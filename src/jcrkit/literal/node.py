# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Node type literals."""

from __future__ import annotations

from collections.abc import Iterable

from jcrkit.literal.base import JcrLiteral, SourceLiteral
from jcrkit.schema.declarations import NodeDeclaration


class NodeLiteral(SourceLiteral):
    """A literal naming a node type.

    Members may carry a `NodeDeclaration`. Override `supertypes` to contribute supertypes
    programmatically:

    ```python
    class Nodes(NodeLiteral, scope=SHOP):
        INVOICE = NodeDeclaration(supertypes=("nt:resource",))
        CUSTOMER = None

        def supertypes(self):
            return (StandardMixin.REFERENCEABLE,) if self is Nodes.CUSTOMER else ()
    ```
    """

    @classmethod
    def _declaration_kind(cls) -> type[NodeDeclaration]:
        return NodeDeclaration

    def supertypes(self) -> Iterable[JcrLiteral | str]:
        """Supertypes contributed in code, merged after the declared ones. None by default."""
        return ()


__all__ = ("NodeLiteral",)
