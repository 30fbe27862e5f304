# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Child node literals."""

from __future__ import annotations

from collections.abc import Iterable

from jcrkit.literal.base import JcrLiteral
from jcrkit.schema.declarations import ChildDeclaration


class ChildLiteral(JcrLiteral):
    """A literal naming a child node slot.

    Members may carry a `ChildDeclaration`. Override `required_primary_types` and
    `default_primary_type` to contribute types programmatically.
    """

    @classmethod
    def _declaration_kind(cls) -> type[ChildDeclaration]:
        return ChildDeclaration

    def required_primary_types(self) -> Iterable[JcrLiteral | str]:
        """Required primary types contributed in code, merged after the declared ones."""
        return ()

    def default_primary_type(self) -> JcrLiteral | str | None:
        """Default primary type contributed in code.

        Must agree with any declared `default_primary_type_name`.
        """
        return None


__all__ = ("ChildLiteral",)
