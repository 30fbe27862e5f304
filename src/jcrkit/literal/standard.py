# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Built-in JCR node types and mixins as node literals.

Use these when contributing supertypes or required primary types in code:

```python
def supertypes(self):
    return (StandardNodeType.HIERARCHY_NODE, StandardMixin.REFERENCEABLE)
```
"""

from __future__ import annotations

from jcrkit.literal.node import NodeLiteral
from jcrkit.literal.scope import Scope
from jcrkit.path.namespaces import STANDARD_NAMESPACES


NT_SCOPE = Scope("nt", namespace=STANDARD_NAMESPACES["nt"])
MIX_SCOPE = Scope("mix", namespace=STANDARD_NAMESPACES["mix"])


class StandardNodeType(NodeLiteral, scope=NT_SCOPE):
    """Primary node types in the `nt` namespace."""

    BASE = None
    HIERARCHY_NODE = None
    FILE = None
    LINKED_FILE = None
    FOLDER = None
    RESOURCE = None
    UNSTRUCTURED = None
    ADDRESS = None
    QUERY = None


class StandardMixin(NodeLiteral, scope=MIX_SCOPE):
    """Mixin node types in the `mix` namespace."""

    REFERENCEABLE = None
    VERSIONABLE = None
    SIMPLE_VERSIONABLE = None
    LOCKABLE = None
    SHAREABLE = None
    LIFECYCLE = None
    CREATED = None
    LAST_MODIFIED = None
    TITLE = None
    LANGUAGE = None
    MIME_TYPE = None
    ETAG = None


__all__ = ("MIX_SCOPE", "NT_SCOPE", "StandardMixin", "StandardNodeType")
