# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Property literals and enum-backed default values.

A property declared with `constrain_as_enum=SomeEnum` takes its default values from the members
of `SomeEnum` flagged with `default_values`:

```python
@default_values("CREATED")
class InvoiceStatus(Enum):
    CREATED = auto()
    SUBMITTED = auto()
```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import TYPE_CHECKING

from jcrkit.exceptions import ConfigurationError
from jcrkit.literal.base import JcrLiteral
from jcrkit.schema.declarations import PropertyDeclaration


if TYPE_CHECKING:
    from jcrkit.literal.base import SourceLiteral


_defaults_lock = Lock()
_defaults: dict[type[Enum], frozenset[str]] = {}


def default_values[E: type[Enum]](*names: str) -> Callable[[E], E]:
    """Class decorator flagging the named members of an enumeration as default values."""

    def decorate(enum_type: E) -> E:
        if unknown := [name for name in names if name not in enum_type.__members__]:
            raise ConfigurationError(
                f"{enum_type.__qualname__} has no members named {', '.join(unknown)}",
                details={"literal": enum_type.__qualname__},
            )
        with _defaults_lock:
            if enum_type in _defaults:
                raise ConfigurationError(
                    f"Default values for {enum_type.__qualname__} are already declared",
                    details={"literal": enum_type.__qualname__},
                )
            _defaults[enum_type] = frozenset(names)
        return enum_type

    return decorate


def is_default_value(member: Enum) -> bool:
    """Whether `member` is flagged as a default value."""
    return member.name in _defaults.get(type(member), frozenset())


def flagged_defaults[E: Enum](enum_type: type[E]) -> tuple[E, ...]:
    """The flagged members of `enum_type`, in definition order."""
    return tuple(member for member in enum_type if is_default_value(member))


@dataclass(frozen=True, slots=True)
class QualifiedProperty:
    """A property relative to a query source."""

    source: SourceLiteral
    property: PropertyLiteral

    @property
    def selector_name(self) -> str:
        return self.source.selector_name

    @property
    def property_name(self) -> str:
        return self.property.fullname

    def __str__(self) -> str:
        return f"{self.selector_name}.{self.property_name}"


class PropertyLiteral(JcrLiteral):
    """A literal naming a property. Members may carry a `PropertyDeclaration`."""

    @classmethod
    def _declaration_kind(cls) -> type[PropertyDeclaration]:
        return PropertyDeclaration

    def of(self, source: SourceLiteral) -> QualifiedProperty:
        """This property qualified by a query source."""
        return QualifiedProperty(source, self)


__all__ = (
    "PropertyLiteral",
    "QualifiedProperty",
    "default_values",
    "flagged_defaults",
    "is_default_value",
)
