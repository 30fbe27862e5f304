# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Declarative definition records attached to literal members.

A record is the value of a literal member:

```python
class Properties(PropertyLiteral, scope=SHOP):
    STATUS = PropertyDeclaration(constrain_as_enum=InvoiceStatus, auto_created=True)
    ORDER_DATE = PropertyDeclaration(required_type=PropertyType.DATE)
```

Fields left at `UNSET` are not applied when the record is compiled. Type names may be given as
strings or as node literals; literals are stored by fullname.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Annotated, Any

from pydantic import ConfigDict, Field, WithJsonSchema, field_validator

from jcrkit.core.types.models import FROZEN_BASEDMODEL_CONFIG, FrozenModel
from jcrkit.core.types.sentinel import UNSET, Unset
from jcrkit.schema.types import OnParentVersion, PropertyType, QueryOperator, Value


def _as_name(item: Any) -> Any:
    return getattr(item, "fullname", item)


def _as_names(value: Any) -> Any:
    if isinstance(value, str) or not isinstance(value, Iterable):
        value = (value,)
    return tuple(_as_name(item) for item in value)


class NodeDeclaration(FrozenModel):
    """Declared settings for a node type."""

    is_abstract: bool = False
    """Whether the node type is abstract."""

    supertypes: tuple[str, ...] = ()
    """Declared supertype names. Programmatic supertypes are appended after these."""

    mixin: bool = False
    """Whether the node type is a mixin."""

    orderable_child_nodes: bool = False
    """Whether child nodes are orderable."""

    primary_item_name: str | None = None
    """Name of the primary item, if any."""

    queryable: bool = True
    """Whether nodes of this type are queryable."""

    @field_validator("supertypes", mode="before")
    @classmethod
    def _supertype_names(cls, value: Any) -> Any:
        return _as_names(value)

    @field_validator("primary_item_name", mode="before")
    @classmethod
    def _blank_primary_item(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return _as_name(value)


class OtherValue(FrozenModel):
    """A default value of a type other than boolean, double, long or string, in string form."""

    model_config = FROZEN_BASEDMODEL_CONFIG | ConfigDict(str_strip_whitespace=False)

    value: str
    type: PropertyType

    def to_value(self) -> Value:
        """The typed `Value`."""
        return Value(type=self.type, value=self.value)


class DefaultValues(FrozenModel):
    """Heterogeneous default values for a property, grouped by Python type."""

    model_config = FROZEN_BASEDMODEL_CONFIG | ConfigDict(str_strip_whitespace=False)

    booleans: tuple[bool, ...] = ()
    doubles: tuple[float, ...] = ()
    longs: tuple[int, ...] = ()
    strings: tuple[str, ...] = ()
    other: tuple[OtherValue, ...] = ()

    def to_values(self) -> tuple[Value, ...]:
        """All values as one de-duplicated tuple: booleans, doubles, longs, strings, then other.

        The first occurrence of a value wins.
        """
        values = (
            *(Value(type=PropertyType.BOOLEAN, value=b) for b in self.booleans),
            *(Value(type=PropertyType.DOUBLE, value=float(d)) for d in self.doubles),
            *(Value(type=PropertyType.LONG, value=int(i)) for i in self.longs),
            *(Value(type=PropertyType.STRING, value=s) for s in self.strings),
            *(other.to_value() for other in self.other),
        )
        return tuple(dict.fromkeys(values))

    def __bool__(self) -> bool:
        return any((self.booleans, self.doubles, self.longs, self.strings, self.other))


class PropertyDeclaration(FrozenModel):
    """Declared settings for a property definition.

    `constrain_as_enum` names one plain `Enum` whose symbolic names become the value constraints
    and whose flagged members become the default values. It implies a STRING property and cannot
    be combined with explicit `value_constraints`.
    """

    model_config = FROZEN_BASEDMODEL_CONFIG | ConfigDict(str_strip_whitespace=False)

    required_type: Annotated[
        PropertyType | Unset, Field(description="Required value type; UNSET leaves it undefined.")
    ] = UNSET
    auto_created: bool = False
    available_query_operators: tuple[QueryOperator, ...] = ()
    default_values: DefaultValues = Field(default_factory=DefaultValues)
    full_text_searchable: bool = True
    mandatory: bool = False
    multiple: bool = False
    on_parent_version: Annotated[
        OnParentVersion | Unset, Field(description="On-parent-version action; UNSET is not applied.")
    ] = UNSET
    protected: bool = False
    query_orderable: bool = True
    value_constraints: tuple[str, ...] = ()
    constrain_as_enum: Annotated[
        tuple[type[Enum], ...],
        WithJsonSchema({"type": "array", "items": {"type": "string"}, "maxItems": 1}),
        Field(description="At most one enumeration the property's values are constrained to."),
    ] = ()

    @field_validator("constrain_as_enum", mode="before")
    @classmethod
    def _wrap_enum_type(cls, value: Any) -> Any:
        if value is None:
            return ()
        return (value,) if isinstance(value, type) else value

    @field_validator("value_constraints", mode="before")
    @classmethod
    def _wrap_constraint(cls, value: Any) -> Any:
        return (value,) if isinstance(value, str) else value


class ChildDeclaration(FrozenModel):
    """Declared settings for a child node definition."""

    auto_created: bool = False
    mandatory: bool = False
    on_parent_version: Annotated[
        OnParentVersion | Unset, Field(description="On-parent-version action; UNSET is not applied.")
    ] = UNSET
    protected: bool = False
    required_primary_type_names: tuple[str, ...] = ()
    """Declared required primary types. Programmatic required types are merged after these."""

    default_primary_type_name: str = ""
    """Declared default primary type; blank means none."""

    same_name_siblings: bool = False

    @field_validator("required_primary_type_names", mode="before")
    @classmethod
    def _required_type_names(cls, value: Any) -> Any:
        return _as_names(value)

    @field_validator("default_primary_type_name", mode="before")
    @classmethod
    def _default_type_name(cls, value: Any) -> Any:
        return "" if value is None else _as_name(value)


__all__ = (
    "ChildDeclaration",
    "DefaultValues",
    "NodeDeclaration",
    "OtherValue",
    "PropertyDeclaration",
)
