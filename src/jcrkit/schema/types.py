# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Repository value types: property type codes, versioning actions, query operators and typed values.

The integer codes match the ones a JCR repository uses, so definitions can be handed to a
repository type manager without translation.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Self

from pydantic import ConfigDict, Field

from jcrkit.core.types.enum import BaseEnum
from jcrkit.core.types.models import FROZEN_BASEDMODEL_CONFIG, FrozenModel


class PropertyType(int, BaseEnum):
    """Property value types, by repository type code."""

    UNDEFINED = 0
    STRING = 1
    BINARY = 2
    LONG = 3
    DOUBLE = 4
    DATE = 5
    BOOLEAN = 6
    NAME = 7
    PATH = 8
    REFERENCE = 9
    WEAKREFERENCE = 10
    URI = 11
    DECIMAL = 12


class OnParentVersion(int, BaseEnum):
    """What happens to an item when its parent node is checked in."""

    COPY = 1
    VERSION = 2
    INITIALIZE = 3
    COMPUTE = 4
    IGNORE = 5
    ABORT = 6


class QueryOperator(BaseEnum):
    """Comparison operators a property may advertise as available to queries."""

    EQUAL_TO = "jcr.operator.equal.to"
    NOT_EQUAL_TO = "jcr.operator.not.equal.to"
    LESS_THAN = "jcr.operator.less.than"
    LESS_THAN_OR_EQUAL_TO = "jcr.operator.less.than.or.equal.to"
    GREATER_THAN = "jcr.operator.greater.than"
    GREATER_THAN_OR_EQUAL_TO = "jcr.operator.greater.than.or.equal.to"
    LIKE = "jcr.operator.like"


class Value(FrozenModel):
    """A typed property value.

    Values compare and hash by `(type, value)`, so `Value.of(1)` (LONG) and `Value.of(1.0)` (DOUBLE)
    are distinct.
    """

    model_config = FROZEN_BASEDMODEL_CONFIG | ConfigDict(str_strip_whitespace=False)

    type: Annotated[PropertyType, Field(description="The repository type of the value.")]
    value: Annotated[
        bool | int | float | str,
        Field(description="The value; non-primitive types are carried in string form."),
    ]

    @classmethod
    def of(cls, value: bool | int | float | str | Decimal | date) -> Self:
        """Create a value, inferring the repository type from the Python type."""
        match value:
            case bool():
                return cls(type=PropertyType.BOOLEAN, value=value)
            case int():
                return cls(type=PropertyType.LONG, value=value)
            case float():
                return cls(type=PropertyType.DOUBLE, value=value)
            case str():
                return cls(type=PropertyType.STRING, value=value)
            case Decimal():
                return cls(type=PropertyType.DECIMAL, value=str(value))
            case datetime() | date():
                return cls(type=PropertyType.DATE, value=value.isoformat())
            case _:
                raise TypeError(f"Cannot infer a property type for {type(value).__name__}")

    @classmethod
    def of_enum(cls, member: Enum) -> Self:
        """A STRING value holding the symbolic name of an enum member."""
        return cls(type=PropertyType.STRING, value=member.name)

    def __str__(self) -> str:
        return str(self.value)


__all__ = ("OnParentVersion", "PropertyType", "QueryOperator", "Value")
