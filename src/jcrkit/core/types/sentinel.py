# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Defines unique sentinel objects for "not given" defaults in declaration records."""

from __future__ import annotations

import sys as _sys

from threading import Lock as _Lock
from typing import Any, Self, cast

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema


_lock = _Lock()
_registry: dict[str, Sentinel] = {}


class Sentinel:
    """Create a unique sentinel object.

    Sentinels are singletons per (class, module, name): constructing one twice returns the same
    object, which keeps identity checks (`value is UNSET`) valid across pickling and re-imports.
    Sentinels are falsy.
    """

    __slots__ = ("module_name", "name")

    name: str
    module_name: str

    def __new__(cls, name: str | None = None, module_name: str | None = None) -> Self:
        """Return the registered sentinel for `name`, creating it on first use."""
        name = (name or cls.__name__.upper()).strip()
        module_name = module_name or cls.__module__
        registry_key = _sys.intern(f"{cls.__module__}-{cls.__qualname__}-{module_name}-{name}")
        if (existing := _registry.get(registry_key)) is not None:
            return cast(Self, existing)
        new = super().__new__(cls)
        object.__setattr__(new, "name", name)
        object.__setattr__(new, "module_name", module_name)
        with _lock:
            return cast(Self, _registry.setdefault(registry_key, new))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        """Return a string representation of the sentinel."""
        return self.name

    def __repr__(self) -> str:
        """Return a string representation of the sentinel."""
        return f"{type(self).__name__}(name={self.name}, module_name={self.module_name})"

    def __reduce__(self) -> tuple[type[Self], tuple[str, str]]:
        """Return state information for pickling."""
        return (type(self), (self.name, self.module_name))

    def __hash__(self) -> int:
        return hash((type(self).__qualname__, self.name, self.module_name))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate sentinels by identity and serialize them by name."""
        return core_schema.is_instance_schema(
            cls, serialization=core_schema.plain_serializer_function_ser_schema(str)
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe sentinels as their name string."""
        return {
            "type": "string",
            "description": f"{cls.__name__} sentinel; the value is not applied.",
        }


class Unset(Sentinel):
    """A sentinel value to indicate that a value is unset and must not be applied."""

    __slots__ = ()

    def __new__(cls, name: str | None = None, module_name: str | None = None) -> Self:
        """Create (or fetch) the UNSET sentinel."""
        return super().__new__(cls, name or "UNSET", module_name or __name__)


UNSET: Unset = Unset()


def is_unset(value: object) -> bool:
    """Return True if `value` is the `UNSET` sentinel."""
    return value is UNSET


__all__ = ("UNSET", "Sentinel", "Unset", "is_unset")
