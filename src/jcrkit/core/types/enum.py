# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Base enum class for jcrkit's value enumerations."""

from __future__ import annotations

import contextlib

from collections.abc import Generator
from enum import Enum, unique
from types import MappingProxyType
from typing import Self, cast, override

import textcase


def name_variations(s: str) -> set[str]:
    """Generate the case variations of a symbolic name that we accept as aliases."""
    return {
        s,
        textcase.upper(s),
        textcase.lower(s),
        textcase.title(s),
        textcase.pascal(s),
        textcase.snake(s),
        textcase.kebab(s),
        textcase.sentence(s),
        textcase.camel(s),
    }


@unique
class BaseEnum(Enum):
    """An enum class that provides common functionality for jcrkit's enums.

    Enum members must be unique and either all strings or all integers. `BaseEnum` provides
    lenient string conversion (`from_string`), membership checks, and member/value iteration.
    """

    @staticmethod
    def _deconstruct_string(value: str) -> list[str]:
        """Deconstruct a string into its lowercase component parts."""
        value = value.strip().lower().replace("-", "_").replace(" ", "_")
        return [v for v in value.split("_") if v]

    @property
    def aka(self) -> tuple[str, ...]:
        """Return the aliases of the enum member."""
        names = {self.name, self.as_title, self.variable}
        if isinstance(self.value, str):
            names.add(self.value)
        names |= {n for name in names.copy() for n in name_variations(name)}
        return tuple(sorted(names))

    @classmethod
    @override
    def _missing_(cls, value: object) -> Self | None:
        """Handle missing values when converting from a string to an enum member."""
        if not isinstance(value, str):
            return None
        with contextlib.suppress(ValueError):
            return cls.from_string(value)
        return None

    @classmethod
    def aliases(cls) -> MappingProxyType[str, Self]:
        """Map every alias of every member to the member."""
        return MappingProxyType({alias: member for member in cls for alias in member.aka})

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Convert a string to the corresponding enum member.

        Accepts the member value, the member name, and common case variations of either. For
        int-valued enums, a string of digits is treated as the value.
        """
        text = str(value).strip()
        if cls._value_type() is int and text.lstrip("-").isdigit():
            return cls(int(text))
        lowered = text.lower()
        if found := next(
            (
                member
                for member in cls
                if str(member.value).lower() == lowered or member.name.lower() == lowered
            ),
            None,
        ):
            return found
        if found := next(
            (member for alias, member in cls.aliases().items() if alias.lower() == lowered), None
        ):
            return found
        value_parts = cls._deconstruct_string(text)
        if found := next(
            (member for member in cls if cls._deconstruct_string(member.name) == value_parts), None
        ):
            return found
        raise ValueError(f"{value} is not a valid {cls.__qualname__} member")

    @classmethod
    def _value_type(cls) -> type[int | str]:
        """Return the type of the enum values."""
        if all(isinstance(member.value, str) for member in cls):
            return str
        if all(isinstance(member.value, int) for member in cls):
            return int
        raise TypeError(
            f"All members of {cls.__qualname__} must have the same value type and must be either str or int."
        )

    @classmethod
    def is_member(cls, value: str | int) -> bool:
        """Check if a value names or equals a member of the enum."""
        try:
            cls(value) if isinstance(value, int) else cls.from_string(value)
        except ValueError:
            return False
        return True

    @property
    def variable(self) -> str:
        """Return the member name as a snake-case variable name."""
        return textcase.snake(self.name)

    @property
    def as_title(self) -> str:
        """Return the title-cased representation of the enum member."""
        return textcase.title(self.name)

    @classmethod
    def members(cls) -> Generator[Self]:
        """Yield all members of the enum."""
        yield from cls

    @classmethod
    def values(cls) -> Generator[str | int]:
        """Yield all member values."""
        yield from (cast(str | int, member.value) for member in cls)


__all__ = ("BaseEnum", "name_variations")
