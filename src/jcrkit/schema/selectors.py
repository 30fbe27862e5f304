# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Selector name assignment for query sources.

Sources whose selector names must not collide are grouped by a `SchemaTag` declared on an
enclosing scope. A source type with no tagged scope forms an implicit group of its own members.
Each group's table is computed once by its naming strategy, checked, and cached for the life of
the process.
"""

from __future__ import annotations

import logging

from collections.abc import Mapping, Sequence
from importlib import import_module
from threading import Lock
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from jcrkit.exceptions import ConfigurationError, InvalidSelectorNamesError, SchemaInstantiationError
from jcrkit.literal.base import SourceLiteral, initials
from jcrkit.literal.scope import SchemaTag


if TYPE_CHECKING:
    from collections.abc import Iterator


logger = logging.getLogger(__name__)

_table_lock = Lock()
_tables: dict[SchemaTag, MappingProxyType[SourceLiteral, str]] = {}


@runtime_checkable
class SelectorNameStrategy(Protocol):
    """Assigns a selector name to every source in a schema group.

    Implementations are constructed without arguments. The returned mapping must cover every
    source, and its names must be unique.
    """

    def generate_selectors(self, sources: Sequence[SourceLiteral]) -> Mapping[SourceLiteral, str]:
        """Map each source to its selector name."""
        ...


class DefaultSelectorNameStrategy:
    """Names each source by the initials of its symbolic name.

    The first source with given initials gets them as-is; later ones get a counter suffix starting
    at 2: `CUSTOMER` -> `c`, `CREATED_INVOICE` -> `ci`, `COMPLETED_INVOICE` -> `ci2`.
    """

    def generate_selectors(self, sources: Sequence[SourceLiteral]) -> Mapping[SourceLiteral, str]:
        counts: dict[str, int] = {}
        result: dict[SourceLiteral, str] = {}
        for source in sources:
            key = initials(source.name)
            counts[key] = count = counts.get(key, 0) + 1
            result[source] = key if count == 1 else f"{key}{count}"
        return result


def resolve_schema(source_type: type[SourceLiteral]) -> SchemaTag:
    """Find the schema group of `source_type`.

    Walks outward from the declaring scope to the first schema tag; without one, the group is
    `source_type` alone.
    """
    scope = source_type.declaring_scope()
    tag = scope.resolve_schema() if scope is not None else None
    if tag is None:
        return SchemaTag.implicit_for(source_type)
    if source_type not in tag.members:
        raise ConfigurationError(
            f"{source_type.__qualname__} is not a member of the schema declared for scope "
            f"{scope.qualname!r}",
            details={"literal": source_type.__qualname__},
            suggestions=[f"Add {source_type.__qualname__} to the scope's tag_schema call."],
        )
    return tag


def _strategy_path(strategy: type | str) -> str:
    if isinstance(strategy, str):
        return strategy
    return f"{strategy.__module__}:{strategy.__qualname__}"


def load_strategy(strategy: type[SelectorNameStrategy] | str | None = None) -> SelectorNameStrategy:
    """Construct a naming strategy from a class or a `module:Class` import path.

    `None` selects the strategy named by `JcrKitSettings.selector_name_strategy`.

    Raises:
        SchemaInstantiationError: If the strategy cannot be imported or constructed, or does not
            implement `generate_selectors`.
    """
    if strategy is None:
        from jcrkit.config.settings import get_settings

        strategy = get_settings().selector_name_strategy
    path = _strategy_path(strategy)
    try:
        if isinstance(strategy, str):
            module_name, _, qualname = strategy.partition(":")
            target: object = import_module(module_name)
            for attribute in qualname.split("."):
                target = getattr(target, attribute)
        else:
            target = strategy
        if not callable(target):
            raise TypeError(f"{path} is not a class")
        instance = target()
    except Exception as e:
        raise SchemaInstantiationError(
            f"Cannot instantiate selector name strategy {path}", strategy=path
        ) from e
    if not isinstance(instance, SelectorNameStrategy):
        raise SchemaInstantiationError(
            f"{path} does not implement generate_selectors", strategy=path
        )
    return instance


def _sources(tag: SchemaTag) -> Iterator[SourceLiteral]:
    for member_type in tag.members:
        yield from member_type


def _check_table(
    tag: SchemaTag, sources: Sequence[SourceLiteral], table: Mapping[SourceLiteral, str]
) -> MappingProxyType[SourceLiteral, str]:
    strategy = _strategy_path(tag.strategy) if tag.strategy is not None else "default"
    if missing := [source for source in sources if source not in table]:
        raise InvalidSelectorNamesError(
            f"Selector name strategy left {len(missing)} source(s) unnamed",
            details={"strategy": strategy, "candidates": tuple(str(s) for s in missing)},
        )
    if extra := [source for source in table if source not in sources]:
        raise InvalidSelectorNamesError(
            "Selector name strategy named sources outside the schema",
            details={"strategy": strategy, "candidates": tuple(str(s) for s in extra)},
        )
    names = [table[source] for source in sources]
    if any(not isinstance(name, str) or not name for name in names):
        raise InvalidSelectorNamesError(
            "Selector names must be non-empty strings", details={"strategy": strategy}
        )
    if len(set(names)) != len(names):
        duplicates = tuple(sorted({name for name in names if names.count(name) > 1}))
        raise InvalidSelectorNamesError(
            "Selector names must be unique within a schema",
            details={"strategy": strategy, "candidates": duplicates},
        )
    return MappingProxyType({source: table[source] for source in sources})


def selector_names_for(tag: SchemaTag) -> MappingProxyType[SourceLiteral, str]:
    """The selector name table of a schema group, computed on first use and then cached.

    Sources are named in tag member order, then in definition order within each member.
    """
    if (table := _tables.get(tag)) is not None:
        return table
    sources = tuple(_sources(tag))
    strategy = load_strategy(tag.strategy)
    table = _check_table(tag, sources, strategy.generate_selectors(sources))
    logger.debug(
        "Assigned selector names for %s: %s",
        ", ".join(member.__qualname__ for member in tag.members),
        dict(table),
    )
    with _table_lock:
        return _tables.setdefault(tag, table)


def get_selector_names(source_type: type[SourceLiteral]) -> MappingProxyType[SourceLiteral, str]:
    """The selector name table of the schema group `source_type` belongs to."""
    return selector_names_for(resolve_schema(source_type))


__all__ = (
    "DefaultSelectorNameStrategy",
    "SelectorNameStrategy",
    "get_selector_names",
    "load_strategy",
    "resolve_schema",
    "selector_names_for",
)
