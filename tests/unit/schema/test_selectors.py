# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for selector name assignment."""

from __future__ import annotations

import pytest

from jcrkit.exceptions import ConfigurationError, InvalidSelectorNamesError, SchemaInstantiationError
from jcrkit.literal import NodeLiteral, SchemaTag, Scope, StandardNodeType
from jcrkit.schema import (
    DefaultSelectorNameStrategy,
    get_selector_names,
    load_strategy,
    resolve_schema,
    selector_names_for,
)
from tests.fixtures.structure import SHOP, Archives, Documents, Nodes


pytestmark = [pytest.mark.unit]


class BasenameStrategy:
    """Names each source by its basename."""

    def generate_selectors(self, sources):
        return {source: source.basename for source in sources}


class ConstantStrategy:
    """Gives every source the same name."""

    def generate_selectors(self, sources):
        return dict.fromkeys(sources, "s")


class PartialStrategy:
    """Names only the first source."""

    def generate_selectors(self, sources):
        return {sources[0]: "first"}


class NeedsArguments:
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def generate_selectors(self, sources):
        return {}


class NotAStrategy:
    pass


def _tagged(name: str, strategy=None) -> type[NodeLiteral]:
    scope = Scope(name)

    class Sources(NodeLiteral, scope=scope):
        CUSTOMER = None
        CREATED_INVOICE = None
        COMPLETED_INVOICE = None

    scope.tag_schema(Sources, strategy=strategy)
    return Sources


def test_default_strategy_counts_collisions():
    assert DefaultSelectorNameStrategy().generate_selectors([
        Documents.CUSTOMER,
        Documents.CREATED_INVOICE,
        Archives.COMPLETED_INVOICE,
    ]) == {
        Documents.CUSTOMER: "c",
        Documents.CREATED_INVOICE: "ci",
        Archives.COMPLETED_INVOICE: "ci2",
    }


def test_schema_group_spans_tagged_members():
    names = get_selector_names(Documents)
    assert dict(names) == {
        Documents.CUSTOMER: "c",
        Documents.CREATED_INVOICE: "ci",
        Archives.COMPLETED_INVOICE: "ci2",
    }
    assert get_selector_names(Archives) is names
    assert Archives.COMPLETED_INVOICE.selector_name == "ci2"


def test_selector_table_is_read_only():
    with pytest.raises(TypeError):
        get_selector_names(Documents)[Documents.CUSTOMER] = "x"  # type: ignore[index]


def test_table_follows_definition_order():
    assert list(get_selector_names(Documents)) == [
        Documents.CUSTOMER,
        Documents.CREATED_INVOICE,
        Archives.COMPLETED_INVOICE,
    ]


def test_untagged_group_is_implicit():
    tag = resolve_schema(Nodes)
    assert tag.implicit
    assert tag.members == (Nodes,)
    assert dict(get_selector_names(Nodes)) == {Nodes.INVOICE: "i", Nodes.CUSTOMER: "c"}


def test_standard_types_get_selector_names():
    assert StandardNodeType.HIERARCHY_NODE.selector_name == "hn"
    assert StandardNodeType.FILE.selector_name == "f"
    assert StandardNodeType.FOLDER.selector_name == "f2"


def test_resolve_schema_finds_enclosing_tag():
    assert resolve_schema(Documents) is SHOP.schema


def test_source_outside_its_schema_is_rejected():
    scope = Scope("Partial")

    class Listed(NodeLiteral, scope=scope):
        ITEM = None

    class Unlisted(NodeLiteral, scope=scope):
        OTHER = None

    scope.tag_schema(Listed)
    with pytest.raises(ConfigurationError, match="not a member"):
        resolve_schema(Unlisted)


def test_tables_are_cached_per_group():
    tag = SchemaTag.implicit_for(Nodes)
    assert selector_names_for(tag) is selector_names_for(SchemaTag((Nodes,)))


def test_custom_strategy_class():
    sources = _tagged("Custom", BasenameStrategy)
    assert sources.CREATED_INVOICE.selector_name == "createdInvoice"


def test_custom_strategy_import_path():
    sources = _tagged("ByPath", "jcrkit.schema.selectors:DefaultSelectorNameStrategy")
    assert sources.COMPLETED_INVOICE.selector_name == "ci2"


@pytest.mark.parametrize(
    "strategy",
    [
        pytest.param("jcrkit.schema.selectors:Missing", id="missing-attribute"),
        pytest.param("jcrkit.no_such_module:Strategy", id="missing-module"),
        pytest.param(NeedsArguments, id="needs-arguments"),
        pytest.param(NotAStrategy, id="no-generate-selectors"),
    ],
)
def test_uninstantiable_strategy(strategy):
    with pytest.raises(SchemaInstantiationError) as exc_info:
        load_strategy(strategy)
    assert "strategy" in exc_info.value.details


@pytest.mark.parametrize(
    ("strategy", "message"),
    [
        pytest.param(ConstantStrategy, "unique", id="duplicates"),
        pytest.param(PartialStrategy, "unnamed", id="not-total"),
    ],
)
def test_invalid_tables_are_rejected(strategy, message: str):
    sources = _tagged(f"Invalid{strategy.__name__}", strategy)
    with pytest.raises(InvalidSelectorNamesError, match=message):
        get_selector_names(sources)


def test_default_strategy_comes_from_settings(monkeypatch: pytest.MonkeyPatch):
    assert isinstance(load_strategy(), DefaultSelectorNameStrategy)
    monkeypatch.setenv("JCRKIT_SELECTOR_NAME_STRATEGY", "jcrkit.no_such_module:Strategy")
    from jcrkit.config.settings import reset_settings

    reset_settings()
    with pytest.raises(SchemaInstantiationError):
        load_strategy()
