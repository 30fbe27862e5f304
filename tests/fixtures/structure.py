# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Literal structure describing a small invoicing repository layout."""

from __future__ import annotations

from enum import Enum, auto

from jcrkit.literal import (
    ChildLiteral,
    NodeLiteral,
    PropertyLiteral,
    QueryLiteral,
    Scope,
    StandardNodeType,
    default_values,
)
from jcrkit.schema import ChildDeclaration, NodeDeclaration, PropertyDeclaration, PropertyType


NS = "http://example.com/jcrkit/test"
PREFIX = "test"

TEST = Scope("TestStructure", namespace=NS)


class Nodes(NodeLiteral, scope=TEST):
    """Custom node types."""

    INVOICE = NodeDeclaration(supertypes=("nt:resource",))
    CUSTOMER = None

    def supertypes(self):
        return ("nt:hierarchyNode",) if self is Nodes.INVOICE else ()


@default_values("CREATED")
class InvoiceStatus(Enum):
    """Possible states of an invoice."""

    CREATED = auto()
    STAGED = auto()
    SUBMITTED = auto()
    COMPLETED = auto()


class Properties(PropertyLiteral, scope=TEST):
    """Custom properties."""

    STATUS = PropertyDeclaration(constrain_as_enum=InvoiceStatus, auto_created=True)
    ORDER_DATE = PropertyDeclaration(required_type=PropertyType.DATE)
    NAME = PropertyDeclaration(required_type=PropertyType.STRING, value_constraints=r"[A-Za-z\. ]+")
    VERIFIED = PropertyDeclaration(required_type=PropertyType.BOOLEAN)
    NOTES = None


class Children(ChildLiteral, scope=TEST):
    """Child node slots."""

    LINE_ITEM = ChildDeclaration(required_primary_type_names=("nt:unstructured",))
    ATTACHMENT = ChildDeclaration(
        required_primary_type_names=(StandardNodeType.FILE, StandardNodeType.FOLDER)
    )
    CONTENT = None


QUERIES = Scope("Queries", parent=TEST, path_root=True)


class Queries(QueryLiteral, scope=QUERIES):
    """Stored queries."""

    VERIFIED_CUSTOMERS = None
    CREATED_INVOICES = None
    INVOICES_BY_CUSTOMER = None


SHOP = Scope("Shop", namespace="http://example.com/shop")
DOCUMENTS = Scope("Documents", parent=SHOP)


class Documents(NodeLiteral, scope=DOCUMENTS):
    """Live documents."""

    CUSTOMER = None
    CREATED_INVOICE = None


class Archives(NodeLiteral, scope=DOCUMENTS):
    """Archived documents."""

    COMPLETED_INVOICE = None


SHOP.tag_schema(Documents, Archives)


__all__ = (
    "DOCUMENTS",
    "NS",
    "PREFIX",
    "QUERIES",
    "SHOP",
    "TEST",
    "Archives",
    "Children",
    "Documents",
    "InvoiceStatus",
    "Nodes",
    "Properties",
    "Queries",
)
