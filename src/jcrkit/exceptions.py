# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unified exception hierarchy for jcrkit.

All jcrkit exceptions inherit from `JcrKitError`. Every error here is a deterministic
configuration or programmer error: none are retryable, and none are swallowed internally.
"""

from __future__ import annotations

from typing import Any, ClassVar


class JcrKitError(Exception):
    """Base exception for all jcrkit errors.

    Provides structured error information including details and suggestions
    for resolution.
    """

    _detail_keys: ClassVar[tuple[str, ...]] = (
        "literal",
        "path",
        "offset",
        "prefix",
        "uri",
        "strategy",
        "candidates",
    )

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        """Initialize jcrkit error.

        Args:
            message: Human-readable error message
            details: Additional context about the error
            suggestions: Actionable suggestions for resolving the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return descriptive error message with context details."""
        parts = [self.message]
        if detail_parts := [
            f"{key}: {self.details[key]!r}" for key in self._detail_keys if key in self.details
        ]:
            parts.append(f"({', '.join(detail_parts)})")
        return " ".join(parts)


class ConfigurationError(JcrKitError):
    """Configuration and static declaration errors.

    Raised for invalid settings, or when a scope or literal group is declared inconsistently.
    """


class NamespaceUnknownError(JcrKitError):
    """A namespace binding could not resolve a prefix or URI."""


class PathError(JcrKitError):
    """Base class for errors raised while parsing a path."""


class MalformedPathError(PathError):
    """The path text is syntactically invalid.

    `offset` is the zero-based character position at which the problem was detected.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str,
        offset: int,
        suggestions: list[str] | None = None,
    ) -> None:
        super().__init__(
            message, details={"path": path, "offset": offset}, suggestions=suggestions
        )
        self.path = path
        self.offset = offset


class UnresolvedNamespacePrefixError(PathError):
    """A prefixed path segment could not be resolved to a namespace URI."""

    def __init__(self, message: str, *, path: str, prefix: str) -> None:
        super().__init__(
            message,
            details={"path": path, "prefix": prefix},
            suggestions=[
                "Pass a NamespaceBinding that maps the prefix, or use the '{uri}name' form."
            ],
        )
        self.path = path
        self.prefix = prefix


class SchemaError(JcrKitError):
    """Base class for errors raised while compiling declarations or selector tables."""


class InvalidPropertyDefinitionError(SchemaError):
    """A property declaration combines settings that cannot be applied together."""

    def __init__(self, message: str, *, literal: str) -> None:
        super().__init__(message, details={"literal": literal})
        self.literal = literal


class ConflictingDefaultPrimaryTypeError(SchemaError):
    """A child declaration resolves to more than one default primary type."""

    def __init__(self, message: str, *, literal: str, candidates: tuple[str, ...]) -> None:
        super().__init__(
            message,
            details={"literal": literal, "candidates": candidates},
            suggestions=[
                "Declare the default primary type either in the declaration or via "
                "default_primary_type(), not both."
            ],
        )
        self.literal = literal
        self.candidates = candidates


class SchemaInstantiationError(SchemaError):
    """A selector name strategy could not be imported or constructed."""

    def __init__(self, message: str, *, strategy: str) -> None:
        super().__init__(
            message,
            details={"strategy": strategy},
            suggestions=["Strategies must be importable and constructible without arguments."],
        )
        self.strategy = strategy


class InvalidSelectorNamesError(SchemaError):
    """A selector name strategy returned a table that is not total or not unique."""


__all__ = (
    "ConfigurationError",
    "ConflictingDefaultPrimaryTypeError",
    "InvalidPropertyDefinitionError",
    "InvalidSelectorNamesError",
    "JcrKitError",
    "MalformedPathError",
    "NamespaceUnknownError",
    "PathError",
    "SchemaError",
    "SchemaInstantiationError",
    "UnresolvedNamespacePrefixError",
)
