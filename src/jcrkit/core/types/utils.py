# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

# sourcery skip: no-complex-if-expressions
"""Common utilities for model type handling."""

from typing import Any, cast

import textcase

from pydantic.fields import ComputedFieldInfo, FieldInfo


def clean_sentinel_from_schema(schema: dict[str, Any]) -> None:
    """Remove `Unset` defaults from a model's JSON schema.

    Used as the `json_schema_extra` callback for models that default fields to `UNSET`.
    """

    def _clean_property(prop_schema: dict[str, Any]) -> None:
        if prop_schema.get("default") in ("Unset", "UNSET"):
            del prop_schema["default"]
        if "anyOf" in prop_schema:
            any_of = prop_schema["anyOf"]
            if any_of == []:
                del prop_schema["anyOf"]
            elif len(any_of) == 1:
                single_schema = any_of[0]
                del prop_schema["anyOf"]
                for key, value in single_schema.items():
                    prop_schema.setdefault(key, value)
        if "items" in prop_schema and isinstance(prop_schema["items"], dict):
            _clean_property(prop_schema["items"])

    for prop_schema in schema.get("properties", {}).values():
        _clean_property(prop_schema)
    for def_schema in schema.get("$defs", {}).values():
        for prop_schema in def_schema.get("properties", {}).values():
            _clean_property(prop_schema)


def generate_title(model: type[Any]) -> str:
    """Generate a title for a model."""
    model_name = getattr(model, "__name__", None) or type(model).__name__
    return textcase.title(model_name.replace("Model", ""))


def generate_field_title(name: str, info: FieldInfo | ComputedFieldInfo) -> str:
    """Generate a title for a model field."""
    if titled := getattr(info, "title", None):
        return titled
    if aliased := info.alias or (
        hasattr(info, "serialization_alias") and cast(FieldInfo, info).serialization_alias
    ):
        return textcase.sentence(aliased)
    return textcase.sentence(name)


__all__ = ("clean_sentinel_from_schema", "generate_field_title", "generate_title")
