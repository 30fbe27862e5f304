# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Base model implementations for jcrkit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from jcrkit.core.types.utils import (
    clean_sentinel_from_schema,
    generate_field_title,
    generate_title,
)


# ================================================
# *      Pydantic Base Implementations
# ================================================

BASEDMODEL_CONFIG = ConfigDict(
    arbitrary_types_allowed=True,
    field_title_generator=generate_field_title,
    model_title_generator=generate_title,
    serialize_by_alias=True,
    str_strip_whitespace=True,
    use_attribute_docstrings=True,
    validate_by_alias=True,
    validate_by_name=True,
    cache_strings="all",
    json_schema_extra=clean_sentinel_from_schema,
)
FROZEN_BASEDMODEL_CONFIG = BASEDMODEL_CONFIG | ConfigDict(frozen=True, extra="forbid")


class BasedModel(BaseModel):
    """A baser `BaseModel` for all models in jcrkit."""

    model_config = BASEDMODEL_CONFIG


class FrozenModel(BasedModel):
    """An immutable, hashable `BasedModel`.

    Declarations and compiled definitions are values: they compare and hash by content.
    """

    model_config = FROZEN_BASEDMODEL_CONFIG


__all__ = ("BASEDMODEL_CONFIG", "FROZEN_BASEDMODEL_CONFIG", "BasedModel", "FrozenModel")
