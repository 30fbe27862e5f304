# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Base models, enums and sentinels used throughout jcrkit."""

from jcrkit.core.types.enum import BaseEnum, name_variations
from jcrkit.core.types.models import (
    BASEDMODEL_CONFIG,
    FROZEN_BASEDMODEL_CONFIG,
    BasedModel,
    FrozenModel,
)
from jcrkit.core.types.sentinel import UNSET, Sentinel, Unset, is_unset


__all__ = (
    "BASEDMODEL_CONFIG",
    "FROZEN_BASEDMODEL_CONFIG",
    "UNSET",
    "BaseEnum",
    "BasedModel",
    "FrozenModel",
    "Sentinel",
    "Unset",
    "is_unset",
    "name_variations",
)
