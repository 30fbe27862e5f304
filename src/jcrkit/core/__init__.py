# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Core building blocks shared by the path, literal and schema packages."""

from jcrkit.core.types import (
    BASEDMODEL_CONFIG,
    FROZEN_BASEDMODEL_CONFIG,
    UNSET,
    BasedModel,
    BaseEnum,
    FrozenModel,
    Sentinel,
    Unset,
    is_unset,
)


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
)
