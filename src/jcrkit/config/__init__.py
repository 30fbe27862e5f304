# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Settings for jcrkit."""

from jcrkit.config.settings import (
    DEFAULT_SELECTOR_NAME_STRATEGY,
    JcrKitSettings,
    get_settings,
    reset_settings,
)


__all__ = ("DEFAULT_SELECTOR_NAME_STRATEGY", "JcrKitSettings", "get_settings", "reset_settings")
