# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Shared utilities."""

from jcrkit.common.logging import configure_logging, setup_logger


__all__ = ("configure_logging", "setup_logger")
