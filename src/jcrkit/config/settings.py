# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""
jcrkit configuration settings.

Configuration sources (priority order):
1. Explicit keyword arguments
2. Environment variables
3. `.env` file
4. Defaults

Environment Variables:
    JCRKIT_LOG_LEVEL: Log level name or number (default: WARNING)
    JCRKIT_RICH_LOGGING: Use a rich console handler (default: true)
    JCRKIT_NAMESPACES: JSON object of extra prefix -> URI bindings
    JCRKIT_SELECTOR_NAME_STRATEGY: Import path of the default selector name strategy
"""

from __future__ import annotations

import logging
import re

from functools import cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_IMPORT_PATH = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")

DEFAULT_SELECTOR_NAME_STRATEGY = "jcrkit.schema.selectors:DefaultSelectorNameStrategy"


class JcrKitSettings(BaseSettings):
    """jcrkit configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="JCRKIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_level: Annotated[
        int,
        Field(
            default=logging.WARNING,
            description="Level for the `jcrkit` logger. Accepts a level name or number.",
        ),
    ]

    rich_logging: Annotated[
        bool,
        Field(default=True, description="Format log records with a rich console handler."),
    ]

    namespaces: Annotated[
        dict[str, str],
        Field(
            default_factory=dict,
            description="Extra prefix -> namespace URI bindings, merged over the JCR built-ins.",
        ),
    ]

    selector_name_strategy: Annotated[
        str,
        Field(
            default=DEFAULT_SELECTOR_NAME_STRATEGY,
            description="Import path (`module:Class`) of the strategy used by schema tags that name none.",
        ),
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_log_level(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip().isdigit():
            level = logging.getLevelNamesMapping().get(value.strip().upper())
            if level is None:
                raise ValueError(f"Unknown log level: {value}")
            return level
        return value

    @field_validator("selector_name_strategy")
    @classmethod
    def _check_import_path(cls, value: str) -> str:
        if not _IMPORT_PATH.match(value):
            raise ValueError(f"Expected an import path like 'package.module:Class', got {value!r}")
        return value


@cache
def get_settings() -> JcrKitSettings:
    """Get cached settings instance."""
    return JcrKitSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next `get_settings` call reloads them."""
    get_settings.cache_clear()


__all__ = ("DEFAULT_SELECTOR_NAME_STRATEGY", "JcrKitSettings", "get_settings", "reset_settings")
