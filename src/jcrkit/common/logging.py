# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Set up a logger with optional rich formatting."""

from __future__ import annotations

import logging

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler


if TYPE_CHECKING:
    from jcrkit.config.settings import JcrKitSettings


def get_rich_handler(**kwargs: Any) -> RichHandler:
    """Build a `RichHandler` writing to stderr."""
    return RichHandler(
        console=Console(stderr=True, markup=True, soft_wrap=True), markup=False, **kwargs
    )


def setup_logger(
    name: str | None = "jcrkit",
    *,
    level: int = logging.WARNING,
    rich: bool = True,
    rich_options: dict[str, Any] | None = None,
) -> logging.Logger:
    """Set up a logger with optional rich formatting."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not rich:
        if not logger.handlers:
            logger.addHandler(logging.StreamHandler())
        return logger
    handler = get_rich_handler(**(rich_options or {}))
    # Clear existing handlers to prevent duplication
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def configure_logging(settings: JcrKitSettings | None = None) -> logging.Logger:
    """Configure the `jcrkit` logger from settings."""
    if settings is None:
        from jcrkit.config.settings import get_settings

        settings = get_settings()
    return setup_logger("jcrkit", level=settings.log_level, rich=settings.rich_logging)


__all__ = ("configure_logging", "get_rich_handler", "setup_logger")
