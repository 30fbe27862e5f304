# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Global pytest configuration and fixtures for jcrkit tests."""

from __future__ import annotations

import os

from collections.abc import Iterator
from pathlib import Path

import pytest

from jcrkit.config.settings import reset_settings
from jcrkit.path.namespaces import MappingNamespaceBinding
from tests.fixtures.structure import NS, PREFIX


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test without ambient `JCRKIT_*` variables or `.env` files.

    Settings are cached process-wide, so the cache is dropped before and after each test.
    """
    for key in [key for key in os.environ if key.upper().startswith("JCRKIT_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def binding() -> MappingNamespaceBinding:
    """The JCR built-in namespaces plus the test namespace."""
    return MappingNamespaceBinding.standard({PREFIX: NS})
