"""Root pytest configuration and fixtures.

This module provides:
- A fixed-width, colourless console for rendering tests
- Isolation from TERMFLEX_* variables set in the developer's shell
"""

from __future__ import annotations

import io
import os
from typing import Generator

import pytest
from rich.console import Console

# =============================================================================
# Configuration Constants
# =============================================================================

TEST_CONSOLE_WIDTH = 40
ENV_PREFIX = "TERMFLEX_"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch) -> Generator[None, None, None]:
    """Remove TERMFLEX_* variables so defaults apply in every test."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def console() -> Console:
    """Console rendering into memory at a fixed width without colour."""
    return Console(
        width=TEST_CONSOLE_WIDTH,
        color_system=None,
        file=io.StringIO(),
        legacy_windows=False,
        highlight=False,
    )
