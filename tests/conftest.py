# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for tokenized version tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()
