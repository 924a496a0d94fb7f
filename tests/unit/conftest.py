"""Fixtures for unit tests."""

from pathlib import Path

import pytest

from calculator_smoke_test.config import HarnessConfig
from calculator_smoke_test.testing.pages import write_site


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Create a calculator checkout that passes every check."""
    return write_site(tmp_path / "site")


@pytest.fixture
def config(site: Path) -> HarnessConfig:
    """Create a harness configuration rooted at the test site."""
    return HarnessConfig(root=site, settle_delay=0)
