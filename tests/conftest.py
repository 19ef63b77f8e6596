"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def temp_cart_path(tmp_path: Path) -> Path:
    return tmp_path / "runmate" / "cart.json"


@pytest.fixture
def product_source():
    from fakes.fake_product_source import FakeProductSource

    return FakeProductSource()


@pytest.fixture
def admin_source():
    from fakes.fake_product_source import FakeAdminSource

    return FakeAdminSource()
