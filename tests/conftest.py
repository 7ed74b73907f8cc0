"""Shared fixtures: every test gets its own store and a clean logging config."""

import pytest
import structlog

from simplememorystore.core import Store


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def seeded_store() -> Store:
    return Store().init_with_default_data()


@pytest.fixture(autouse=True)
def _reset_structlog():
    # CLI tests call configure_logging(); undo it so later tests see debug events.
    yield
    structlog.reset_defaults()
