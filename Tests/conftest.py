"""
Root conftest.py for shared test fixtures and configuration.
"""

import pytest
from loguru import logger

from navstack import config as navstack_config


# ========== Test Environment Isolation ==========

@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path):
    """Point the config file at a per-test location and drop any cached config."""
    config_path = tmp_path / "config" / "navstack" / "config.toml"
    monkeypatch.setattr(navstack_config, "DEFAULT_CONFIG_PATH", config_path)
    monkeypatch.setattr(navstack_config, "_CONFIG_CACHE", None)
    monkeypatch.delenv(navstack_config.ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(navstack_config.ENV_LOGGING_ENABLED, raising=False)
    yield config_path


# ========== Logging Fixtures ==========

@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)


# ========== Test Markers ==========

def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that don't require external resources")
    config.addinivalue_line("markers", "integration: Tests that run a Textual app")
    config.addinivalue_line("markers", "asyncio: Async tests using asyncio")
