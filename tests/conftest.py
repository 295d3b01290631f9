"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from abhyas.api.config.DatabaseConfig import DatabaseConfig
from abhyas.api.link.LinkStore import LinkStore


def pytest_configure(config):
    for marker in ("unit", "integration", "link", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def abhyas_home(tmp_path: Path, monkeypatch) -> Path:
    """Point ABHYAS_HOME at a fresh directory that does not exist yet."""
    home = tmp_path / "abhyas-home"
    monkeypatch.setenv("ABHYAS_HOME", str(home))
    return home


@pytest.fixture
def database_config(abhyas_home: Path) -> DatabaseConfig:
    return DatabaseConfig()


@pytest.fixture
def store(database_config: DatabaseConfig) -> Iterator[LinkStore]:
    """An open LinkStore backed by an empty database under abhyas_home."""
    with LinkStore(database_config) as link_store:
        yield link_store
